"""
SQLite-based invoice storage for production use.

Provides persistent storage of invoices with SQL query capabilities.
"""

import sqlite3
from typing import Optional
from pathlib import Path
from loguru import logger
from ..invoice_types import PAID_STATUS
from .invoice_store_base import InvoiceStoreBase
from .invoices import INVOICE_COLUMNS
from .seed_data import DEMO_INVOICES

_INSERT_SQL = """
    INSERT INTO invoices (supplier, invoice_number, issue_date, due_date, amount,
                          status, category, source, week_label, archived)
    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
"""


class SQLiteInvoiceStore(InvoiceStoreBase):
    """
    SQLite-backed invoice store with persistent storage.

    Features:
    - Persistent storage across application restarts
    - Optional demo data seeding on an empty table
    - Thread-safe operations (via SQLite's built-in locking)
    """

    def __init__(self, db_path: str = "data/cashflow.sqlite", seed_demo_data: bool = False):
        """
        Initialize store with database path.

        Args:
            db_path: Path to SQLite database file; parent directories are created
            seed_demo_data: Insert demo invoices when the table is empty
        """
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_database()
        if seed_demo_data:
            self._seed_demo_invoices()

    def _init_database(self):
        """Create invoices table if it doesn't exist"""
        conn = sqlite3.connect(self.db_path)
        cursor = conn.cursor()

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS invoices (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                supplier TEXT,
                invoice_number TEXT,
                issue_date TEXT,
                due_date TEXT,
                amount REAL,
                status TEXT,
                category TEXT,
                source TEXT,
                week_label TEXT,
                archived INTEGER DEFAULT 0
            )
        """)

        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_invoices_archived
            ON invoices(archived)
        """)

        conn.commit()
        conn.close()

    def _seed_demo_invoices(self):
        conn = self._get_connection()
        cursor = conn.cursor()

        cursor.execute("SELECT COUNT(*) AS count FROM invoices")
        if cursor.fetchone()["count"] == 0:
            cursor.executemany(_INSERT_SQL, [self._row_values(inv) for inv in DEMO_INVOICES])
            conn.commit()
            logger.info("Seeded invoices table with demo data", count=len(DEMO_INVOICES))

        conn.close()

    def _get_connection(self) -> sqlite3.Connection:
        """Get database connection with row factory"""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    @staticmethod
    def _row_values(invoice_data: dict) -> tuple:
        values = [invoice_data.get(column) for column in INVOICE_COLUMNS]
        values[-1] = invoice_data.get("archived") or 0
        return tuple(values)

    def create_invoice(self, invoice_data: dict) -> dict:
        """
        Insert a new invoice.

        Args:
            invoice_data: Dictionary containing invoice columns

        Returns:
            The stored row, including its assigned ID
        """
        conn = self._get_connection()
        cursor = conn.cursor()

        cursor.execute(_INSERT_SQL, self._row_values(invoice_data))
        invoice_id = cursor.lastrowid

        conn.commit()
        conn.close()

        return self.get_invoice(invoice_id)

    def get_invoice(self, invoice_id: int) -> Optional[dict]:
        conn = self._get_connection()
        cursor = conn.cursor()

        cursor.execute("SELECT * FROM invoices WHERE id = ?", (invoice_id,))

        row = cursor.fetchone()
        conn.close()

        return dict(row) if row is not None else None

    def list_invoices(self, include_archived: bool = False) -> list:
        conn = self._get_connection()
        cursor = conn.cursor()

        if include_archived:
            cursor.execute("SELECT * FROM invoices ORDER BY id")
        else:
            cursor.execute("SELECT * FROM invoices WHERE archived = 0 ORDER BY id")

        rows = cursor.fetchall()
        conn.close()

        return [dict(row) for row in rows]

    def _update(self, invoice_id: int, sql: str, params: tuple) -> Optional[dict]:
        conn = self._get_connection()
        cursor = conn.cursor()

        cursor.execute(sql, params)
        rows_affected = cursor.rowcount

        conn.commit()
        conn.close()

        if rows_affected == 0:
            return None
        return self.get_invoice(invoice_id)

    def mark_paid(self, invoice_id: int) -> Optional[dict]:
        """Set status to Paid; returns None if the invoice does not exist"""
        return self._update(
            invoice_id,
            "UPDATE invoices SET status = ? WHERE id = ?",
            (PAID_STATUS, invoice_id),
        )

    def archive(self, invoice_id: int) -> Optional[dict]:
        """Set archived = 1; returns None if the invoice does not exist"""
        return self._update(
            invoice_id,
            "UPDATE invoices SET archived = 1 WHERE id = ?",
            (invoice_id,),
        )
