"""
Tests for listing, paying and archiving invoices through the API.
"""

from src.services.storage.seed_data import DEMO_INVOICES


def _seed(store, count=3):
    return [store.create_invoice(dict(inv)) for inv in DEMO_INVOICES[:count]]


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_list_invoices_returns_active_only(client, store):
    first, second, third = _seed(store)
    store.archive(second["id"])

    r = client.get("/api/invoices")
    assert r.status_code == 200

    ids = [inv["id"] for inv in r.json()["invoices"]]
    assert ids == [first["id"], third["id"]]


def test_list_invoices_empty(client):
    r = client.get("/api/invoices")
    assert r.status_code == 200
    assert r.json() == {"invoices": []}


def test_mark_paid(client, store):
    invoice = _seed(store, 1)[0]

    r = client.post(f"/api/invoices/{invoice['id']}/mark-paid")
    assert r.status_code == 200

    data = r.json()
    assert data["id"] == invoice["id"]
    assert data["status"] == "Paid"
    assert store.get_invoice(invoice["id"])["status"] == "Paid"


def test_mark_paid_unknown_invoice_returns_404(client):
    r = client.post("/api/invoices/999/mark-paid")
    assert r.status_code == 404
    assert r.json()["detail"] == "Invoice not found"


def test_archive(client, store):
    invoice = _seed(store, 1)[0]

    r = client.post(f"/api/invoices/{invoice['id']}/archive")
    assert r.status_code == 200

    data = r.json()
    assert data["success"] is True
    assert data["invoice"]["archived"] == 1
    assert client.get("/api/invoices").json()["invoices"] == []


def test_archive_unknown_invoice_returns_404(client):
    r = client.post("/api/invoices/999/archive")
    assert r.status_code == 404


def test_non_numeric_id_returns_422(client):
    r = client.post("/api/invoices/abc/archive")
    assert r.status_code == 422
