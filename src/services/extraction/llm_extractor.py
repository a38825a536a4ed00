"""
AI-based invoice field extraction.

Sends the raw invoice text to the configured language model and validates
whatever fields come back. Failures (network, timeout, malformed output)
propagate to the caller; the upload pipeline treats them as "no result".
"""

import json
import math
from typing import Any, Optional, Protocol
from loguru import logger
from ..invoice_types import ExtractionResult
from ..llm_client import LLMClient

EXTRACTION_INSTRUCTION = (
    "You extract data from supplier invoices. "
    "Return a single JSON object with these keys: "
    "supplier (string), invoice_number (string), issue_date (YYYY-MM-DD), "
    "due_date (YYYY-MM-DD), amount (number, total amount payable), "
    "status (one of Upcoming, Due soon, Overdue, Paid), "
    "category (e.g. Marketing, Utilities, Staff, Software, Rent, Other). "
    "Omit any key you cannot determine. Do not add commentary."
)

TEXT_FIELDS = ("supplier", "status", "category")
DATE_FIELDS = ("issue_date", "due_date")


class InvoiceFieldExtractor(Protocol):
    """Anything that can turn raw invoice text into partial invoice fields"""

    async def extract(self, text: str) -> Optional[ExtractionResult]:
        ...


def _clean_text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def parse_ai_fields(payload: dict) -> ExtractionResult:
    """
    Validate a decoded model response into an ExtractionResult.

    Rules:
    - supplier / status / category: non-empty strings after trimming
    - invoice_number: non-empty string, or a number converted to text
    - amount: finite int/float only (strings and booleans are ignored)
    - issue_date / due_date: non-empty strings, passed through unchanged
    """
    fields: dict[str, Any] = {}

    for name in TEXT_FIELDS:
        value = _clean_text(payload.get(name))
        if value is not None:
            fields[name] = value

    invoice_number = payload.get("invoice_number")
    if isinstance(invoice_number, (int, float)) and not isinstance(invoice_number, bool):
        invoice_number = str(invoice_number)
    invoice_number = _clean_text(invoice_number)
    if invoice_number is not None:
        fields["invoice_number"] = invoice_number

    amount = payload.get("amount")
    if isinstance(amount, (int, float)) and not isinstance(amount, bool) and math.isfinite(amount):
        fields["amount"] = float(amount)

    for name in DATE_FIELDS:
        value = payload.get(name)
        if isinstance(value, str) and value.strip():
            fields[name] = value

    return ExtractionResult(**fields)


def _decode_json_object(content: str) -> dict:
    text = content.strip()
    # Some models wrap JSON in a markdown fence even in JSON mode
    if text.startswith("```"):
        text = text.strip("`")
        if text.lower().startswith("json"):
            text = text[4:]
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object from the model, got {type(data).__name__}")
    return data


class LLMInvoiceExtractor:
    """Production extractor bound to the configured chat completions endpoint"""

    def __init__(self, client: LLMClient | None = None):
        self.client = client or LLMClient()

    async def extract(self, text: str) -> Optional[ExtractionResult]:
        if not self.client.configured:
            logger.warning(
                "LLM not configured - skipping AI extraction. "
                "Set LLM_BASE_URL, LLM_API_KEY and LLM_DEPLOYMENT to enable it."
            )
            return None

        content = await self.client.complete(EXTRACTION_INSTRUCTION, text, json_mode=True)
        result = parse_ai_fields(_decode_json_object(content))

        logger.info(
            "AI extraction result",
            fields=sorted(result.model_dump(exclude_none=True).keys()),
        )
        return result
