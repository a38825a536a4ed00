"""
Integration tests against a real LLM endpoint.

These tests require the LLM to be configured:
- Set LLM_BASE_URL, LLM_API_KEY and LLM_DEPLOYMENT in .env

Run with: pytest --run-integration
"""

import asyncio
import pytest
from src.core.config import settings
from src.services.extraction import LLMInvoiceExtractor
from src.services.llm_client import LLMClient

LLM_CONFIGURED = bool(settings.llm_base_url and settings.llm_api_key and settings.llm_deployment)
skip_if_no_llm = pytest.mark.skipif(
    not LLM_CONFIGURED,
    reason="LLM not configured (set LLM_BASE_URL, LLM_API_KEY and LLM_DEPLOYMENT)",
)

SAMPLE_INVOICE = """
TAX INVOICE
Supplier: Northwind Utilities
Invoice Number: NW-1120
Issue Date: 18 October 2024
Due Date: 5 December 2024
Electricity - October
Total Due: $860.00
"""


@skip_if_no_llm
@pytest.mark.integration
def test_llm_extracts_core_fields():
    result = asyncio.run(LLMInvoiceExtractor(LLMClient(settings)).extract(SAMPLE_INVOICE))

    assert result is not None
    assert result.supplier and "Northwind" in result.supplier
    assert result.invoice_number == "NW-1120"
    assert result.amount == pytest.approx(860.0)
    assert result.due_date == "2024-12-05"
