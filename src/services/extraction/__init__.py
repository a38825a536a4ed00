"""
Invoice upload extraction pipeline.

Orchestrates: acquire text → heuristic fields → AI fields → merge.
"""

from .text_acquisition import acquire_text, extract_pdf_text
from .heuristic import extract_heuristic
from .llm_extractor import InvoiceFieldExtractor, LLMInvoiceExtractor, parse_ai_fields
from .merge import build_fallback_invoice, merge_invoice
from .pipeline import run_upload_pipeline

__all__ = [
    "acquire_text",
    "extract_pdf_text",
    "extract_heuristic",
    "InvoiceFieldExtractor",
    "LLMInvoiceExtractor",
    "parse_ai_fields",
    "build_fallback_invoice",
    "merge_invoice",
    "run_upload_pipeline",
]
