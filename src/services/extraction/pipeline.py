"""
Upload-to-record pipeline.

Orchestrates: fallback record → acquire text → heuristic extraction →
AI extraction → merge. Only the later hand-off to storage can fail an upload.
"""

from datetime import date
from typing import Callable, Optional
from fastapi.concurrency import run_in_threadpool
from loguru import logger
from ..invoice_types import InvoiceDraft, UploadedFile
from .text_acquisition import acquire_text, extract_pdf_text
from .heuristic import extract_heuristic
from .llm_extractor import InvoiceFieldExtractor
from .merge import build_fallback_invoice, merge_invoice


async def run_upload_pipeline(
    upload: UploadedFile,
    ai_extractor: Optional[InvoiceFieldExtractor],
    today: Optional[date] = None,
    pdf_reader: Callable[[bytes], str] = extract_pdf_text,
) -> InvoiceDraft:
    """Run the full extraction pipeline on an uploaded file and return the merged invoice."""
    logger.info(
        "Pipeline start",
        filename=upload.original_name,
        media_type=upload.media_type,
        size=upload.size_bytes,
    )

    fallback = build_fallback_invoice(upload.original_name, today=today)

    # PDF parsing is CPU-bound; keep it off the event loop
    raw_text = await run_in_threadpool(acquire_text, upload, pdf_reader)

    heuristic = extract_heuristic(raw_text)
    logger.info("Heuristic extraction result", **heuristic.model_dump(exclude_none=True))

    ai_result = None
    if ai_extractor is not None:
        try:
            ai_result = await ai_extractor.extract(raw_text)
        except Exception as e:
            logger.error(f"AI extraction failed: {e}")
    if ai_result is None:
        logger.warning("No AI extraction result - using heuristic and fallback values")

    merged = merge_invoice(fallback, heuristic, ai_result)
    logger.info(
        "Pipeline complete",
        supplier=merged.supplier,
        invoice_number=merged.invoice_number,
        amount=merged.amount,
        due_date=merged.due_date,
    )
    return merged
