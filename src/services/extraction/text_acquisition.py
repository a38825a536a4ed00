"""
Turn an uploaded invoice file into raw text for the extractors.

Unknown or unreadable inputs never fail the upload; they degrade to a
placeholder sentence naming the file so the rest of the pipeline still
produces a record.
"""

from io import BytesIO
from pathlib import PurePath
from typing import Callable
from loguru import logger
from ..invoice_types import UploadedFile, TEXT_LIKE_EXTENSIONS, placeholder_text

GENERIC_MEDIA_TYPES = ("", "application/octet-stream")
SNIPPET_CHARS = 400


def extract_pdf_text(content: bytes) -> str:
    """Extract the text of every page of a PDF held in memory."""
    import pdfplumber

    text_parts = []
    with pdfplumber.open(BytesIO(content)) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
    return "\n".join(text_parts)


def _is_text_like(media_type: str, original_name: str) -> bool:
    if media_type.startswith("text/"):
        return True
    extension = PurePath(original_name).suffix.lower()
    return media_type in GENERIC_MEDIA_TYPES and extension in TEXT_LIKE_EXTENSIONS


def acquire_text(upload: UploadedFile, pdf_reader: Callable[[bytes], str] = extract_pdf_text) -> str:
    """
    Derive raw text from an uploaded file. Never raises.

    Args:
        upload: The uploaded file
        pdf_reader: Callable turning PDF bytes into text (swappable in tests)

    Returns:
        Decoded text, a PDF transcription, or the placeholder sentence
    """
    media_type = (upload.media_type or "").strip().lower()

    if _is_text_like(media_type, upload.original_name):
        try:
            raw_text = upload.content.decode("utf-8")
            logger.info("Raw text source: plain text file", filename=upload.original_name)
        except Exception as e:
            logger.warning(f"Could not decode upload as UTF-8: {e}")
            raw_text = placeholder_text(upload.original_name)
    elif "pdf" in media_type:
        try:
            raw_text = pdf_reader(upload.content) or ""
            logger.info("Raw text source: PDF via pdfplumber", filename=upload.original_name)
        except Exception as e:
            logger.error(f"PDF parse failed: {e}")
            logger.info("Falling back to placeholder text for PDF", filename=upload.original_name)
            raw_text = placeholder_text(upload.original_name)
    else:
        logger.info(
            "Raw text source: placeholder for unsupported media type",
            filename=upload.original_name,
            media_type=media_type or None,
        )
        raw_text = placeholder_text(upload.original_name)

    logger.debug("Raw text snippet", snippet=raw_text[:SNIPPET_CHARS])
    return raw_text
