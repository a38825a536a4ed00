
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from loguru import logger
from ..deps import get_ai_extractor, get_store, get_upload_storage
from ...models.invoice import ArchiveResponse, Invoice, InvoiceListResponse, UploadResponse, UploadedFileInfo
from ...services.extraction import InvoiceFieldExtractor, run_upload_pipeline
from ...services.file_storage import UploadStorage
from ...services.invoice_types import UploadedFile, UPLOAD_SOURCE
from ...services.storage import InvoiceStoreBase

router = APIRouter(prefix="/api", tags=["invoices"])


@router.get("/invoices", response_model=InvoiceListResponse)
async def list_invoices(store: InvoiceStoreBase = Depends(get_store)):
    """List all invoices that have not been archived"""
    try:
        return {"invoices": store.list_invoices()}
    except Exception as e:
        logger.error(f"Failed to fetch invoices: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/invoices/{invoice_id}/mark-paid", response_model=Invoice)
async def mark_invoice_paid(invoice_id: int, store: InvoiceStoreBase = Depends(get_store)):
    try:
        updated = store.mark_paid(invoice_id)
    except Exception as e:
        logger.error(f"Failed to mark invoice as paid: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    if not updated:
        raise HTTPException(status_code=404, detail="Invoice not found")

    logger.info("Invoice marked as paid", invoice_id=invoice_id)
    return updated


@router.post("/invoices/{invoice_id}/archive", response_model=ArchiveResponse)
async def archive_invoice(invoice_id: int, store: InvoiceStoreBase = Depends(get_store)):
    try:
        updated = store.archive(invoice_id)
    except Exception as e:
        logger.error(f"Failed to archive invoice: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    if not updated:
        raise HTTPException(status_code=404, detail="Invoice not found")

    logger.info("Invoice archived", invoice_id=invoice_id)
    return {"success": True, "invoice": updated}


@router.post("/upload-invoice", response_model=UploadResponse)
async def upload_invoice(
    file: UploadFile = File(None),
    store: InvoiceStoreBase = Depends(get_store),
    upload_storage: UploadStorage = Depends(get_upload_storage),
    ai_extractor: InvoiceFieldExtractor = Depends(get_ai_extractor),
):
    """
    Upload an invoice file (text, CSV, JSON or PDF) and create an invoice from it.

    Fields are extracted with label heuristics and, when configured, an LLM.
    Anything that cannot be extracted falls back to defaults (today's date,
    due in 14 days, amount 0), so only saving the invoice can fail the upload.
    """
    if not file:
        logger.warning("Upload attempted with no file")
        raise HTTPException(status_code=400, detail="No file uploaded")

    try:
        content = await file.read()
        upload = UploadedFile(
            content=content,
            original_name=file.filename or "upload",
            media_type=file.content_type,
        )
        logger.info(
            "Upload received",
            filename=upload.original_name,
            media_type=upload.media_type,
            size=upload.size_bytes,
        )

        stored = await run_in_threadpool(upload_storage.save, upload)
        merged = await run_upload_pipeline(upload, ai_extractor)
    except Exception as e:
        logger.error(f"Upload processing failed: {e}")
        raise HTTPException(status_code=500, detail="Upload failed")

    try:
        inserted = store.create_invoice(merged.model_dump())
    except Exception as e:
        logger.error(f"Upload insert error: {e}")
        raise HTTPException(status_code=500, detail="Upload failed to save invoice")

    logger.info("Invoice created from upload", invoice_id=inserted["id"], supplier=inserted["supplier"])

    return UploadResponse(
        file=UploadedFileInfo(
            original_name=upload.original_name,
            stored_name=stored.stored_name,
            stored_path=stored.stored_path,
            source=UPLOAD_SOURCE,
        ),
        invoice=Invoice(**inserted),
    )
