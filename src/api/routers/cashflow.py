
from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import BaseModel
from ..deps import get_llm_client, get_store
from ...services.cashflow import CashflowSummary, compute_cashflow_summary, narrate_cashflow
from ...services.llm_client import LLMClient
from ...services.storage import InvoiceStoreBase

router = APIRouter(prefix="/api/cashflow", tags=["cashflow"])


class CashflowResponse(BaseModel):
    summary: CashflowSummary
    narrative: str | None = None


@router.get("/summary", response_model=CashflowResponse)
async def cashflow_summary(
    narrate: bool = False,
    store: InvoiceStoreBase = Depends(get_store),
    llm_client: LLMClient = Depends(get_llm_client),
):
    """
    Cashflow metrics over active invoices.

    Pass ?narrate=true to also ask the LLM (if configured) for a short
    plain-English summary. Narration failures never fail the request.
    """
    try:
        invoices = store.list_invoices()
    except Exception as e:
        logger.error(f"Failed to fetch invoices for cashflow summary: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    summary = compute_cashflow_summary(invoices)
    logger.info(
        "Cashflow summary computed",
        outstanding=summary.total_outstanding,
        overdue=summary.overdue_total,
        narrate=narrate,
    )

    narrative = await narrate_cashflow(summary, llm_client) if narrate else None
    return CashflowResponse(summary=summary, narrative=narrative)
