from pydantic import BaseModel, Field

class Invoice(BaseModel):
    id: int
    supplier: str | None = None
    invoice_number: str | None = None
    issue_date: str | None = None
    due_date: str | None = None
    amount: float | None = None
    status: str | None = None
    category: str | None = None
    source: str | None = None
    week_label: str | None = None
    archived: int = 0


class InvoiceListResponse(BaseModel):
    invoices: list[Invoice]


class ArchiveResponse(BaseModel):
    success: bool = True
    invoice: Invoice


class UploadedFileInfo(BaseModel):
    # camelCase keys are part of the client contract
    original_name: str = Field(alias="originalName")
    stored_name: str = Field(alias="storedName")
    stored_path: str = Field(alias="storedPath")
    source: str

    model_config = {"populate_by_name": True}


class UploadResponse(BaseModel):
    status: str = "ok"
    message: str = "File uploaded"
    file: UploadedFileInfo
    invoice: Invoice
