from ..core.config import settings
from ..services.extraction import InvoiceFieldExtractor, LLMInvoiceExtractor
from ..services.file_storage import UploadStorage
from ..services.llm_client import LLMClient
from ..services.storage import InvoiceStoreBase, get_invoice_store

# FastAPI dependencies; tests swap these via app.dependency_overrides


def get_store() -> InvoiceStoreBase:
    return get_invoice_store()


def get_upload_storage() -> UploadStorage:
    return UploadStorage(settings.upload_dir)


def get_llm_client() -> LLMClient:
    return LLMClient(settings)


def get_ai_extractor() -> InvoiceFieldExtractor:
    return LLMInvoiceExtractor(LLMClient(settings))
