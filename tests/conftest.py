"""
Pytest configuration and shared fixtures.

Registers the integration marker and provides API fixtures that swap the
real store, upload directory and AI extractor for test doubles.
"""

import pytest
from fastapi.testclient import TestClient
from src.api.main import app
from src.api import deps
from src.services.storage import InMemoryInvoiceStore
from src.services.file_storage import UploadStorage
from src.services.invoice_types import ExtractionResult


def pytest_addoption(parser):
    """Add custom command-line options"""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests against a real LLM endpoint"
    )


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test requiring a real LLM endpoint"
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is specified"""
    if config.getoption("--run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="need --run-integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


class StubExtractor:
    """Deterministic stand-in for the LLM extractor"""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def extract(self, text):
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def store():
    return InMemoryInvoiceStore()


@pytest.fixture
def ai_stub():
    return StubExtractor(result=None)


@pytest.fixture
def client(store, ai_stub, tmp_path):
    """TestClient wired to an in-memory store, a temp upload dir and a stub AI extractor"""
    app.dependency_overrides[deps.get_store] = lambda: store
    app.dependency_overrides[deps.get_upload_storage] = lambda: UploadStorage(str(tmp_path / "uploads"))
    app.dependency_overrides[deps.get_ai_extractor] = lambda: ai_stub
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sample_ai_result():
    return ExtractionResult(
        supplier="Contoso Pty Ltd",
        invoice_number="INV-10023",
        issue_date="2025-01-01",
        due_date="2025-01-10",
        amount=385.0,
        status="Due soon",
        category="Software",
    )


@pytest.fixture
def make_extractor():
    """Factory for StubExtractor(result=..., error=...)"""
    return StubExtractor
