
import re
import time
from dataclasses import dataclass
from pathlib import Path, PurePath
from loguru import logger
from .invoice_types import UploadedFile

_WHITESPACE = re.compile(r"\s+")


@dataclass
class StoredFile:
    stored_name: str
    stored_path: str


def safe_file_name(original_name: str) -> str:
    """Drop any directory part and replace whitespace runs with underscores"""
    name = PurePath(original_name.replace("\\", "/")).name or "upload"
    return _WHITESPACE.sub("_", name)


class UploadStorage:
    """Keeps a copy of every uploaded file on disk as {epoch_ms}-{safe name}"""

    def __init__(self, upload_dir: str):
        self.upload_dir = Path(upload_dir)

    def save(self, upload: UploadedFile) -> StoredFile:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        stored_name = f"{int(time.time() * 1000)}-{safe_file_name(upload.original_name)}"
        path = self.upload_dir / stored_name
        path.write_bytes(upload.content)
        logger.info("Stored uploaded file", stored_name=stored_name, size=upload.size_bytes)
        return StoredFile(stored_name=stored_name, stored_path=str(path))
