"""Local storage of uploaded CSV files before they are imported."""

import shutil
import uuid
from pathlib import Path

from fastapi import UploadFile

from finance_tracker.core.utils import ensure_dir


def save_upload_file(file: UploadFile, upload_dir: str | Path) -> Path:
    """Copy an uploaded file into ``upload_dir`` under a unique name and return its path."""
    ensure_dir(upload_dir)
    path = Path(upload_dir) / f"{uuid.uuid4()}.csv"
    with path.open("wb") as out:
        shutil.copyfileobj(file.file, out)
    return path
