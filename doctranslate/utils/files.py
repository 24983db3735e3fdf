# doctranslate/utils/files.py
import shutil
from pathlib import Path
from uuid import uuid4
from fastapi import UploadFile
from .logging import service_logger


async def save_upload_file(upload_file: UploadFile, directory: Path) -> Path:
    """Save an uploaded file with a unique name and return the path"""
    directory.mkdir(parents=True, exist_ok=True)

    file_extension = Path(upload_file.filename or "").suffix
    unique_filename = f"{uuid4()}{file_extension}"
    file_path = directory / unique_filename

    with file_path.open("wb") as buffer:
        shutil.copyfileobj(upload_file.file, buffer)

    return file_path


async def delete_file(file_path: Path):
    """Delete a file if it exists, logging instead of raising"""
    try:
        if file_path.exists():
            file_path.unlink()
    except OSError as e:
        service_logger.error(f"Error deleting file {file_path}: {e}")


def get_relative_path(absolute_path: Path, base_path: Path) -> str:
    """Convert absolute path to relative path for storage in the document record"""
    absolute_path = Path(absolute_path).absolute()
    base_path = Path(base_path).absolute()
    return absolute_path.relative_to(base_path).as_posix()
