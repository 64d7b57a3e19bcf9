from app.core.config import get_database_url, get_upload_dir
from app.core.database import Base, SessionLocal, engine, get_db, init_db
from app.core.errors import (
    ContentError,
    MissingFieldError,
    MissingUploadError,
    NotFoundError,
    StorageError,
    UnknownFieldError,
)

__all__ = [
    "get_database_url",
    "get_upload_dir",
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "init_db",
    "ContentError",
    "StorageError",
    "MissingUploadError",
    "MissingFieldError",
    "UnknownFieldError",
    "NotFoundError",
]
