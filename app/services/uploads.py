"""
Upload handler per le immagini di Team e Cards.
Un solo file per richiesta nel campo multipart `photo`, scritto nella directory
statica prima che il corpo della route venga eseguito (dependency FastAPI).
"""

import asyncio
import logging
import re
import uuid
from pathlib import Path

from fastapi import File, UploadFile

from app.core.config import get_upload_dir
from app.core.errors import MissingUploadError, StorageError

logger = logging.getLogger(__name__)

PHOTO_FIELD = "photo"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def safe_original_name(filename: str) -> str:
    """Solo l'ultimo componente del path, caratteri non sicuri sostituiti con '_'."""
    base = Path(filename.replace("\\", "/")).name
    cleaned = _UNSAFE_CHARS.sub("_", base).strip("._")
    return cleaned or "upload"


def build_stored_name(filename: str) -> str:
    """
    Nome su disco: <uuid4 hex>_<nome originale>.
    Il token è casuale, non legato all'orologio: due file con lo stesso nome
    caricati nello stesso secondo non si sovrascrivono.
    """
    return f"{uuid.uuid4().hex}_{safe_original_name(filename)}"


def write_upload(content: bytes, filename: str, upload_dir: Path | None = None) -> str:
    """Scrive i byte nella directory upload e restituisce il nome salvato."""
    target_dir = upload_dir or get_upload_dir()
    stored_name = build_stored_name(filename)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        (target_dir / stored_name).write_bytes(content)
    except OSError as e:
        logger.exception("Scrittura upload fallita in %s: %s", target_dir, e)
        raise StorageError(f"Impossibile salvare il file: {e}") from e
    logger.info("Upload salvato: %s (%s bytes)", stored_name, len(content))
    return stored_name


async def store_photo(photo: UploadFile | None = File(None)) -> str:
    """
    Dependency: valida la presenza del file e lo salva.
    Restituisce il nome file da persistere nella colonna photo.
    """
    if photo is None or not (photo.filename or "").strip():
        raise MissingUploadError(f"File immagine mancante nel campo '{PHOTO_FIELD}'")
    content = await photo.read()
    return await asyncio.to_thread(write_upload, content, photo.filename)
