"""
Logica condivisa dai router Team e Cards: creazione, update per campo,
sostituzione foto, cancellazione. I router restano sottili.
Le chiamate sincrone (sessione SQLAlchemy) girano in un thread per non
bloccare l'event loop nelle route async.
"""

import asyncio
import logging

from fastapi import Request, UploadFile
from sqlalchemy.orm import Session

from app.core.config import get_upload_dir
from app.core.errors import MissingFieldError, NotFoundError, StorageError
from app.services.record_store import RecordStore
from app.services.uploads import store_photo

logger = logging.getLogger(__name__)


def discard_upload(photo_name: str) -> None:
    """Rimuove un file appena caricato che non verrà referenziato da nessuna riga."""
    (get_upload_dir() / photo_name).unlink(missing_ok=True)
    logger.info("Upload scartato: %s", photo_name)


def require_fields(values: dict[str, str | None]) -> dict[str, str]:
    """Solo controllo di presenza: valori mancanti o vuoti -> MissingFieldError."""
    missing = [name for name, value in values.items() if value is None or not value.strip()]
    if missing:
        raise MissingFieldError(f"Campi obbligatori mancanti: {', '.join(missing)}")
    return {name: value.strip() for name, value in values.items()}


async def create_record(
    db: Session,
    store: RecordStore,
    values: dict[str, str | None],
    photo: UploadFile | None,
) -> int:
    """Valida i campi, salva la foto, inserisce la riga. Se l'INSERT fallisce il file viene rimosso."""
    fields = require_fields(values)
    photo_name = await store_photo(photo)
    try:
        return await asyncio.to_thread(store.create, db, fields, photo_name)
    except StorageError:
        discard_upload(photo_name)
        raise


async def read_field_value(request: Request, field: str) -> str:
    """
    Nuovo valore da body JSON o form (urlencoded/multipart), sotto il nome
    del campo stesso oppure sotto "value".
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            raise MissingFieldError("Body JSON non valido")
        if not isinstance(body, dict):
            raise MissingFieldError("Il body JSON deve essere un oggetto")
    else:
        body = await request.form()

    value = body.get(field)
    if value is None:
        value = body.get("value")
    if value is None or not isinstance(value, (str, int, float)) or not str(value).strip():
        raise MissingFieldError(f"Valore mancante per il campo '{field}'")
    return str(value).strip()


def update_record_field(db: Session, store: RecordStore, record_id: int, field: str, value: str) -> str:
    if not store.update_field(db, record_id, field, value):
        raise NotFoundError(f"{store.label} {record_id} non trovato")
    return f"{store.label} {record_id}: campo {field} aggiornato"


async def update_field_from_request(
    db: Session,
    store: RecordStore,
    record_id: int,
    field: str,
    request: Request,
) -> str:
    """Campo validato prima di leggere il body: un campo sconosciuto vince su un valore mancante."""
    store.check_field(field)
    value = await read_field_value(request, field)
    return await asyncio.to_thread(update_record_field, db, store, record_id, field, value)


def replace_photo(db: Session, store: RecordStore, record_id: int, photo_name: str) -> str:
    """
    Aggiorna la colonna photo. Il file precedente resta su disco; se l'id non
    esiste o l'UPDATE fallisce il file appena scritto viene rimosso.
    """
    try:
        current = store.get(db, record_id)
        if current is None:
            raise NotFoundError(f"{store.label} {record_id} non trovato")
        logger.info("%s id=%s foto %s -> %s", store.label, record_id, current.photo, photo_name)
        if not store.update_field(db, record_id, "photo", photo_name):
            raise NotFoundError(f"{store.label} {record_id} non trovato")
    except (NotFoundError, StorageError):
        discard_upload(photo_name)
        raise
    return f"{store.label} {record_id}: foto aggiornata"


def delete_record(db: Session, store: RecordStore, record_id: int) -> str:
    """Idempotente: cancellare un id assente non è un errore."""
    if not store.delete(db, record_id):
        logger.info("%s id=%s già assente, delete no-op", store.label, record_id)
    return f"{store.label} {record_id} eliminato"
