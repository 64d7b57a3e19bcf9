"""
Record store per le due collezioni (Team, Cards).
Ogni operazione è un singolo statement parametrizzato; nessuna transazione multi-riga.
Gli errori SQLAlchemy diventano StorageError con rollback della sessione.
"""

import logging
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StorageError, UnknownFieldError
from app.models import Card, TeamMember

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Accesso a una tabella con forma fissa: id, campi testuali, photo.
    `fields` sono i campi scalari obbligatori in creazione; photo è sempre
    aggiornabile ma arriva solo dall'upload handler.
    """

    def __init__(self, model, fields: tuple[str, ...], label: str):
        self.model = model
        self.fields = fields
        self.label = label

    @property
    def updatable_fields(self) -> tuple[str, ...]:
        return self.fields + ("photo",)

    def check_field(self, field: str) -> None:
        if field not in self.updatable_fields:
            raise UnknownFieldError(
                f"Campo '{field}' non valido per {self.label}. Campi validi: {list(self.updatable_fields)}"
            )

    def _fail(self, db: Session, action: str, e: SQLAlchemyError) -> StorageError:
        db.rollback()
        logger.exception("Errore DB %s su %s: %s", action, self.model.__tablename__, e)
        return StorageError(str(e))

    def list_all(self, db: Session) -> list[Any]:
        try:
            return list(db.execute(select(self.model).order_by(self.model.id)).scalars().all())
        except SQLAlchemyError as e:
            raise self._fail(db, "list", e) from e

    def get(self, db: Session, record_id: int):
        try:
            return db.get(self.model, record_id)
        except SQLAlchemyError as e:
            raise self._fail(db, "get", e) from e

    def create(self, db: Session, values: dict[str, str], photo: str | None) -> int:
        """Inserisce una riga e restituisce l'id assegnato dal DB."""
        row = {name: values[name] for name in self.fields}
        row["photo"] = photo
        try:
            result = db.execute(insert(self.model).values(**row))
            db.commit()
        except SQLAlchemyError as e:
            raise self._fail(db, "insert", e) from e
        new_id = int(result.inserted_primary_key[0])
        logger.info("%s creato id=%s photo=%s", self.label, new_id, photo)
        return new_id

    def update_field(self, db: Session, record_id: int, field: str, value: str) -> bool:
        """
        Aggiorna una sola colonna. Ritorna False se l'id non esiste
        (rowcount 0); la decisione su 404 spetta al chiamante.
        """
        self.check_field(field)
        column = getattr(self.model, field)
        try:
            result = db.execute(
                update(self.model).where(self.model.id == record_id).values({column: value})
            )
            db.commit()
        except SQLAlchemyError as e:
            raise self._fail(db, "update", e) from e
        logger.info("%s id=%s campo=%s aggiornato (righe=%s)", self.label, record_id, field, result.rowcount)
        return result.rowcount > 0

    def delete(self, db: Session, record_id: int) -> bool:
        """Cancella la riga. Il file immagine resta su disco."""
        try:
            result = db.execute(delete(self.model).where(self.model.id == record_id))
            db.commit()
        except SQLAlchemyError as e:
            raise self._fail(db, "delete", e) from e
        logger.info("%s id=%s cancellato (righe=%s)", self.label, record_id, result.rowcount)
        return result.rowcount > 0


team_store = RecordStore(TeamMember, ("name", "role"), label="Membro del team")
card_store = RecordStore(Card, ("title", "description"), label="Card")


def list_all_data(db: Session) -> dict[str, list[Any]]:
    """
    Entrambe le collezioni lette nella stessa transazione: nessun commit tra le
    due SELECT. Su SQLite il BEGIN esplicito (vedi core/database.py) fissa lo
    snapshot alla prima lettura.
    """
    teams = team_store.list_all(db)
    cards = card_store.list_all(db)
    return {"teams": teams, "cards": cards}
