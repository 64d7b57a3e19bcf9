"""
API admin Team: lista, creazione con foto, update per singolo campo, cancellazione.
"""

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.content import CreatedResponse, MessageResponse, RecordId, TeamMemberRow
from app.services import content_service
from app.services.record_store import team_store
from app.services.uploads import store_photo

router = APIRouter(prefix="/admin/teams", tags=["teams"])


@router.get("", response_model=list[TeamMemberRow])
def list_team(db: Session = Depends(get_db)):
    """Tutti i membri del team, in ordine di inserimento."""
    return team_store.list_all(db)


@router.post("", response_model=CreatedResponse)
async def create_team_member(
    name: str | None = Form(None),
    role: str | None = Form(None),
    photo: UploadFile | None = File(None),
    db: Session = Depends(get_db),
):
    """
    Crea un membro del team. Multipart: name, role, photo.
    400 se manca un campo o il file.
    """
    new_id = await content_service.create_record(db, team_store, {"name": name, "role": role}, photo)
    return CreatedResponse(id=new_id)


# Dichiarata prima di /{field}/{record_id}: "photo" arriva come file, non come valore.
@router.put("/photo/{record_id}", response_model=MessageResponse)
def update_team_photo(record_id: RecordId, photo_name: str = Depends(store_photo), db: Session = Depends(get_db)):
    return MessageResponse(message=content_service.replace_photo(db, team_store, record_id, photo_name))


@router.put("/{field}/{record_id}", response_model=MessageResponse)
async def update_team_field(field: str, record_id: RecordId, request: Request, db: Session = Depends(get_db)):
    """Aggiorna name o role. Body JSON {"<campo>": valore} oppure form."""
    message = await content_service.update_field_from_request(db, team_store, record_id, field, request)
    return MessageResponse(message=message)


@router.delete("/{record_id}", response_model=MessageResponse)
def delete_team_member(record_id: RecordId, db: Session = Depends(get_db)):
    return MessageResponse(message=content_service.delete_record(db, team_store, record_id))
