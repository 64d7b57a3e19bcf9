"""API admin Cards: stessa forma di /admin/teams con title e description."""

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.content import CardRow, CreatedResponse, MessageResponse, RecordId
from app.services import content_service
from app.services.record_store import card_store
from app.services.uploads import store_photo

router = APIRouter(prefix="/admin/cards", tags=["cards"])


@router.get("", response_model=list[CardRow])
def list_cards(db: Session = Depends(get_db)):
    return card_store.list_all(db)


@router.post("", response_model=CreatedResponse)
async def create_card(
    title: str | None = Form(None),
    description: str | None = Form(None),
    photo: UploadFile | None = File(None),
    db: Session = Depends(get_db),
):
    new_id = await content_service.create_record(
        db, card_store, {"title": title, "description": description}, photo
    )
    return CreatedResponse(id=new_id)


@router.put("/photo/{record_id}", response_model=MessageResponse)
def update_card_photo(record_id: RecordId, photo_name: str = Depends(store_photo), db: Session = Depends(get_db)):
    return MessageResponse(message=content_service.replace_photo(db, card_store, record_id, photo_name))


@router.put("/{field}/{record_id}", response_model=MessageResponse)
async def update_card_field(field: str, record_id: RecordId, request: Request, db: Session = Depends(get_db)):
    """Aggiorna title o description."""
    message = await content_service.update_field_from_request(db, card_store, record_id, field, request)
    return MessageResponse(message=message)


@router.delete("/{record_id}", response_model=MessageResponse)
def delete_card(record_id: RecordId, db: Session = Depends(get_db)):
    return MessageResponse(message=content_service.delete_record(db, card_store, record_id))
