"""Lettura combinata di Team e Cards per le pagine."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.content import AllDataResponse
from app.services.record_store import list_all_data

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/allData", response_model=AllDataResponse)
def all_data(db: Session = Depends(get_db)):
    """{teams: [...], cards: [...]} letti nella stessa transazione."""
    return list_all_data(db)
