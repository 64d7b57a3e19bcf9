"""Pydantic schemas per le API admin (Team e Cards)."""

from typing import Annotated

from fastapi import Path
from pydantic import BaseModel

# Limite di INTEGER in SQLite: id oltre questo valore non arrivano mai al driver.
SQLITE_MAX_INTEGER = 2**63 - 1

RecordId = Annotated[int, Path(ge=1, le=SQLITE_MAX_INTEGER)]


class TeamMemberRow(BaseModel):
    id: int
    name: str
    role: str
    photo: str | None = None  # solo nome file, relativo a images/assets/

    class Config:
        from_attributes = True


class CardRow(BaseModel):
    id: int
    title: str
    description: str
    photo: str | None = None

    class Config:
        from_attributes = True


class CreatedResponse(BaseModel):
    """Risposta delle POST di creazione."""
    id: int


class MessageResponse(BaseModel):
    message: str


class AllDataResponse(BaseModel):
    teams: list[TeamMemberRow]
    cards: list[CardRow]
