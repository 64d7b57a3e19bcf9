"""Card ORM model."""

from sqlalchemy import Column, Integer, String, Text

from app.core.database import Base


class Card(Base):
    __tablename__ = "Cards"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    photo = Column(String(512), nullable=True)
