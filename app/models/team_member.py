"""TeamMember ORM model."""

from sqlalchemy import Column, Integer, String

from app.core.database import Base


class TeamMember(Base):
    __tablename__ = "Team"
    # AUTOINCREMENT: gli id cancellati non vengono mai riassegnati.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    role = Column(String(255), nullable=False)
    photo = Column(String(512), nullable=True)
