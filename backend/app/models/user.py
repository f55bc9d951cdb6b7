"""SQLAlchemy model for managed users."""
from __future__ import annotations

from sqlalchemy import Column, String, Uuid

from app.core.db import Base

NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 20


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    email = Column(String(EMAIL_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!s}, name={self.name!r}, email={self.email!r})"
