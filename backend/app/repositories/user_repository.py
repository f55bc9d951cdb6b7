"""Repository for user persistence and retrieval."""
from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.user import User

LOGGER = logging.getLogger(__name__)


class UserRepository:
    def list_all(self, db: Session) -> list[User]:
        return list(db.scalars(select(User)))

    def get(self, db: Session, user_id: uuid.UUID) -> User | None:
        return db.get(User, user_id)

    def add(self, db: Session, user: User) -> User:
        try:
            db.add(user)
            db.commit()
            db.refresh(user)
            return user
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("DB insert failed for user id=%s: %s", user.id, exc)
            raise

    def replace(self, db: Session, user: User, name: str, email: str) -> User:
        try:
            user.name = name
            user.email = email
            db.commit()
            db.refresh(user)
            return user
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("DB update failed for user id=%s: %s", user.id, exc)
            raise

    def remove(self, db: Session, user: User) -> None:
        try:
            db.delete(user)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("DB delete failed for user id=%s: %s", user.id, exc)
            raise
