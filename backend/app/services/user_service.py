"""Domain service for listing, reading and mutating users.

Not-found is a result, not an exception: lookups return ``None`` and
mutations return ``False`` when no row matches the identifier.
"""
from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm import Session

from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate, UserOut, UserUpdate

LOGGER = logging.getLogger(__name__)


def parse_user_id(raw: str | uuid.UUID) -> uuid.UUID | None:
    """Return the UUID for ``raw``, or None when it cannot be an issued id."""
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        return None


class UserService:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    def list_users(self, db: Session) -> list[UserOut]:
        return [UserOut.model_validate(user) for user in self.user_repository.list_all(db)]

    def get_user(self, db: Session, user_id: str | uuid.UUID) -> UserOut | None:
        user = self._find(db, user_id)
        return UserOut.model_validate(user) if user else None

    def create_user(self, db: Session, payload: UserCreate) -> UserOut:
        user = User(id=uuid.uuid4(), name=payload.name, email=payload.email)
        self.user_repository.add(db, user)
        LOGGER.info("✅ Created user id=%s", user.id)
        return UserOut.model_validate(user)

    def update_user(self, db: Session, user_id: str | uuid.UUID, payload: UserUpdate) -> bool:
        user = self._find(db, user_id)
        if user is None:
            return False
        self.user_repository.replace(db, user, payload.name, payload.email)
        LOGGER.info("✅ Updated user id=%s", user.id)
        return True

    def delete_user(self, db: Session, user_id: str | uuid.UUID) -> bool:
        user = self._find(db, user_id)
        if user is None:
            return False
        self.user_repository.remove(db, user)
        LOGGER.info("🗑️ Deleted user id=%s", user_id)
        return True

    def _find(self, db: Session, user_id: str | uuid.UUID) -> User | None:
        key = parse_user_id(user_id)
        user = self.user_repository.get(db, key) if key else None
        if user is None:
            LOGGER.info("User id=%s not found", user_id)
        return user
