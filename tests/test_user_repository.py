"""UserRepository persistence and failure handling."""
from __future__ import annotations

import uuid
from unittest.mock import MagicMock

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from app.core.db import engine
from app.models.user import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, User
from app.repositories.user_repository import UserRepository


def _db_down() -> OperationalError:
    return OperationalError("COMMIT", {}, Exception("connection lost"))


def test_schema_matches_column_bounds():
    columns = {c["name"]: c for c in inspect(engine).get_columns("users")}

    assert set(columns) == {"id", "name", "email"}
    assert columns["name"]["type"].length == NAME_MAX_LENGTH
    assert columns["email"]["type"].length == EMAIL_MAX_LENGTH
    assert columns["name"]["nullable"] is False
    assert columns["email"]["nullable"] is False


def test_add_get_replace_remove(db_session):
    repo = UserRepository()
    user_id = uuid.uuid4()

    repo.add(db_session, User(id=user_id, name="Jane Smith", email="jane@example.com"))
    stored = repo.get(db_session, user_id)
    assert stored.name == "Jane Smith"

    repo.replace(db_session, stored, "Jane Doe", "jd@example.com")
    assert repo.get(db_session, user_id).email == "jd@example.com"

    repo.remove(db_session, stored)
    assert repo.get(db_session, user_id) is None
    assert repo.list_all(db_session) == []


@pytest.mark.parametrize(
    "call",
    [
        lambda repo, db, user: repo.add(db, user),
        lambda repo, db, user: repo.replace(db, user, "n", "e"),
        lambda repo, db, user: repo.remove(db, user),
    ],
)
def test_failed_commit_rolls_back_and_propagates(call):
    db = MagicMock()
    db.commit.side_effect = _db_down()
    user = User(id=uuid.uuid4(), name="n", email="e")

    with pytest.raises(OperationalError):
        call(UserRepository(), db, user)

    db.rollback.assert_called_once()
