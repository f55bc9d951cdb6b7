"""Database setup for SQLAlchemy sessions and engine."""
from __future__ import annotations

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings

LOGGER = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    options: dict = {"pool_pre_ping": True}
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
        # In-memory databases live inside one connection; share it across sessions.
        if parsed.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
    return options


engine = create_engine(settings.sqlalchemy_url(), **_engine_options(settings.sqlalchemy_url()))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db() -> None:
    """Create missing tables for every registered model."""
    from app.models import user  # noqa: F401 - ensure models are registered

    Base.metadata.create_all(bind=engine)
    LOGGER.info("Database schema ready on %s", engine.url.render_as_string(hide_password=True))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
