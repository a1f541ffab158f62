"""Create the schema when missing and apply the column additions made since."""
from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, make_engine
from . import models  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)

# Columns added after the first deployments; older tables may lack them.
EVOLUTIONS = (
    "ALTER TABLE reviews ADD COLUMN rating INT DEFAULT 0",
)


def create_all(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)
    for statement in EVOLUTIONS:
        try:
            with engine.begin() as conn:
                conn.execute(text(statement))
        except SQLAlchemyError as exc:
            # "duplicate column" on every start after the first
            logger.debug("Schema evolution skipped (%s): %s", statement, exc.__class__.__name__)


if __name__ == "__main__":
    from vipcortes.core.config import get_settings

    try:
        create_all(make_engine(get_settings().database_url))
        print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
