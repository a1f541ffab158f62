"""Startup choice between the SQL backend and the JSON-file fallback."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional
import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from vipcortes.core.config import Settings
from vipcortes.db import make_engine, make_sessionmaker
from vipcortes.db import models
from vipcortes.db.create_tables import create_all

from .base import RecordStore
from .collections import APPOINTMENTS, LOYALTY, PROFILES, REVIEWS, USERS
from .json_storage import JsonRecordStore
from .sql_repository import SQLRecordStore

logger = logging.getLogger(__name__)


class StorageMode(str, Enum):
    DB = "db"
    FILE = "file"


@dataclass(frozen=True)
class Storage:
    """Stores for every collection, all backed by the same mode.

    ``legacy_users`` is the ``users.json`` list, consulted as a secondary
    lookup when resolving e-mails in DB mode (it is the primary store in
    FILE mode).
    """

    mode: StorageMode
    users: RecordStore
    profiles: RecordStore
    appointments: RecordStore
    reviews: RecordStore
    loyalty: RecordStore
    legacy_users: Optional[RecordStore] = None
    engine: Optional[Engine] = None


def sql_storage(engine: Engine, data_dir: Path) -> Storage:
    """Build DB-mode stores on an engine whose schema is already in place."""
    factory = make_sessionmaker(engine)
    return Storage(
        mode=StorageMode.DB,
        users=SQLRecordStore(USERS, models.User, factory),
        profiles=SQLRecordStore(PROFILES, models.Profile, factory),
        appointments=SQLRecordStore(APPOINTMENTS, models.Appointment, factory),
        reviews=SQLRecordStore(REVIEWS, models.Review, factory),
        loyalty=SQLRecordStore(LOYALTY, models.LoyaltyAccount, factory),
        legacy_users=JsonRecordStore(USERS, data_dir),
        engine=engine,
    )


def file_storage(data_dir: Path) -> Storage:
    """Build FILE-mode stores, creating the directory and empty files."""
    stores = {
        "users": JsonRecordStore(USERS, data_dir),
        "profiles": JsonRecordStore(PROFILES, data_dir),
        "appointments": JsonRecordStore(APPOINTMENTS, data_dir),
        "reviews": JsonRecordStore(REVIEWS, data_dir),
        "loyalty": JsonRecordStore(LOYALTY, data_dir),
    }
    for store in stores.values():
        store.ensure()
    return Storage(mode=StorageMode.FILE, **stores)


def select_storage(settings: Settings) -> Storage:
    """Try the database once; fall back to JSON files for the process lifetime."""
    engine = None
    try:
        engine = make_engine(settings.database_url)
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        create_all(engine)
    except (SQLAlchemyError, ImportError, OSError, RuntimeError) as exc:
        logger.warning("Banco de dados indisponivel (%s); usando armazenamento local em %s", exc, settings.data_dir)
        if engine is not None:
            engine.dispose()
        storage = file_storage(settings.data_dir)
        logger.info("Arquivos de dados preparados em %s", settings.data_dir)
        return storage
    logger.info("Conectado ao banco de dados (%s)", engine.url.render_as_string(hide_password=True))
    return sql_storage(engine, settings.data_dir)
