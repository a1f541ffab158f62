"""Record store backed by SQLAlchemy (DB mode)."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from vipcortes.db.session import session_scope

from .base import Collection, DuplicateRecordError, RecordStore, StorageError


class SQLRecordStore(RecordStore):
    """CRUD helpers wrapping the SQLAlchemy session for one mapped model."""

    def __init__(self, collection: Collection, model, factory: sessionmaker) -> None:
        super().__init__(collection)
        self.model = model
        self._factory = factory
        self._columns = [c.name for c in model.__table__.columns]

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with session_scope(self._factory) as session:
                yield session
        except IntegrityError as exc:
            if not self.collection.unique:
                raise StorageError(f"{self.collection.name}: {exc.__class__.__name__}") from exc
            raise DuplicateRecordError(self.collection.name, self.collection.unique[0]) from exc
        except SQLAlchemyError as exc:
            raise StorageError(f"{self.collection.name}: {exc.__class__.__name__}") from exc

    def _as_dict(self, entity) -> dict:
        return {name: getattr(entity, name) for name in self._columns}

    def _known(self, values: dict) -> dict:
        return {k: v for k, v in values.items() if k in self._columns}

    # -------------------------- primitives --------------------------
    def _insert(self, values: dict) -> dict:
        entity = self.model(**self._known(values))
        with self._session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return self._as_dict(entity)

    def _select(self, filters: dict) -> list[dict]:
        if any(key not in self._columns for key in filters):
            return []
        stmt = select(self.model)
        for key, value in filters.items():
            stmt = stmt.where(getattr(self.model, key) == value)
        with self._session() as session:
            return [self._as_dict(e) for e in session.execute(stmt).scalars().all()]

    def _select_by_id(self, record_id: int) -> Optional[dict]:
        with self._session() as session:
            entity = session.get(self.model, record_id)
            return self._as_dict(entity) if entity else None

    def _update(self, record_id: int, patch: dict) -> Optional[dict]:
        with self._session() as session:
            entity = session.get(self.model, record_id)
            if not entity:
                return None
            for key, value in self._known(patch).items():
                setattr(entity, key, value)
            session.commit()
            session.refresh(entity)
            return self._as_dict(entity)

    def _delete(self, record_id: int) -> None:
        with self._session() as session:
            session.execute(delete(self.model).where(self.model.id == record_id))
            session.commit()
