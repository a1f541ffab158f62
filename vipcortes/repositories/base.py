"""Backend-agnostic record store contract shared by the SQL and JSON adapters."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from typing import Any, Callable, Optional


MAX_ID = 2**31 - 1


class StorageError(Exception):
    """Raised when the backend fails mid-operation (I/O, driver, corrupt file)."""


class DuplicateRecordError(StorageError):
    """Raised when a unique field already holds the submitted value."""

    def __init__(self, collection: str, field_name: str):
        super().__init__(f"{collection}.{field_name} already exists")
        self.collection = collection
        self.field_name = field_name


@dataclass(frozen=True)
class Collection:
    """Describes one logical table: its name, defaults and ordering.

    ``defaults`` are applied both on create and on read, so records written
    before a field existed still come back with it. ``sort_key`` receives a
    plain record; ``newest_first`` reverses the order.
    """

    name: str
    defaults: dict = field(default_factory=dict)
    unique: tuple[str, ...] = ()
    timestamp_field: Optional[str] = None
    sort_key: Optional[Callable[[dict], Any]] = None
    newest_first: bool = False

    @property
    def filename(self) -> str:
        return f"{self.name}.json"


def to_plain(value: Any) -> Any:
    """Convert backend values to the JSON representation used by both stores."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, time):
        return value.replace(tzinfo=None).isoformat()
    return value


def _storable_id(record_id: Any) -> bool:
    """Ids outside the INT column range can never exist in either backend."""
    try:
        value = int(record_id)
    except (TypeError, ValueError):
        return False
    return 0 < value <= MAX_ID


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecordStore(ABC):
    """CRUD over a single collection.

    Subclasses implement the ``_``-prefixed primitives; defaulting and
    ordering live here so both backends behave the same.
    """

    def __init__(self, collection: Collection) -> None:
        self.collection = collection

    # -------------------------- primitives --------------------------
    @abstractmethod
    def _insert(self, values: dict) -> dict: ...

    @abstractmethod
    def _select(self, filters: dict) -> list[dict]: ...

    @abstractmethod
    def _select_by_id(self, record_id: int) -> Optional[dict]: ...

    @abstractmethod
    def _update(self, record_id: int, patch: dict) -> Optional[dict]: ...

    @abstractmethod
    def _delete(self, record_id: int) -> None: ...

    # -------------------------- public API --------------------------
    def create(self, fields: dict) -> dict:
        values = {**self.collection.defaults}
        values.update({k: v for k, v in fields.items() if k != "id"})
        ts_field = self.collection.timestamp_field
        if ts_field and not values.get(ts_field):
            values[ts_field] = utcnow()
        return self._fill(self._insert(values))

    def list(self, **filters: Any) -> list[dict]:
        records = [self._fill(r) for r in self._select(self._clean(filters))]
        return self._sort(records)

    def get(self, record_id: int) -> Optional[dict]:
        if not _storable_id(record_id):
            return None
        record = self._select_by_id(int(record_id))
        return self._fill(record) if record is not None else None

    def find_one(self, **filters: Any) -> Optional[dict]:
        for record in self.list(**filters):
            return record
        return None

    def update(self, record_id: int, patch: dict) -> Optional[dict]:
        if not _storable_id(record_id):
            return None
        patch = {k: v for k, v in patch.items() if k != "id"}
        record = self._update(int(record_id), patch)
        return self._fill(record) if record is not None else None

    def delete(self, record_id: int) -> None:
        if not _storable_id(record_id):
            return
        self._delete(int(record_id))

    # -------------------------- helpers --------------------------
    def _clean(self, filters: dict) -> dict:
        return {k: v for k, v in filters.items() if v is not None}

    def _fill(self, record: dict) -> dict:
        out = {k: to_plain(v) for k, v in record.items()}
        for key, default in self.collection.defaults.items():
            if out.get(key) is None and default is not None:
                out[key] = default
            else:
                out.setdefault(key, default)
        return out

    def _sort(self, records: list[dict]) -> list[dict]:
        key = self.collection.sort_key
        if key is None:
            return sorted(records, key=lambda r: r.get("id") or 0)
        return sorted(records, key=key, reverse=self.collection.newest_first)
