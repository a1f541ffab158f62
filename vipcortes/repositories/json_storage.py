"""
JSON-file persistence adapter (FILE mode).

One file per collection, each holding an array of records. Every mutation
reads the whole array, changes it in memory and rewrites the file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import json
import os
import tempfile

from .base import Collection, DuplicateRecordError, RecordStore, StorageError, to_plain


def _same(left, right) -> bool:
    return str(left) == str(right)


class JsonRecordStore(RecordStore):
    def __init__(self, collection: Collection, data_dir: Path) -> None:
        super().__init__(collection)
        self.path = Path(data_dir) / collection.filename

    # -------------------------- file access --------------------------
    def ensure(self) -> None:
        """Create the data directory and an empty array file if missing."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self.path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot prepare {self.path}: {exc}") from exc

    def load(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                content = f.read()
            rows = json.loads(content or "[]")
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(rows, list):
            raise StorageError(f"{self.path} does not hold a JSON array")
        return rows

    def save(self, rows: list[dict]) -> None:
        """Rewrite the whole file through a temporary sibling and an atomic rename."""
        payload = json.dumps(rows, ensure_ascii=False, indent=2)
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise StorageError(f"Cannot write {self.path}: {exc}") from exc

    # -------------------------- primitives --------------------------
    def _next_id(self, rows: list[dict]) -> int:
        ids = [r.get("id") for r in rows if isinstance(r.get("id"), int)]
        return max(ids, default=0) + 1

    def _check_unique(self, rows: list[dict], values: dict) -> None:
        for field_name in self.collection.unique:
            value = values.get(field_name)
            if value in (None, ""):
                continue
            if any(_same(r.get(field_name), value) for r in rows):
                raise DuplicateRecordError(self.collection.name, field_name)

    def _insert(self, values: dict) -> dict:
        rows = self.load()
        self._check_unique(rows, values)
        record = {"id": self._next_id(rows)}
        record.update({k: to_plain(v) for k, v in values.items()})
        rows.append(record)
        self.save(rows)
        return record

    def _select(self, filters: dict) -> list[dict]:
        rows = self.load()
        return [r for r in rows if all(_same(r.get(k), v) for k, v in filters.items())]

    def _select_by_id(self, record_id: int) -> Optional[dict]:
        for row in self.load():
            if _same(row.get("id"), record_id):
                return row
        return None

    def _update(self, record_id: int, patch: dict) -> Optional[dict]:
        rows = self.load()
        for row in rows:
            if _same(row.get("id"), record_id):
                row.update({k: to_plain(v) for k, v in patch.items()})
                self.save(rows)
                return row
        return None

    def _delete(self, record_id: int) -> None:
        rows = self.load()
        kept = [r for r in rows if not _same(r.get("id"), record_id)]
        if len(kept) != len(rows):
            self.save(kept)
