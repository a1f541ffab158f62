"""FILE-mode specifics: the on-disk array, id sequence and legacy records."""
from __future__ import annotations

import json

import pytest

from vipcortes.repositories import APPOINTMENTS, REVIEWS, USERS, DuplicateRecordError, StorageError
from vipcortes.repositories.json_storage import JsonRecordStore


def test_file_storage_creates_empty_arrays(json_storage, tmp_path):
    data_dir = tmp_path / "data"
    for name in ("users", "usuarios", "agendamentos", "reviews", "fidelidades"):
        path = data_dir / f"{name}.json"
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == []


def test_ids_continue_from_max_existing(tmp_path):
    store = JsonRecordStore(APPOINTMENTS, tmp_path)
    store.ensure()
    store.save([{"id": 7, "name": "Ana"}, {"id": 3, "name": "Bia"}])

    record = store.create({"name": "Caio", "service": "barba"})

    assert record["id"] == 8


def test_ids_are_not_reused_after_deleting_the_last_but_one(tmp_path):
    store = JsonRecordStore(APPOINTMENTS, tmp_path)
    first = store.create({"name": "Ana"})
    second = store.create({"name": "Bia"})
    store.delete(first["id"])

    third = store.create({"name": "Caio"})

    assert third["id"] == second["id"] + 1


def test_whole_file_is_rewritten_on_create(tmp_path):
    store = JsonRecordStore(REVIEWS, tmp_path)
    store.create({"content": "Muito bom"})

    rows = json.loads((tmp_path / "reviews.json").read_text(encoding="utf-8"))
    assert len(rows) == 1
    assert rows[0]["content"] == "Muito bom"
    assert rows[0]["created_at"]


def test_legacy_review_without_rating_reads_as_zero(tmp_path):
    store = JsonRecordStore(REVIEWS, tmp_path)
    store.save(
        [
            {"id": 1, "author_name": "Ana", "content": "Antigo", "created_at": "2023-01-01T10:00:00.000Z"},
            {"id": 2, "author_name": "Bia", "content": "Novo", "rating": 5, "created_at": "2024-01-01T10:00:00.000Z"},
        ]
    )

    rows = store.list()

    assert [r["id"] for r in rows] == [2, 1]
    assert rows[1]["rating"] == 0


def test_unique_email_is_checked_by_scan(tmp_path):
    store = JsonRecordStore(USERS, tmp_path)
    store.create({"name": "Ana", "email": "a@x.com", "password": "h"})
    store.create({"name": "Sem email", "email": None, "password": "h"})
    store.create({"name": "Sem email 2", "email": None, "password": "h"})

    with pytest.raises(DuplicateRecordError):
        store.create({"name": "Outra", "email": "a@x.com", "password": "h"})


def test_missing_file_reads_as_empty(tmp_path):
    store = JsonRecordStore(USERS, tmp_path / "nowhere")
    assert store.list() == []
    assert store.find_one(email="a@x.com") is None


def test_corrupt_file_raises_storage_error(tmp_path):
    store = JsonRecordStore(APPOINTMENTS, tmp_path)
    (tmp_path / "agendamentos.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageError):
        store.list()


def test_failed_rewrite_keeps_previous_file(tmp_path, monkeypatch):
    store = JsonRecordStore(APPOINTMENTS, tmp_path)
    store.create({"name": "Ana"})

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("vipcortes.repositories.json_storage.os.replace", fail_replace)
    with pytest.raises(StorageError):
        store.create({"name": "Bia"})

    monkeypatch.undo()
    assert [r["name"] for r in store.list()] == ["Ana"]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["agendamentos.json"]
