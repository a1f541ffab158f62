"""
Smoke tests for the SQL record store against a temporary SQLite database.
"""
from __future__ import annotations

from datetime import date, time

import pytest

from vipcortes.repositories import DuplicateRecordError


def test_appointment_values_come_back_as_iso_strings(db_storage):
    record = db_storage.appointments.create(
        {"name": "Ana", "service": "corte", "data_agendamento": date(2024, 5, 1), "hora": time(14, 30)}
    )

    assert record["data_agendamento"] == "2024-05-01"
    assert record["hora"] == "14:30:00"
    assert db_storage.appointments.get(record["id"]) == record


def test_unique_email_violation_is_reported(db_storage):
    db_storage.users.create({"name": "Ana", "email": "a@x.com", "password": "h"})

    with pytest.raises(DuplicateRecordError):
        db_storage.users.create({"name": "Outra", "email": "a@x.com", "password": "h"})


def test_update_missing_record_returns_none(db_storage):
    assert db_storage.loyalty.update(99, {"pontos": 10}) is None


def test_unknown_filter_matches_nothing(db_storage):
    db_storage.users.create({"name": "Ana", "email": "a@x.com", "password": "h"})

    assert db_storage.users.list(apelido="ana") == []


def test_review_timestamp_is_utc(db_storage):
    review = db_storage.reviews.create({"content": "Top"})

    assert review["created_at"].endswith("+00:00")
