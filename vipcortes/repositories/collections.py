"""Collection definitions: table/file names, defaults and list ordering."""
from __future__ import annotations

from datetime import datetime, timezone

from .base import Collection

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)

ANONYMOUS_AUTHOR = "Anônimo"
STATUS_ACTIVE = "ativo"
STATUS_CANCELLED = "cancelado"


def _timestamp(value) -> datetime:
    if not value:
        return _EPOCH
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return _EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def appointment_order(record: dict) -> tuple:
    # dateless appointments come first
    return (record.get("data_agendamento") or "", record.get("hora") or "", record.get("id") or 0)


def review_order(record: dict) -> tuple:
    return (_timestamp(record.get("created_at")), record.get("id") or 0)


USERS = Collection(
    name="users",
    defaults={"email": None, "phone": None},
    unique=("email",),
)

PROFILES = Collection(
    name="usuarios",
    defaults={"telefone": None, "nascimento": None},
    timestamp_field="created_at",
)

APPOINTMENTS = Collection(
    name="agendamentos",
    defaults={
        "age": None,
        "phone": "",
        "service": "",
        "data_agendamento": None,
        "hora": None,
        "observacoes": None,
        "usuario_id": None,
    },
    sort_key=appointment_order,
)

REVIEWS = Collection(
    name="reviews",
    defaults={"author_name": ANONYMOUS_AUTHOR, "rating": 0},
    timestamp_field="created_at",
    sort_key=review_order,
    newest_first=True,
)

LOYALTY = Collection(
    name="fidelidades",
    defaults={"pontos": 0, "status": STATUS_ACTIVE},
)
