"""Appointment use cases (book, list, cancel)."""

from __future__ import annotations

from typing import Any, Optional

from vipcortes.repositories import RecordStore

from . import fields
from .errors import ValidationError


class AppointmentService:
    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def create(
        self,
        name: Any,
        service: Any,
        date: Any,
        *,
        time: Any = None,
        age: Any = None,
        phone: Any = None,
        observacoes: Any = None,
        usuario_id: Any = None,
    ) -> dict:
        name_value = fields.text(name)
        service_value = fields.text(service)
        if not name_value or not service_value or not fields.text(date):
            raise ValidationError("Nome, servico e data sao obrigatorios")
        return self.store.create(
            {
                "name": name_value,
                "age": fields.optional_int(age, "Idade"),
                "phone": fields.text(phone),
                "service": service_value,
                "data_agendamento": fields.parse_date(date, "Data"),
                "hora": fields.parse_time(time, "Hora"),
                "observacoes": fields.optional_text(observacoes),
                "usuario_id": fields.optional_int(usuario_id, "usuario_id"),
            }
        )

    def list(self, usuario_id: Optional[int] = None) -> list[dict]:
        return self.store.list(usuario_id=fields.optional_int(usuario_id, "usuario_id"))

    def delete(self, appointment_id: int) -> None:
        self.store.delete(appointment_id)
