from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from vipcortes.services.appointment_service import AppointmentService

router = APIRouter(prefix="/api/agendamentos", tags=["agendamentos"])


def _get_appointment_service(request: Request) -> AppointmentService:
    svc = getattr(getattr(request.app, "state", None), "appointment_service", None)
    if not svc:
        raise RuntimeError("AppointmentService nao configurado")
    return svc


@router.post("")
def create_appointment(request: Request, payload: Optional[dict] = Body(None)):
    data = payload or {}
    record = _get_appointment_service(request).create(
        data.get("name"),
        data.get("service"),
        data.get("date"),
        time=data.get("time"),
        age=data.get("age"),
        phone=data.get("phone"),
        observacoes=data.get("observacoes"),
        usuario_id=data.get("usuario_id"),
    )
    return {"message": "Agendamento criado com sucesso", "agendamento": record}


@router.get("")
def list_appointments(request: Request, usuario_id: Optional[int] = None):
    return {"appointments": _get_appointment_service(request).list(usuario_id)}


@router.delete("/{appointment_id}")
def delete_appointment(appointment_id: int, request: Request):
    _get_appointment_service(request).delete(appointment_id)
    return {"message": "Agendamento excluído com sucesso"}
