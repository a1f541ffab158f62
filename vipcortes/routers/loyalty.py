from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from vipcortes.services.loyalty_service import LoyaltyService

router = APIRouter(prefix="/api/fidelities", tags=["fidelidade"])


def _get_loyalty_service(request: Request) -> LoyaltyService:
    svc = getattr(getattr(request.app, "state", None), "loyalty_service", None)
    if not svc:
        raise RuntimeError("LoyaltyService nao configurado")
    return svc


@router.post("/adjust")
def adjust_points(request: Request, payload: Optional[dict] = Body(None)):
    data = payload or {}
    result = _get_loyalty_service(request).adjust(
        data.get("points"), usuario_id=data.get("usuario_id"), email=data.get("email")
    )
    return {"message": "Pontos ajustados", **result}


@router.post("/{user_id}/cancel")
def cancel_card(user_id: int, request: Request):
    _get_loyalty_service(request).cancel(user_id)
    return {"message": "Cartão fidelidade cancelado"}


@router.get("/{user_id}")
def get_card(user_id: int, request: Request):
    return {"fidelidade": _get_loyalty_service(request).get(user_id)}
