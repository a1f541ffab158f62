from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from vipcortes.services.review_service import ReviewService

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


def _get_review_service(request: Request) -> ReviewService:
    svc = getattr(getattr(request.app, "state", None), "review_service", None)
    if not svc:
        raise RuntimeError("ReviewService nao configurado")
    return svc


@router.get("")
def list_reviews(request: Request):
    return {"reviews": _get_review_service(request).list()}


@router.post("")
def create_review(request: Request, payload: Optional[dict] = Body(None)):
    data = payload or {}
    review = _get_review_service(request).create(
        data.get("content"), author_name=data.get("author_name"), rating=data.get("rating")
    )
    return {"message": "Avaliação enviada com sucesso", "review": review}
