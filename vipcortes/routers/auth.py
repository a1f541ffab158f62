from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from vipcortes.core.rate_limiter import rate_limit_ip
from vipcortes.services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["auth"])


def _get_auth_service(request: Request) -> AuthService:
    svc = getattr(getattr(request.app, "state", None), "auth_service", None)
    if not svc:
        raise RuntimeError("AuthService nao configurado")
    return svc


@router.post("/signup")
def signup(request: Request, payload: Optional[dict] = Body(None)):
    rate_limit_ip(request, "auth:signup", limit=10, window_seconds=300)
    data = payload or {}
    user_id = _get_auth_service(request).signup(
        data.get("name"), data.get("email"), data.get("password"), data.get("phone")
    )
    return {"message": "Usuário criado com sucesso!", "userId": user_id}


@router.post("/login")
def login(request: Request, payload: Optional[dict] = Body(None)):
    rate_limit_ip(request, "auth:login", limit=20, window_seconds=300)
    data = payload or {}
    # a pagina de login envia "senha"; o cadastro usa "password"
    password = data.get("password") or data.get("senha")
    user_id = _get_auth_service(request).login(data.get("email"), password)
    return {"message": "Login realizado com sucesso", "userId": user_id}


@router.post("/usuarios/criar")
def create_profile(request: Request, payload: Optional[dict] = Body(None)):
    rate_limit_ip(request, "auth:signup", limit=10, window_seconds=300)
    data = payload or {}
    profile = _get_auth_service(request).create_profile(
        data.get("nome"), data.get("telefone"), data.get("nascimento"), data.get("senha")
    )
    return {"message": "Usuário criado com sucesso!", "usuarioId": profile["id"], "usuarioNome": profile["nome"]}


@router.post("/usuarios/login")
def login_by_name(request: Request, payload: Optional[dict] = Body(None)):
    rate_limit_ip(request, "auth:login", limit=20, window_seconds=300)
    data = payload or {}
    usuario = _get_auth_service(request).login_by_name(data.get("nome"), data.get("senha"))
    return {"usuario": usuario}


@router.get("/usuarios/{profile_id}")
def get_profile(profile_id: int, request: Request):
    return {"usuario": _get_auth_service(request).get_profile(profile_id)}
