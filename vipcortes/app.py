"""FastAPI application for the VipCortes booking/review backend."""

from __future__ import annotations

from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vipcortes.core.config import Settings, get_settings
from vipcortes.core.logging_config import setup_logging
from vipcortes.repositories import Storage, StorageError, select_storage
from vipcortes.routers import appointments as appointments_router
from vipcortes.routers import auth as auth_router
from vipcortes.routers import loyalty as loyalty_router
from vipcortes.routers import reviews as reviews_router
from vipcortes.services.appointment_service import AppointmentService
from vipcortes.services.auth_service import AuthService
from vipcortes.services.errors import ServiceError
from vipcortes.services.loyalty_service import LoyaltyService
from vipcortes.services.review_service import ReviewService

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_error(request: Request, exc: ServiceError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(StorageError)
    async def storage_error(request: Request, exc: StorageError):
        logger.error("Falha de armazenamento em %s %s", request.method, request.url.path, exc_info=exc)
        return _error(500, "Erro interno ao acessar os dados")

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def body_error(request: Request, exc: RequestValidationError):
        return _error(400, "Requisicao invalida")

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.error("Erro inesperado em %s %s", request.method, request.url.path, exc_info=exc)
        return _error(500, "Erro interno do servidor")


def attach_services(app: FastAPI, storage: Storage) -> None:
    app.state.storage = storage
    app.state.auth_service = AuthService(storage.users, storage.profiles)
    app.state.appointment_service = AppointmentService(storage.appointments)
    app.state.review_service = ReviewService(storage.reviews)
    app.state.loyalty_service = LoyaltyService(storage.loyalty, storage.users, storage.legacy_users)


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    """Factory compatível com uvicorn (``--factory``).

    The storage backend is chosen here, once; tests pass a ready ``storage``.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    storage = storage or select_storage(settings)
    logger.info("Modo de armazenamento: %s", storage.mode.value)

    app = FastAPI(title="VipCortes API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    _register_error_handlers(app)
    attach_services(app, storage)

    @app.get("/api/health")
    def health():
        return {"status": "ok", "storage": storage.mode.value}

    app.include_router(auth_router.router)
    app.include_router(appointments_router.router)
    app.include_router(reviews_router.router)
    app.include_router(loyalty_router.router)
    return app
