"""Errors raised by services and rendered by the API as ``{"error": ...}``."""

from __future__ import annotations


class ServiceError(Exception):
    """Base class for failures surfaced to the caller."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = 400


class UnauthorizedError(ServiceError):
    status_code = 401


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    status_code = 409
