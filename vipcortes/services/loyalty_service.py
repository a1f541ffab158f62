"""Loyalty card points (fidelidade)."""

from __future__ import annotations

from typing import Any, Optional

from vipcortes.repositories import RecordStore
from vipcortes.repositories.collections import STATUS_ACTIVE, STATUS_CANCELLED

from . import fields
from .errors import NotFoundError, ValidationError


class LoyaltyService:
    def __init__(
        self,
        accounts: RecordStore,
        users: RecordStore,
        legacy_users: Optional[RecordStore] = None,
    ) -> None:
        self.accounts = accounts
        self.users = users
        self.legacy_users = legacy_users

    def resolve_user_id(self, usuario_id: Any = None, email: Any = None) -> int:
        """Return the user id, looking the e-mail up when no id was given."""
        uid = fields.optional_int(usuario_id, "usuario_id")
        if uid is not None:
            return uid
        email_value = fields.email(email)
        if not email_value:
            raise ValidationError("usuario_id ou email requerido")
        for store in (self.users, self.legacy_users):
            if store is None:
                continue
            user = store.find_one(email=email_value)
            if user:
                return user["id"]
        raise NotFoundError("Usuário não encontrado para ajuste de pontos")

    def adjust(self, points: Any, *, usuario_id: Any = None, email: Any = None) -> dict:
        """Add points to the user's card, opening it on the first adjustment."""
        uid = self.resolve_user_id(usuario_id, email)
        pts = fields.number_or_zero(points)
        account = self.accounts.find_one(usuario_id=uid)
        if account is None:
            account = self.accounts.create({"usuario_id": uid, "pontos": pts, "status": STATUS_ACTIVE})
        else:
            account = self.accounts.update(account["id"], {"pontos": int(account.get("pontos") or 0) + pts})
        return {"usuario_id": uid, "pontos": account["pontos"]}

    def cancel(self, usuario_id: Any) -> None:
        """Mark the card as cancelled. Users without a card are left alone."""
        uid = fields.optional_int(usuario_id, "usuario_id")
        if uid is None:
            raise ValidationError("usuario_id requerido")
        account = self.accounts.find_one(usuario_id=uid)
        if account is None:
            return
        self.accounts.update(account["id"], {"status": STATUS_CANCELLED})

    def get(self, usuario_id: Any) -> dict:
        uid = fields.optional_int(usuario_id, "usuario_id")
        account = self.accounts.find_one(usuario_id=uid) if uid is not None else None
        if account is None:
            raise NotFoundError("Cartão fidelidade não encontrado")
        return account
