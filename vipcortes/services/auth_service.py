"""
Authentication and identity related use cases.

Two identity spaces coexist: e-mail based users (signup/login) and the
simplified profiles created from the loyalty card page (name, phone, birth
date). They live in separate collections and their ids are unrelated.
"""

from __future__ import annotations

from typing import Any, Optional
import logging

from vipcortes.core.security import hash_password, needs_rehash, verify_password
from vipcortes.repositories import DuplicateRecordError, RecordStore

from . import fields
from .errors import ConflictError, NotFoundError, UnauthorizedError, ValidationError

logger = logging.getLogger(__name__)

# Profiles written by older versions of the page stored the hash as "password".
PASSWORD_KEYS = ("senha", "password")


def stored_hash(record: dict) -> str:
    for key in PASSWORD_KEYS:
        if record.get(key):
            return str(record[key])
    return ""


class AuthService:
    """Handles signup/login for users and the simplified profile flow."""

    def __init__(self, users: RecordStore, profiles: RecordStore) -> None:
        self.users = users
        self.profiles = profiles

    # -------------------------------------- usuarios (e-mail) --------------------------------------
    def signup(self, name: Any, email: Any, password: Any, phone: Any = None) -> int:
        name_value = fields.text(name)
        email_value = fields.email(email)
        if not name_value or not email_value or not password:
            raise ValidationError("Nome, email e senha sao obrigatorios")
        if self.users.find_one(email=email_value):
            raise ConflictError("Erro ao criar usuário. Email pode já estar cadastrado.")
        try:
            user = self.users.create(
                {
                    "name": name_value,
                    "email": email_value,
                    "password": hash_password(str(password)),
                    "phone": fields.optional_text(phone),
                }
            )
        except DuplicateRecordError as exc:
            raise ConflictError("Erro ao criar usuário. Email pode já estar cadastrado.") from exc
        return user["id"]

    def login(self, email: Any, password: Any) -> int:
        email_value = fields.email(email)
        if not email_value or not password:
            raise ValidationError("Email e senha sao obrigatorios")
        user = self.users.find_one(email=email_value)
        if not user:
            raise NotFoundError("Usuário não encontrado")
        if not verify_password(str(password), user.get("password")):
            raise UnauthorizedError("Senha incorreta")
        if needs_rehash(user.get("password")):
            self.users.update(user["id"], {"password": hash_password(str(password))})
            logger.info("Hash legado atualizado para o usuario %s", user["id"])
        return user["id"]

    # -------------------------------------- perfis (nome/telefone) --------------------------------------
    def create_profile(self, nome: Any, telefone: Any, nascimento: Any, senha: Any) -> dict:
        nome_value = fields.text(nome)
        telefone_value = fields.text(telefone)
        nascimento_value = fields.text(nascimento)
        if not nome_value or not telefone_value or not nascimento_value or not senha:
            raise ValidationError("Todos os campos são obrigatórios")
        profile = self.profiles.create(
            {
                "nome": nome_value,
                "telefone": telefone_value,
                "nascimento": nascimento_value,
                "senha": hash_password(str(senha)),
            }
        )
        return {"id": profile["id"], "nome": profile["nome"]}

    def get_profile(self, profile_id: int) -> dict:
        profile = self.profiles.get(profile_id)
        if not profile:
            raise NotFoundError("Usuário não encontrado")
        return {
            "id": profile["id"],
            "nome": profile.get("nome"),
            "telefone": profile.get("telefone"),
            "nascimento": profile.get("nascimento"),
        }

    def login_by_name(self, nome: Any, senha: Any) -> dict:
        nome_value = fields.text(nome)
        if not nome_value or not senha:
            raise ValidationError("Nome e senha são obrigatórios")
        profile: Optional[dict] = self.profiles.find_one(nome=nome_value)
        if not profile:
            raise NotFoundError("Usuário não encontrado")
        current = stored_hash(profile)
        if not verify_password(str(senha), current):
            raise UnauthorizedError("Senha incorreta")
        if needs_rehash(current):
            self.profiles.update(profile["id"], {"senha": hash_password(str(senha))})
        return {"id": profile["id"], "nome": profile.get("nome"), "telefone": profile.get("telefone")}
