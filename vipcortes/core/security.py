"""Security helpers (hashing and verification)."""

from __future__ import annotations

import bcrypt
from argon2 import PasswordHasher, exceptions as argon_exc

_ph = PasswordHasher()
_PREFIX = "argon2$"
_LEGACY_PREFIXES = ("$2a$", "$2b$", "$2y$")


def hash_password(password: str) -> str:
    """Create a modern Argon2 hash with a prefix for detection."""
    hashed = _ph.hash(password)
    return f"{_PREFIX}{hashed}"


def needs_rehash(stored_hash: str | None) -> bool:
    """True for hashes written by the old Node server (bcrypt)."""
    return bool(stored_hash) and not str(stored_hash).startswith(_PREFIX)


def verify_password(password: str, stored_hash: str | None) -> bool:
    stored = stored_hash or ""
    if stored.startswith(_PREFIX):
        hashed = stored[len(_PREFIX) :]
        try:
            return _ph.verify(hashed, password)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False
    if stored.startswith(_LEGACY_PREFIXES):
        try:
            return bcrypt.checkpw((password or "").encode("utf-8"), stored.encode("utf-8"))
        except ValueError:
            return False
    return False
