"""Coercion helpers for request fields."""

from __future__ import annotations

from datetime import date, time
from typing import Any, Optional
import math

from .errors import ValidationError

# columns are INT in both the SQL schema and the old MySQL tables
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def optional_text(value: Any) -> Optional[str]:
    return text(value) or None


def in_int_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def optional_int(value: Any, label: str) -> Optional[int]:
    if value is None or text(value) == "":
        return None
    try:
        parsed = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{label} invalido") from None
    if not in_int_range(parsed):
        raise ValidationError(f"{label} fora do intervalo permitido")
    return parsed


def email(value: Any) -> str:
    """E-mails are stored and looked up lower-cased."""
    return text(value).lower()


def number_or_zero(value: Any) -> int:
    """Coerce to a number the way the old front-end did: anything odd becomes 0."""
    if isinstance(value, bool):
        return int(value)
    try:
        parsed = float(str(value).strip())
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(parsed) or not in_int_range(int(parsed)):
        return 0
    return int(parsed)


def parse_date(value: Any, label: str) -> Optional[date]:
    raw = text(value)
    if not raw:
        return None
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        raise ValidationError(f"{label} invalida (use AAAA-MM-DD)") from None


def parse_time(value: Any, label: str) -> Optional[time]:
    raw = text(value)
    if not raw:
        return None
    try:
        return time.fromisoformat(raw).replace(tzinfo=None)
    except ValueError:
        raise ValidationError(f"{label} invalida (use HH:MM)") from None
