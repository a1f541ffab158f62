"""Customer reviews."""

from __future__ import annotations

from typing import Any

from vipcortes.repositories import RecordStore
from vipcortes.repositories.collections import ANONYMOUS_AUTHOR

from . import fields
from .errors import ValidationError


class ReviewService:
    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def create(self, content: Any, author_name: Any = None, rating: Any = None) -> dict:
        content_value = fields.text(content)
        if not content_value:
            raise ValidationError("O texto da avaliacao e obrigatorio")
        return self.store.create(
            {
                "author_name": fields.text(author_name) or ANONYMOUS_AUTHOR,
                "content": content_value,
                "rating": fields.number_or_zero(rating),
            }
        )

    def list(self) -> list[dict]:
        """All reviews, newest first; older records without a rating read as 0."""
        return self.store.list()
