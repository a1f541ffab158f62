from __future__ import annotations

import pytest

from vipcortes.services.errors import ValidationError
from vipcortes.services.review_service import ReviewService


@pytest.fixture()
def service(storage):
    return ReviewService(storage.reviews)


def test_rating_defaults_to_zero(service):
    service.create("Atendimento excelente")

    (review,) = service.list()
    assert review["rating"] == 0
    assert review["author_name"] == "Anônimo"
    assert review["created_at"]


@pytest.mark.parametrize("raw,expected", [("4", 4), (5, 5), ("abc", 0), (None, 0), ("", 0), ("4.0", 4)])
def test_rating_is_coerced(service, raw, expected):
    review = service.create("Bom", author_name="Ana", rating=raw)

    assert review["rating"] == expected
    assert review["author_name"] == "Ana"


def test_newest_first(service):
    first = service.create("Primeira")
    second = service.create("Segunda")
    third = service.create("Terceira")

    assert [r["id"] for r in service.list()] == [third["id"], second["id"], first["id"]]


def test_content_required(service):
    with pytest.raises(ValidationError):
        service.create("   ")
    assert service.list() == []
