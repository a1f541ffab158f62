"""
Shared fixtures: every store/service test runs against both storage modes.

DB mode uses a temporary SQLite file; FILE mode uses a temporary data
directory. Both are built through the same helpers the app uses at startup.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote vipcortes seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from vipcortes.core.config import Settings  # noqa: E402
from vipcortes.core.rate_limiter import reset_limits  # noqa: E402
from vipcortes.db import make_engine  # noqa: E402
from vipcortes.db.create_tables import create_all  # noqa: E402
from vipcortes.repositories.selector import file_storage, sql_storage  # noqa: E402


def make_settings(tmp_path: Path, database_url: str = "") -> Settings:
    return Settings(
        app_env="test",
        database_url=database_url,
        data_dir=tmp_path / "data",
        port=10000,
        log_level="WARNING",
        cors_origins=("*",),
    )


@pytest.fixture()
def db_storage(tmp_path):
    """DB-mode storage on a temporary SQLite database."""
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    create_all(engine)
    yield sql_storage(engine, tmp_path / "data")
    engine.dispose()


@pytest.fixture()
def json_storage(tmp_path):
    """FILE-mode storage on a temporary data directory."""
    return file_storage(tmp_path / "data")


@pytest.fixture(params=["db", "file"])
def storage(request):
    if request.param == "db":
        return request.getfixturevalue("db_storage")
    return request.getfixturevalue("json_storage")


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    reset_limits()
    yield
    reset_limits()
