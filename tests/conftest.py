"""Shared test fixtures."""

import pytest

from matchday.config import Config
from matchday.database import get_db, init_db


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the app at a fresh, initialized database file."""
    path = tmp_path / "matchday.db"
    monkeypatch.setattr(Config, "DATABASE_PATH", str(path))
    init_db(path)
    return path


@pytest.fixture
def conn(db_path):
    """Open connection to the test database."""
    with get_db(db_path) as conn:
        yield conn
