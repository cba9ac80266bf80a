import pytest
from fastapi.testclient import TestClient

from dictionary_api.app.core.config import settings
from dictionary_api.app.core.db import init_db
from dictionary_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "dictionary.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def broken_db(tmp_path, monkeypatch):
    # sqlite cannot create a file inside a directory that does not exist.
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "missing" / "dictionary.db"))


@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client
