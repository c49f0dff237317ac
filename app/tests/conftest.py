import pytest
from fastapi.testclient import TestClient
import os
from typing import Generator

# Set environment variables BEFORE importing settings or the app,
# so the process store never touches a document on disk during tests.
os.environ["IN_MEMORY_STORE"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

from app.core.settings import settings as app_settings
app_settings.IN_MEMORY_STORE = True

# Import the FastAPI app AFTER settings are overridden.
from app.main import app

from app.database import JsonStore, get_db
from app.crud.team import create_team
from app.crud.user import create_user


@pytest.fixture(scope="function")
def db() -> JsonStore:
    """
    Fresh in-memory store for each test function.
    """
    store = JsonStore()
    store.use_in_memory_only()
    return store


@pytest.fixture(scope="function")
def client(db: JsonStore) -> Generator[TestClient, None, None]:
    """
    TestClient whose requests all use the test store.
    """
    app.dependency_overrides[get_db] = lambda: db
    with TestClient(app) as c:
        yield c
    del app.dependency_overrides[get_db]


@pytest.fixture(scope="function")
def test_team(db: JsonStore):
    return create_team(db, {"name": "T1", "description": "Test team"})


@pytest.fixture(scope="function")
def test_user(db: JsonStore, test_team):
    return create_user(db, {"email": "alice@x.com", "name": "Alice", "team_id": test_team.id})


@pytest.fixture(scope="function")
def unwritable_store(tmp_path) -> JsonStore:
    """
    Store whose document sits under a regular file, so every save fails.
    """
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    return JsonStore(blocker / "store.json")
