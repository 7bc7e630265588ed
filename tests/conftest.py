import os

import pytest
from fastapi.testclient import TestClient

from core import config
from database.db_setup import get_engine, init_db
from database.queries import bind_engine
from database.seed import seed_if_empty


@pytest.fixture
def db_url(tmp_path) -> str:
    """
    URL of a throwaway SQLite file under pytest's `tmp_path`.
    """
    return f"sqlite:///{os.path.join(tmp_path, 'diseases.db')}"


@pytest.fixture
def engine(db_url: str):
    """
    Empty catalog with the schema created and sessions bound to it.
    """
    engine = get_engine(db_url)
    init_db(engine)
    bind_engine(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def seeded(engine):
    """Catalog holding the five starter diseases."""
    seed_if_empty()
    return engine


@pytest.fixture
def client(db_url: str, monkeypatch):
    """
    API client; the lifespan handler initializes and seeds `db_url`.
    """
    monkeypatch.setattr(config, "DATABASE_URL", db_url)
    monkeypatch.setattr(config, "SEED_ON_STARTUP", True)

    from backend.main import app

    with TestClient(app) as c:
        yield c
