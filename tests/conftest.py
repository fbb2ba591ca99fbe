import pytest
from fastapi.testclient import TestClient

from app.core.config import AppSettings
from app.main import create_app


@pytest.fixture
def sqlite_settings(tmp_path):
    """Settings pointing at a throwaway SQLite file with the table created on startup."""
    return AppSettings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'products.db'}",
        DB_CREATE_TABLES=True,
    )


@pytest.fixture
def client(sqlite_settings):
    """TestClient with the lifespan running, so the connection provider is live."""
    app = create_app(sqlite_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def laptop():
    return {"name": "Laptop", "price": 75000, "qty": 5}
