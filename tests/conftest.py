from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text

from modelgen.api.main import app
from modelgen.core.observability.metrics import reset_metrics

_SCHEMA = [
    """
    CREATE TABLE users (
        id INTEGER PRIMARY KEY,
        name VARCHAR(255),
        email VARCHAR(255),
        created_at DATETIME,
        updated_at DATETIME
    )
    """,
    """
    CREATE TABLE products (
        sku VARCHAR(32),
        price DECIMAL(10, 2),
        created_at DATETIME,
        updated_at DATETIME,
        deleted_at DATETIME
    )
    """,
]


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch):
    # Keep runs independent of the developer's modelgen.yaml / MODELGEN_* env
    for key in (
        "MODELGEN_CONFIG_FILE",
        "MODELGEN_PACKAGE_NAME",
        "MODELGEN_OUTPUT_DIR",
        "MODELGEN_DATABASE_URL",
        "MODELGEN_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_metrics()


@pytest.fixture()
def sqlite_url(tmp_path: Path) -> str:
    """
    File-backed SQLite database with a ``users`` and a ``products`` table.
    """
    url = f"sqlite:///{tmp_path / 'shop.db'}"
    engine = create_engine(url)
    with engine.begin() as conn:
        for ddl in _SCHEMA:
            conn.execute(text(ddl))
    engine.dispose()
    return url


@pytest.fixture()
def client():
    return TestClient(app)
