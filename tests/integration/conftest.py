import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from scanner_bridge.config.settings import Settings
from scanner_bridge.database.connection import close_pool, get_connection, init_pool

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "scanner_bridge" / "database" / "schema.sql"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "scanner_bridge_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env to point at a scratch database"
        )
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def serial_cleanup(integration_pool: None) -> Generator[list[str], None, None]:
    """Collects sn_bapp values whose rows are deleted after the test."""
    serials: list[str] = []
    yield serials
    if not serials:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute("DELETE FROM scan_records WHERE sn_bapp = ANY(%s)", (serials,))
        conn.commit()


@pytest.fixture
def unique_serial(serial_cleanup: list[str], request: pytest.FixtureRequest) -> str:
    serial = f"IT-{os.getpid()}-{request.node.name}"[:100]
    serial = "".join(ch if ch.isalnum() or ch in "-_." else "-" for ch in serial)
    serial_cleanup.append(serial)
    return serial
