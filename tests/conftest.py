# tests/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from cinecatalog.common.settings import get_settings
from cinecatalog.database.models import Base  # <-- imports the models/metadata


@pytest.fixture(scope="session")
def _database_url():
    """
    TEST_DATABASE_URL wins; USE_TESTCONTAINERS=true starts a throwaway Postgres;
    otherwise an in-memory SQLite database is used.
    """
    cfg = get_settings()
    if cfg.test_database_url:
        yield cfg.test_database_url
        return
    if cfg.use_testcontainers:
        from testcontainers.postgres import PostgresContainer

        with PostgresContainer(cfg.test_db_image) as pg:
            # Force psycopg (v3) driver in the URL returned by testcontainers (it defaults to psycopg2)
            yield pg.get_connection_url().replace("psycopg2", "psycopg")
        return
    yield "sqlite+pysqlite:///:memory:"


@pytest.fixture(scope="session")
def db_engine(_database_url) -> Engine:
    if make_url(_database_url).get_backend_name() == "sqlite":
        # one shared connection so every session sees the same in-memory database
        engine = create_engine(
            _database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )
    else:
        engine = create_engine(_database_url, future=True)

    # Skip Alembic here; just create tables from models
    Base.metadata.create_all(bind=engine)

    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
