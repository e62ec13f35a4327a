# tests/services/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy.orm import Session
from starlette.testclient import TestClient

from cinecatalog.services.api.app import create_app
from cinecatalog.services.api.deps import get_db, transactional_session


@pytest.fixture()
def api_session(db_engine):
    """
    One connection/transaction for the whole test, rolled back at the end.
    """
    conn = db_engine.connect()
    trans = conn.begin()
    session = Session(bind=conn, future=True)
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        conn.close()


@pytest.fixture()
def api_app(db_engine, api_session):
    """
    The app with both session dependencies overridden to yield `api_session`,
    so all requests in one test share it (POST -> GET works).
    """
    app = create_app(engine=db_engine)

    def _override():
        # yield the same session for every request in this test
        yield api_session

    app.dependency_overrides[get_db] = _override
    app.dependency_overrides[transactional_session] = _override
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def api_client(api_app):
    with TestClient(api_app) as client:
        yield client
