# tests/services/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy.orm import Session
from sqlalchemy import text
from starlette.testclient import TestClient

from videocatalog.services.api.app import create_app
from videocatalog.services.api.deps import transactional_session

APP_SCHEMA = "catalog"


@pytest.fixture()
def api_client(db_engine):
    """
    A TestClient whose `transactional_session` dependency is overridden to
    yield one SQLAlchemy Session bound to an outer test transaction.
    All API calls in one test share that session (so POST -> GET works),
    and everything is rolled back at the end of the test.
    """
    conn = db_engine.connect()
    trans = conn.begin()
    session = Session(bind=conn, future=True, join_transaction_mode="create_savepoint")
    session.execute(text(f'SET search_path TO "{APP_SCHEMA}", public'))

    app = create_app()

    def _override():
        yield session

    app.dependency_overrides[transactional_session] = _override

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
        session.close()
        trans.rollback()
        conn.close()
