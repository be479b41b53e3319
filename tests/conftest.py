"""Shared fixtures."""

import os
import tempfile

# Keep the on-disk database out of the source tree during tests.
os.environ.setdefault("DAXDAILY_DATA_DIR", tempfile.mkdtemp(prefix="daxdaily-test-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from daxdaily.content import ContentCatalog, get_catalog
from daxdaily.db import get_db, init_db
from daxdaily.main import app


@pytest.fixture
def catalog():
    return ContentCatalog()


@pytest.fixture
def db_session():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = Session()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def client(db_session, catalog):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalog] = lambda: catalog
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
