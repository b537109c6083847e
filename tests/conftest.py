"""Shared fixtures: the real app over an in-memory SQLite store."""

import os

os.environ.setdefault("DB_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from animals_api import database
from animals_api.app import create_app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    database.create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def app(engine):
    return create_app(engine, public_url="http://testserver")


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


class BrokenSession:
    """Stands in for a session whose database has gone away."""

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is unreachable"))

    execute = _fail
    get = _fail
    commit = _fail

    def add(self, instance):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


@pytest.fixture
def broken_client(app):
    def get_broken_db():
        yield BrokenSession()

    app.dependency_overrides[database.get_db] = get_broken_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def lion():
    return {"name": "Lion", "species": "Mammal", "age": 5}
