"""
Test configuration and fixtures for the alias shortener.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient

from main import app
from alias_shortener.database.connection import (
    create_sqlite_engine,
    init_db,
    make_session_factory,
)
from alias_shortener.dependencies import get_alias_generator, get_alias_store
from alias_shortener.services.alias_generator import RandomAliasGenerator
from alias_shortener.storage.strategies import InMemoryAliasStore, SQLAlchemyAliasStore


@pytest.fixture(scope="function")
def engine(tmp_path):
    """
    Engine on a fresh SQLite file per test.
    A real file (not :memory:) so concurrent threads get their own connections.
    """
    engine = create_sqlite_engine(f"sqlite:///{tmp_path / 'storage' / 'test.db'}")
    init_db(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def sqlite_store(engine):
    return SQLAlchemyAliasStore(make_session_factory(engine))


@pytest.fixture(scope="function")
def memory_store():
    return InMemoryAliasStore()


@pytest.fixture(scope="function", params=["sqlite", "memory"])
def store(request):
    """Every store contract test runs against both backends."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture(scope="function")
def generator():
    return RandomAliasGenerator(length=6, seed=1234)


@pytest.fixture(scope="function")
def client(sqlite_store, generator):
    """
    Create a test client with the store dependency overridden.
    This is the main fixture that API tests will use.
    """
    app.dependency_overrides[get_alias_store] = lambda: sqlite_store
    app.dependency_overrides[get_alias_generator] = lambda: generator

    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()
