"""
Pytest fixtures for the persistence and HTTP tests

Every test gets its own in-memory SQLite database, created and seeded
with the demo categories and products.
"""

import pytest
from fastapi.testclient import TestClient

from catalog.infrastructure.bootstrap import unit_of_work_factory
from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.database import (
    create_tables,
    drop_tables,
    init_engine,
)
from catalog.infrastructure.persistence.seed import seed
from catalog.infrastructure.web.app import create_app


@pytest.fixture
def bare_engine():
    """
    In-memory database with no tables at all
    """
    engine = init_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def engine():
    """
    In-memory database with the schema and the demo data
    """
    engine = init_engine("sqlite://")
    create_tables(engine)
    seed(engine)
    yield engine
    drop_tables(engine)
    engine.dispose()


@pytest.fixture
def uow_factory(engine):
    return unit_of_work_factory(engine)


@pytest.fixture
def settings():
    return Settings(
        service_name="catalog-test",
        database_url="sqlite://",
        create_schema=False,
        log_format="text",
    )


@pytest.fixture
def client(settings, engine):
    """
    HTTP client bound to the seeded database
    """
    app = create_app(settings=settings, engine=engine)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
