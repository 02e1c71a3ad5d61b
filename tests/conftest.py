# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from store_backend.core.config import Settings
from store_backend.core.exceptions import QueryError
from store_backend.db.gateway import DatabaseGateway
from store_backend.db.init_db import init_db
from store_backend.main import create_application


class FailingGateway:
    """Stands in for a database that accepts the connection then fails every query."""

    def __init__(self):
        self.engine = create_engine("sqlite://", poolclass=StaticPool)

    def connect(self) -> None:
        pass

    def execute(self, statement, params=None):
        raise QueryError("database went away")

    def dispose(self) -> None:
        pass


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", auto_create_tables=True, log_level="DEBUG")


@pytest.fixture
def gateway(settings):
    gw = DatabaseGateway.from_settings(settings)
    init_db(gw.engine)
    yield gw
    gw.dispose()


@pytest.fixture
def client(settings, gateway):
    app = create_application(settings=settings, gateway=gateway)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def failing_client(settings):
    app = create_application(
        settings=settings.model_copy(update={"auto_create_tables": False}),
        gateway=FailingGateway(),
    )
    with TestClient(app) as c:
        yield c
