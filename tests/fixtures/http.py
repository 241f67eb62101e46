from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.user_api.api.http.app import app
from src.user_api.api.http.app_data import ApplicationDependencies
from src.user_api.core.services import DbSessionService
from src.user_api.runtime.config.config_data import ConfigData, DatabaseConfig

__all__ = ["database_service", "client_fixture", "create_user"]


@pytest.fixture
def database_service() -> Generator[DbSessionService]:
    """Database service bound to a private in-memory SQLite database."""
    service = DbSessionService(ConfigData(database=DatabaseConfig(url="sqlite://")))
    service.create_all()
    try:
        yield service
    finally:
        service.dispose()


@pytest.fixture(name="client")
def client_fixture(database_service: DbSessionService) -> Generator[TestClient]:
    """Create a test client wired to the in-memory database.

    The lifespan is not run; application dependencies are installed directly.
    """
    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service
    )
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        del app.state.app_dependencies


@pytest.fixture
def create_user(client: TestClient):
    """Return a helper that POSTs a user and returns the decoded body."""

    def _create(first_name: str, last_name: str, email: str | None) -> dict:
        response = client.post(
            "/api/v1/users",
            json={"firstName": first_name, "lastName": last_name, "email": email},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
