"""Basic tests for the Stocks API."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the FastAPI app."""
    from app import app

    return TestClient(app)


def test_health_check(client: TestClient) -> None:
    """Test the health check endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Stocks API is running!"}


def test_app_metadata() -> None:
    """Test that the app exposes its title and the stocks routes."""
    from app import app

    assert app.title == "Stocks API"
    paths = {route.path for route in app.routes}
    assert "/stocks" in paths
    assert "/stocks/{stock_id}" in paths


def test_lifespan_without_database_url(monkeypatch) -> None:
    """Test startup survives a missing DATABASE_URL and leaves the service unset."""
    import api.stocks
    from app import app

    monkeypatch.delenv("DATABASE_URL", raising=False)

    with TestClient(app) as client:
        assert api.stocks.stock_service is None
        response = client.get("/stocks")

    assert response.status_code == 500


@pytest.mark.integration
def test_lifespan_wires_service(monkeypatch, test_engine, test_db_url) -> None:
    """Test startup opens the database and wires the stock service."""
    import api.stocks
    from app import app

    monkeypatch.setenv("DATABASE_URL", test_db_url)

    with TestClient(app) as client:
        assert api.stocks.stock_service is not None
        response = client.get("/stocks")
        assert response.status_code == 200

    assert api.stocks.stock_service is None
