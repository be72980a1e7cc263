"""Tests for the health, good-to-go, ping and build-info endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from public_brands_api.core.settings import Settings, get_settings
from public_brands_api.features.brands.routes.brands import get_brand_repository
from public_brands_api.features.brands.usecases import BackingStoreError
from public_brands_api.main import create_app


@pytest.fixture
def mock_repository() -> MagicMock:
    repository = MagicMock()
    repository.check_connectivity = AsyncMock(return_value=None)
    return repository


@pytest.fixture
def client(test_settings: Settings, mock_repository: MagicMock) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_brand_repository] = lambda: mock_repository
    return TestClient(app)


class TestHealth:
    """Test cases for GET /__health."""

    def test_healthy(self, client: TestClient):
        response = client.get("/__health")

        assert response.status_code == 200
        document = response.json()
        assert document["schemaVersion"] == 1
        assert document["name"] == "public-brands-api healthchecks"
        assert document["ok"] is True
        check = document["checks"][0]
        assert check["ok"] is True
        assert check["name"] == "Check connectivity to concepts"
        assert check["checkOutput"] == "Connectivity to concepts is ok"
        for key in ("businessImpact", "technicalSummary", "panicGuide", "lastUpdated"):
            assert key in check

    def test_unhealthy_still_answers_200(
        self, client: TestClient, mock_repository: MagicMock
    ):
        mock_repository.check_connectivity.side_effect = BackingStoreError("down")

        response = client.get("/__health")

        assert response.status_code == 200
        assert response.json()["ok"] is False
        assert response.json()["checks"][0]["checkOutput"] == (
            "Error connecting to concepts"
        )


class TestGoodToGo:
    """Test cases for GET /__gtg."""

    def test_good_to_go(self, client: TestClient):
        response = client.get("/__gtg")

        assert response.status_code == 200
        assert response.text == "OK"

    def test_not_good_to_go(self, client: TestClient, mock_repository: MagicMock):
        mock_repository.check_connectivity.side_effect = BackingStoreError("down")

        response = client.get("/__gtg")

        assert response.status_code == 503
        assert response.text == "Error connecting to concepts"


@pytest.mark.parametrize("path", ["/__ping", "/ping"])
def test_ping(client: TestClient, path: str):
    response = client.get(path)

    assert response.status_code == 200
    assert response.text == "pong"


@pytest.mark.parametrize("path", ["/__build-info", "/build-info"])
def test_build_info(client: TestClient, test_settings: Settings, path: str):
    response = client.get(path)

    assert response.status_code == 200
    assert response.json() == {
        "name": test_settings.app_name,
        "version": test_settings.app_version,
    }
