"""Fixtures for API tests."""

from pathlib import Path

import falcon.asgi
import pytest
from falcon.testing import TestClient

from articlestore.config import Settings
from articlestore.interfaces.api.resources.articles import ArticleResource
from articlestore.interfaces.api.resources.health import HealthResource
from articlestore.main import create_articlestore_app


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test article file."""
    return Settings(data_file=tmp_path / "data" / "articles.json")


@pytest.fixture
def app(settings: Settings) -> falcon.asgi.App:
    """Composed application over a real JSON file."""
    return create_articlestore_app(settings)


@pytest.fixture
def client(app: falcon.asgi.App) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def fake_client(fake_repository) -> TestClient:
    """Test client over the in-memory repository."""
    app = falcon.asgi.App()
    app.add_route("/v1/health", HealthResource(fake_repository))
    app.add_route("/v1/health/ready", HealthResource(fake_repository), suffix="ready")
    app.add_route("/v1/articles/{article_id}", ArticleResource(fake_repository))
    return TestClient(app)
