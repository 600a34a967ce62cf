"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from articlestore import __version__
from articlestore.config import Settings, get_settings
from articlestore.infrastructure.persistence.json_file.article_repository import (
    JsonFileArticleRepository,
)
from articlestore.interfaces.api.resources.articles import ArticleResource
from articlestore.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level to the root logger."""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_articlestore_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app over the configured article file."""
    settings = settings or get_settings()
    repository = JsonFileArticleRepository(settings.data_file)

    app = falcon.asgi.App()

    async def log_exception(req, resp, ex, params):
        logger.error("unhandled error on %s %s", req.method, req.path, exc_info=ex)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    health_resource = HealthResource(repository)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/articles/{article_id}", ArticleResource(repository))

    return app


def run_server(settings: Settings | None = None) -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = settings or get_settings()
    app = create_articlestore_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    configure_logging(settings)
    print(f"articlestore v{__version__}")
    run_server(settings)
