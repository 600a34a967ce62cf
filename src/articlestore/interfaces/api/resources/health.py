"""Health check endpoints."""

import falcon.asgi

from articlestore.application.ports import ArticleRepository
from articlestore.domain.exceptions import StorageError
from articlestore.domain.value_objects import ArticleId

# Probe key; never written.
_READY_PROBE_ID = ArticleId("__health__")


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, repository: ArticleRepository | None = None) -> None:
        self._repository = repository

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (backing document decodes)."""
        if self._repository is not None:
            try:
                await self._repository.exists(_READY_PROBE_ID)
            except StorageError as e:
                resp.media = {"status": "unavailable", "error": str(e)}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
