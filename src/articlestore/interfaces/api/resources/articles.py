"""Article API resources."""

import falcon.asgi

from articlestore.application.ports import ArticleRepository
from articlestore.domain.entities import Article
from articlestore.domain.exceptions import ArticleNotFound, StorageError
from articlestore.domain.value_objects import ArticleId


def _article_media(article: Article) -> dict:
    return {
        "id": str(article.id),
        "content": article.content,
        "created_at": article.created_at.isoformat(),
    }


class ArticleResource:
    """GET/HEAD/PUT/DELETE /v1/articles/{article_id}."""

    def __init__(self, repository: ArticleRepository) -> None:
        self._repository = repository

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, article_id: str
    ) -> None:
        """Get article by id."""
        try:
            article = await self._repository.read_snapshot(ArticleId(article_id))
        except ArticleNotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except StorageError as e:
            resp.status = falcon.HTTP_500
            resp.media = {"error": str(e), "stage": e.stage}
            return
        resp.media = _article_media(article)
        resp.status = falcon.HTTP_200

    async def on_head(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, article_id: str
    ) -> None:
        """Existence check, no body."""
        try:
            found = await self._repository.exists(ArticleId(article_id))
        except StorageError:
            resp.status = falcon.HTTP_500
            return
        resp.status = falcon.HTTP_200 if found else falcon.HTTP_404

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, article_id: str
    ) -> None:
        """Create or overwrite the article; responds with the stored record."""
        try:
            body = await req.get_media()
            content = body["content"]
        except (KeyError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"missing field: {e}"}
            return
        if not isinstance(content, str):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "content must be a string"}
            return

        try:
            article = await self._repository.set_entry(ArticleId(article_id), content)
        except StorageError as e:
            resp.status = falcon.HTTP_500
            resp.media = {"error": str(e), "stage": e.stage}
            return
        resp.media = _article_media(article)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, article_id: str
    ) -> None:
        """Delete article; succeeds when already absent."""
        try:
            await self._repository.remove(ArticleId(article_id))
        except StorageError as e:
            resp.status = falcon.HTTP_500
            resp.media = {"error": str(e), "stage": e.stage}
            return
        resp.status = falcon.HTTP_204
