"""Article repository port."""

from typing import Protocol

from articlestore.domain.entities import Article
from articlestore.domain.value_objects import ArticleId


class ArticleRepository(Protocol):
    """Port for article persistence."""

    async def set_entry(self, article_id: ArticleId, content: str) -> Article: ...

    async def read_snapshot(self, article_id: ArticleId) -> Article: ...

    async def exists(self, article_id: ArticleId) -> bool: ...

    async def remove(self, article_id: ArticleId) -> None: ...
