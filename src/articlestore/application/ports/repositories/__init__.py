"""Repository ports."""

from articlestore.application.ports.repositories.article_repository import (
    ArticleRepository,
)

__all__ = [
    "ArticleRepository",
]
