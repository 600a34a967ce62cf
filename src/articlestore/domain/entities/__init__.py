"""Domain entities."""

from articlestore.domain.entities.article import Article

__all__ = [
    "Article",
]
