"""Domain value objects."""

from articlestore.domain.value_objects.article_id import ArticleId

__all__ = [
    "ArticleId",
]
