"""Application ports (interfaces)."""

from articlestore.application.ports.repositories import ArticleRepository

__all__ = [
    "ArticleRepository",
]
