"""Pytest fixtures for articlestore tests."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from articlestore.domain.entities import Article
from articlestore.domain.exceptions import ArticleNotFound
from articlestore.domain.value_objects import ArticleId
from articlestore.infrastructure.persistence.json_file.article_repository import (
    JsonFileArticleRepository,
)


# --- Fake repositories ---


class FakeArticleRepository:
    """In-memory article repository.

    ``fail_with`` makes every call raise the given exception.
    """

    def __init__(self) -> None:
        self._by_id: dict[ArticleId, Article] = {}
        self.fail_with: Exception | None = None

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def set_entry(self, article_id: ArticleId, content: str) -> Article:
        self._check()
        article = Article(
            id=article_id,
            content=content,
            created_at=datetime.now().astimezone(),
        )
        self._by_id[article_id] = article
        return Article(id=article.id, content=article.content, created_at=article.created_at)

    async def read_snapshot(self, article_id: ArticleId) -> Article:
        self._check()
        article = self._by_id.get(article_id)
        if article is None:
            raise ArticleNotFound(article_id)
        return Article(id=article.id, content=article.content, created_at=article.created_at)

    async def exists(self, article_id: ArticleId) -> bool:
        self._check()
        return article_id in self._by_id

    async def remove(self, article_id: ArticleId) -> None:
        self._check()
        self._by_id.pop(article_id, None)


# --- Fixtures ---


@pytest.fixture
def article_file(tmp_path: Path) -> Path:
    """Path of a not-yet-created article document."""
    return tmp_path / "articles.json"


@pytest.fixture
def repository(article_file: Path) -> JsonFileArticleRepository:
    """Fresh file-backed repository over an empty document."""
    return JsonFileArticleRepository(article_file)


@pytest.fixture
def fake_repository() -> FakeArticleRepository:
    """Fresh in-memory repository for each test."""
    return FakeArticleRepository()
