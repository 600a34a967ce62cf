"""On-disk shape of the article document."""

from datetime import datetime

from pydantic import BaseModel, model_validator

from articlestore.domain.entities import Article
from articlestore.domain.value_objects import ArticleId


class ArticleRecord(BaseModel):
    """One article as stored under its id key."""

    created_at: datetime
    content: str
    id: str

    @classmethod
    def from_entity(cls, article: Article) -> "ArticleRecord":
        return cls(
            created_at=article.created_at,
            content=article.content,
            id=str(article.id),
        )

    def to_entity(self) -> Article:
        return Article(
            id=ArticleId(self.id),
            content=self.content,
            created_at=self.created_at,
        )


class ArticleFileSchema(BaseModel):
    """Root object: ``{"data": {<id>: <ArticleRecord>}}``.

    The whole file is this one object; there is no version field.
    """

    data: dict[str, ArticleRecord]

    @model_validator(mode="after")
    def _ids_match_keys(self) -> "ArticleFileSchema":
        for key, record in self.data.items():
            if record.id != key:
                raise ValueError(f"record id {record.id!r} does not match key {key!r}")
        return self

    @classmethod
    def empty(cls) -> "ArticleFileSchema":
        return cls(data={})
