"""Article entity."""

from dataclasses import dataclass
from datetime import datetime

from articlestore.domain.value_objects import ArticleId


@dataclass
class Article:
    """Stored article. ``created_at`` is local time captured on every set."""

    id: ArticleId
    content: str
    created_at: datetime
