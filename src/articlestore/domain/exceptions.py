"""Domain exceptions."""


class ArticleStoreError(Exception):
    """Base exception for articlestore."""

    pass


class ArticleNotFound(ArticleStoreError):
    """Requested article is not present in the document."""

    def __init__(self, article_id: object) -> None:
        super().__init__(f"Article not found: {article_id}")
        self.article_id = article_id


class StorageError(ArticleStoreError):
    """Backing file could not be read, decoded or written.

    ``stage`` names the step that failed (``"open file"``, ``"utf8 verify"``,
    ``"reading json file"``, ...).
    """

    def __init__(self, stage: str, path: object) -> None:
        super().__init__(f"{stage} failed for {path}")
        self.stage = stage
        self.path = path


class StorageIOError(StorageError):
    """Opening, reading or writing the backing file failed."""

    pass


class DocumentDecodeError(StorageError):
    """File content is not UTF-8, not JSON, or not the expected document shape."""

    pass
