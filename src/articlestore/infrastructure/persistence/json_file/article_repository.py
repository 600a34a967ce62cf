"""Whole-file JSON article repository implementation."""

import asyncio
import logging
import os
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, TypeVar

from aiorwlock import RWLock
from pydantic import ValidationError

from articlestore.domain.entities import Article
from articlestore.domain.exceptions import (
    ArticleNotFound,
    DocumentDecodeError,
    StorageIOError,
)
from articlestore.domain.value_objects import ArticleId
from articlestore.infrastructure.persistence.json_file.schema import (
    ArticleFileSchema,
    ArticleRecord,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _run_to_completion(func: Callable[..., T], *args: object) -> T:
    """Run blocking ``func`` in a worker thread and wait for it to finish.

    A cancelled caller still waits for the thread before the cancellation
    propagates, so a lock held around this call is never released while the
    thread is touching the file.
    """
    task = asyncio.ensure_future(asyncio.to_thread(func, *args))
    try:
        return await asyncio.shield(task)
    except asyncio.CancelledError:
        while not task.done():
            try:
                await asyncio.wait({task})
            except asyncio.CancelledError:
                continue
        if not task.cancelled():
            task.exception()
        raise


class JsonFileArticleRepository:
    """Article repository backed by a single JSON file.

    Every call reads the whole document, and every mutation rewrites it.
    Readers share the lock; writers hold it exclusively for the full
    decode, mutate, encode and persist sequence, so mutations are applied in
    the order the writer lock is granted.

    Use one instance per path. The lock lives on the instance, so two
    instances over the same file do not exclude each other.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)
        self._lock = RWLock()
        self._create_default_file_if_absent()

    @property
    def path(self) -> Path:
        return self._path

    def _create_default_file_if_absent(self) -> None:
        """Initialize an empty document unless the file already exists.

        Exclusive create: of several constructions racing on an absent path,
        only one writes the empty document. Existing files are left untouched.
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("create file %s: %s", self._path, e)
            raise StorageIOError("create file", self._path) from e
        try:
            with self._path.open("x", encoding="utf-8") as f:
                f.write(ArticleFileSchema.empty().model_dump_json())
        except FileExistsError:
            return
        except OSError as e:
            logger.error("create file %s: %s", self._path, e)
            raise StorageIOError("create file", self._path) from e
        logger.info("created empty article document at %s", self._path)

    async def set_entry(self, article_id: ArticleId, content: str) -> Article:
        """Insert or replace the article, stamping ``created_at`` with now.

        Returns the record exactly as written.
        """
        logger.info("calling set_entry")
        written: list[Article] = []

        def _put(document: ArticleFileSchema) -> bool:
            article = Article(
                id=article_id,
                content=content,
                created_at=datetime.now().astimezone(),
            )
            document.data[str(article_id)] = ArticleRecord.from_entity(article)
            written.append(article)
            return True

        async with self._lock.writer_lock:
            await _run_to_completion(self._mutate, _put)
        return written[0]

    async def read_snapshot(self, article_id: ArticleId) -> Article:
        """Return a copy of the stored article. Raises ArticleNotFound if absent."""
        logger.info("calling read_snapshot")
        async with self._lock.reader_lock:
            document = await _run_to_completion(self._read_document)
        record = document.data.get(str(article_id))
        if record is None:
            raise ArticleNotFound(article_id)
        return record.to_entity()

    async def exists(self, article_id: ArticleId) -> bool:
        logger.info("calling exists")
        async with self._lock.reader_lock:
            document = await _run_to_completion(self._read_document)
        return str(article_id) in document.data

    async def remove(self, article_id: ArticleId) -> None:
        """Delete the article if present. Removing an absent id leaves the file untouched."""
        logger.info("calling remove")

        def _drop(document: ArticleFileSchema) -> bool:
            return document.data.pop(str(article_id), None) is not None

        async with self._lock.writer_lock:
            await _run_to_completion(self._mutate, _drop)

    def _open(self, mode: str) -> BinaryIO:
        try:
            return self._path.open(mode)
        except OSError as e:
            logger.error("open file %s: %s", self._path, e)
            raise StorageIOError("open file", self._path) from e

    def _read_all(self, handle: BinaryIO) -> bytes:
        try:
            return handle.read()
        except OSError as e:
            logger.error("read file %s: %s", self._path, e)
            raise StorageIOError("read file", self._path) from e

    def _decode(self, raw: bytes) -> ArticleFileSchema:
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.error("utf8 verify %s: %s", self._path, e)
            raise DocumentDecodeError("utf8 verify", self._path) from e
        logger.debug("file JSON: %s", text)
        try:
            return ArticleFileSchema.model_validate_json(text)
        except ValidationError as e:
            logger.error("reading json file %s: %s", self._path, e)
            raise DocumentDecodeError("reading json file", self._path) from e

    def _read_document(self) -> ArticleFileSchema:
        with self._open("rb") as handle:
            return self._decode(self._read_all(handle))

    def _mutate(self, change: Callable[[ArticleFileSchema], bool]) -> None:
        """Decode, apply ``change``, then rewrite the file from offset 0.

        ``change`` returns False when it left the document as it was; the file
        is then not rewritten. Otherwise the file is truncated to the new
        payload length so a shorter document never leaves trailing bytes of
        the previous one.
        """
        with self._open("r+b") as handle:
            document = self._decode(self._read_all(handle))
            logger.info("parsed")
            if not change(document):
                logger.info("unchanged")
                return
            logger.info("modified")
            payload = document.model_dump_json().encode("utf-8")
            try:
                handle.seek(0)
                handle.write(payload)
                handle.truncate(len(payload))
                handle.flush()
            except OSError as e:
                logger.error("write file %s: %s", self._path, e)
                raise StorageIOError("write file", self._path) from e
        logger.info("wrote")
