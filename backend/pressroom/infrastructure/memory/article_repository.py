"""Concrete repository implementation backed by a process-local list."""

import copy
import logging
import threading
from collections.abc import Iterable

from pressroom.application.interfaces import ArticleRepository
from pressroom.domain.entities import Article

logger = logging.getLogger(__name__)


class InMemoryArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port with an ordered in-memory list.

    Seeded articles keep their IDs. New IDs continue from the highest seeded
    ID and are never handed out twice, even after deletes. Callers always
    receive copies; the only way to change a stored article is ``update()``.
    """

    def __init__(self, seed: Iterable[Article] = ()):
        self._lock = threading.Lock()
        self._articles: list[Article] = []
        seen: set[int] = set()
        for article in seed:
            if article.id is None:
                raise ValueError(f"Seed article '{article.title}' has no id")
            if article.id in seen:
                raise ValueError(f"Duplicate seed article id {article.id}")
            seen.add(article.id)
            self._articles.append(copy.copy(article))
        self._next_id = max(seen, default=0) + 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def _index_of(self, article_id: int) -> int | None:
        for index, article in enumerate(self._articles):
            if article.id == article_id:
                return index
        return None

    async def get_by_id(self, article_id: int) -> Article | None:
        with self._lock:
            index = self._index_of(article_id)
            return copy.copy(self._articles[index]) if index is not None else None

    async def get_all(self) -> list[Article]:
        with self._lock:
            return [copy.copy(a) for a in self._articles]

    async def create(self, article: Article) -> Article:
        with self._lock:
            stored = copy.copy(article)
            stored.id = self._next_id
            self._next_id += 1
            self._articles.append(stored)
            logger.debug("Stored article %d (%d total)", stored.id, len(self._articles))
            return copy.copy(stored)

    async def update(self, article: Article) -> Article:
        with self._lock:
            index = self._index_of(article.id) if article.id is not None else None
            if index is None:
                raise ValueError(f"Article {article.id} not found in repository")
            self._articles[index] = copy.copy(article)
            return copy.copy(article)

    async def delete(self, article_id: int) -> bool:
        with self._lock:
            index = self._index_of(article_id)
            if index is None:
                return False
            del self._articles[index]
            return True

    async def count(self) -> int:
        with self._lock:
            return len(self._articles)

    async def clear(self) -> None:
        with self._lock:
            self._articles.clear()
