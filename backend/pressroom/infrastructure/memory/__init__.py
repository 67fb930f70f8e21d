from .article_repository import InMemoryArticleRepository

__all__ = [
    "InMemoryArticleRepository",
]
