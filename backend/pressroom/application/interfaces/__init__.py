from .article_repository import ArticleRepository
from .file_storage import FileStorage, StoredFile

__all__ = [
    "ArticleRepository",
    "FileStorage",
    "StoredFile",
]
