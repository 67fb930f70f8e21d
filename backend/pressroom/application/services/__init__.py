from .image_upload_service import ImageUpload, ImageUploadService
from .article_service import ArticleService
from .flash_notifier import FlashMessages, FlashNotifier

__all__ = [
    "ArticleService",
    "FlashMessages",
    "FlashNotifier",
    "ImageUpload",
    "ImageUploadService",
]
