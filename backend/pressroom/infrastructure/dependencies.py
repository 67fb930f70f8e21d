"""FastAPI dependency injection — wires infrastructure to application layer.

Long-lived objects (settings, the article repository, the page renderer) are
created once by ``create_app`` and parked on ``app.state``; services are
cheap and built per request around them.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from pressroom.application.interfaces import ArticleRepository
from pressroom.application.services import ArticleService, FlashNotifier, ImageUploadService
from pressroom.config import Settings
from pressroom.infrastructure.storage.local_file_storage import LocalFileStorage


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_article_repository(request: Request) -> ArticleRepository:
    """The process-wide article repository."""
    return request.app.state.article_repository


async def get_image_upload_service(
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[ImageUploadService, None]:
    """Provides an ImageUploadService backed by the local upload directory."""
    storage = LocalFileStorage(upload_dir=settings.upload_dir)
    yield ImageUploadService(
        storage=storage,
        max_size_bytes=settings.max_upload_size_bytes,
        url_prefix=settings.upload_url_prefix,
    )


async def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
    uploads: ImageUploadService = Depends(get_image_upload_service),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    yield ArticleService(repository, uploads)


def get_flash_notifier(request: Request) -> FlashNotifier:
    """Flash messages live in the signed session cookie."""
    return FlashNotifier(request.session)
