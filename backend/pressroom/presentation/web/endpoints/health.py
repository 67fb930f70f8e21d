"""Health check endpoint — no dependencies beyond the repository."""

from fastapi import APIRouter, Depends

from pressroom.application.interfaces import ArticleRepository
from pressroom.config import Settings
from pressroom.infrastructure.dependencies import get_app_settings, get_article_repository

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    settings: Settings = Depends(get_app_settings),
    repository: ArticleRepository = Depends(get_article_repository),
) -> dict:
    """Returns the current application health status."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "articles": await repository.count(),
    }
