"""Top-level web router — aggregates the page, form and health routers."""

from fastapi import APIRouter

from pressroom.presentation.web.endpoints.articles import router as articles_router
from pressroom.presentation.web.endpoints.health import router as health_router
from pressroom.presentation.web.endpoints.pages import router as pages_router

router = APIRouter()
router.include_router(health_router)
router.include_router(pages_router)
router.include_router(articles_router)
