"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from pressroom.application.interfaces import ArticleRepository
from pressroom.config import Settings, get_settings
from pressroom.infrastructure.logging.log_config import setup_logging
from pressroom.infrastructure.memory import InMemoryArticleRepository
from pressroom.infrastructure.seed.yaml_seed_loader import load_seed_articles
from pressroom.presentation.web.errors import register_error_handlers
from pressroom.presentation.web.rendering import PageRenderer
from pressroom.presentation.web.router import router as web_router

logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> InMemoryArticleRepository:
    """Create the article repository, seeded when the settings ask for it."""
    seed = load_seed_articles(settings.seed_file) if settings.seed_articles else []
    return InMemoryArticleRepository(seed=seed)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, report state, drop articles on stop."""
    settings: Settings = app.state.settings
    repository: ArticleRepository = app.state.article_repository
    setup_logging(settings)

    logger.info(
        "%s %s started — %d articles, uploads in %s",
        settings.app_title,
        settings.app_version,
        await repository.count(),
        settings.upload_dir,
    )

    yield

    # Shutdown: nothing is persisted
    await repository.clear()
    logger.info("Article repository discarded")


def create_app(
    settings: Settings | None = None,
    repository: ArticleRepository | None = None,
) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()
    if repository is None:
        repository = build_repository(settings)

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.article_repository = repository
    app.state.renderer = PageRenderer(site_title=settings.app_title)

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age,
        same_site="lax",
    )
    register_error_handlers(app)

    app.include_router(web_router)

    # Static mounts go last so routes win; uploads before the catch-all public root
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    Path(settings.public_dir).mkdir(parents=True, exist_ok=True)
    app.mount(settings.upload_url_prefix, StaticFiles(directory=settings.upload_dir), name="uploads")
    app.mount("/", StaticFiles(directory=settings.public_dir), name="public")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "pressroom.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.app_env == "development",
    )
