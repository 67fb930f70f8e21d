"""Read-only HTML pages: article list, detail, compose, edit, about."""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from pressroom.application.services import ArticleService
from pressroom.domain.exceptions import EntityNotFoundError
from pressroom.config import Settings
from pressroom.infrastructure.dependencies import get_app_settings, get_article_service
from pressroom.presentation.web.rendering import PageRenderer, get_page_renderer, to_view, to_views

router = APIRouter(tags=["Pages"], default_response_class=HTMLResponse)


@router.get("/")
async def home(
    request: Request,
    service: ArticleService = Depends(get_article_service),
    renderer: PageRenderer = Depends(get_page_renderer),
):
    """List every article."""
    articles = await service.list_articles()
    return renderer.render(request, "index.html", "Home Page", articles=to_views(articles))


@router.get("/compose")
async def compose(
    request: Request,
    service: ArticleService = Depends(get_article_service),
    renderer: PageRenderer = Depends(get_page_renderer),
    settings: Settings = Depends(get_app_settings),
):
    """New-article form plus the management list."""
    articles = await service.list_articles()
    return renderer.render(
        request,
        "compose.html",
        "Compose Page",
        articles=to_views(articles),
        max_upload_size_mb=settings.max_upload_size_mb,
    )


@router.get("/about")
async def about(request: Request, renderer: PageRenderer = Depends(get_page_renderer)):
    return renderer.render(request, "about.html", "About Page")


@router.get("/articles/{article_id}")
async def article_detail(
    article_id: int,
    request: Request,
    service: ArticleService = Depends(get_article_service),
    renderer: PageRenderer = Depends(get_page_renderer),
):
    """Show a single article."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return renderer.render(request, "article.html", article.title, article=to_view(article))


@router.get("/articles/{article_id}/edit")
async def edit_article(
    article_id: int,
    request: Request,
    service: ArticleService = Depends(get_article_service),
    renderer: PageRenderer = Depends(get_page_renderer),
    settings: Settings = Depends(get_app_settings),
):
    """Edit form pre-filled with the current article."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return renderer.render(
        request,
        "edit.html",
        "Edit Article",
        article=to_view(article),
        max_upload_size_mb=settings.max_upload_size_mb,
    )
