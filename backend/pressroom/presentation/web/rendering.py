"""Server-side page rendering on Jinja2 templates."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from pressroom.application.schemas import ArticleView
from pressroom.application.services import FlashNotifier
from pressroom.domain.entities import Article

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def to_view(article: Article) -> ArticleView:
    return ArticleView.model_validate(article, from_attributes=True)


def to_views(articles: Iterable[Article]) -> list[ArticleView]:
    return [to_view(a) for a in articles]


class PageRenderer:
    """Renders a template with the page title and any pending flash message.

    Every render consumes the flash, so a message set by a write is shown on
    exactly one page.
    """

    def __init__(self, templates_dir: str | Path = TEMPLATES_DIR, site_title: str = "Pressroom"):
        self._templates = Jinja2Templates(directory=str(templates_dir))
        self._site_title = site_title

    def render(
        self,
        request: Request,
        template: str,
        title: str,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
        **context: Any,
    ) -> Response:
        flash = FlashNotifier(request.session).consume()
        return self._templates.TemplateResponse(
            request,
            template,
            {
                "title": title,
                "site_title": self._site_title,
                "success_message": flash.success_message,
                "error_message": flash.error_message,
                **context,
            },
            status_code=status_code,
            headers=headers,
        )


def get_page_renderer(request: Request) -> PageRenderer:
    return request.app.state.renderer
