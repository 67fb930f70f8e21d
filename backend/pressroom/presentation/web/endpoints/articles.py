"""Article write endpoints — HTML form posts answered with 302 redirects."""

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from pressroom.application.schemas import ArticleForm
from pressroom.application.services import ArticleService, FlashNotifier, ImageUploadService
from pressroom.domain.exceptions import (
    EntityNotFoundError,
    PayloadTooLargeError,
    UnexpectedUploadError,
    UnsupportedMediaTypeError,
    ValidationError,
)
from pressroom.infrastructure.dependencies import (
    get_article_service,
    get_flash_notifier,
    get_image_upload_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Articles"])

ARTICLE_NOT_FOUND = "Article not found"


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


@router.post("/submit")
async def submit_article(
    request: Request,
    title: str | None = Form(None),
    brief: str | None = Form(None),
    article: str | None = Form(None),
    service: ArticleService = Depends(get_article_service),
    uploads: ImageUploadService = Depends(get_image_upload_service),
    flash: FlashNotifier = Depends(get_flash_notifier),
) -> RedirectResponse:
    """Create an article and redirect to it."""
    try:
        image = uploads.single_upload(await request.form())
        upload = await uploads.read_image(image)
        form = ArticleForm.from_form(title, brief, article)
        created = await service.create_article(form, upload)
    except UnexpectedUploadError as e:
        logger.warning("POST /submit - 400 unexpected file fields: %s", ", ".join(e.fields))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValidationError as e:
        logger.warning("POST /submit - 400 missing fields: %s", ", ".join(e.fields))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except UnsupportedMediaTypeError as e:
        logger.warning("POST /submit - 415 content type %r", e.content_type)
        raise HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(e))
    except PayloadTooLargeError as e:
        logger.warning("POST /submit - 400 upload of %d bytes over limit", e.size)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    flash.set_success("Article created successfully!")
    return _redirect(f"/articles/{created.id}")


@router.post("/articles/{article_id}/update")
async def update_article(
    request: Request,
    article_id: int,
    title: str | None = Form(None),
    brief: str | None = Form(None),
    article: str | None = Form(None),
    service: ArticleService = Depends(get_article_service),
    uploads: ImageUploadService = Depends(get_image_upload_service),
    flash: FlashNotifier = Depends(get_flash_notifier),
) -> RedirectResponse:
    """Overwrite an article's text, and its image when a new one is sent."""
    try:
        # A missing article answers 404 even when the form or file is also bad.
        await service.get_article(article_id)
        image = uploads.single_upload(await request.form())
        upload = await uploads.read_image(image)
        form = ArticleForm.from_form(title, brief, article)
        await service.update_article(article_id, form, upload)
    except EntityNotFoundError:
        logger.warning("POST /articles/%d/update - 404 Article not found", article_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ARTICLE_NOT_FOUND)
    except UnexpectedUploadError as e:
        logger.warning("POST /articles/%d/update - 400 unexpected file fields: %s", article_id, ", ".join(e.fields))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValidationError as e:
        logger.warning("POST /articles/%d/update - 400 missing fields: %s", article_id, ", ".join(e.fields))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except UnsupportedMediaTypeError as e:
        logger.warning("POST /articles/%d/update - 415 content type %r", article_id, e.content_type)
        raise HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(e))
    except PayloadTooLargeError as e:
        logger.warning("POST /articles/%d/update - 400 upload of %d bytes over limit", article_id, e.size)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    flash.set_success("Article updated successfully!")
    return _redirect(f"/articles/{article_id}")


@router.post("/articles/{article_id}/delete")
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
    flash: FlashNotifier = Depends(get_flash_notifier),
) -> RedirectResponse:
    """Remove an article and go back to the list."""
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError:
        logger.warning("POST /articles/%d/delete - 404 Article not found", article_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ARTICLE_NOT_FOUND)

    flash.set_success("Article deleted successfully!")
    return _redirect("/")
