"""Application service (use case) for Article operations."""

from collections.abc import Callable
from datetime import datetime, timezone

from pressroom.application.interfaces import ArticleRepository
from pressroom.application.schemas import ArticleForm
from pressroom.application.services.image_upload_service import ImageUpload, ImageUploadService
from pressroom.domain.entities import Article
from pressroom.domain.exceptions import EntityNotFoundError
from pressroom.infrastructure.logging.colored_logger import WriteLogger, WriteStage

wlog = WriteLogger("ArticleService")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Writes run in a fixed order: the text has already been validated by
    ``ArticleForm``, the target is looked up, the image (if any) is written,
    and only then is the repository mutated. Any failure before the last
    step leaves the collection untouched.
    """

    def __init__(
        self,
        repository: ArticleRepository,
        uploads: ImageUploadService,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._repository = repository
        self._uploads = uploads
        self._clock = clock

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def count_articles(self) -> int:
        return await self._repository.count()

    async def create_article(self, form: ArticleForm, image: ImageUpload | None = None) -> Article:
        article = Article(
            title=form.title,
            brief=form.brief,
            article=form.article,
            created_at=self._clock(),
        )
        article.image_url = await self._store_image(image)

        with wlog.timed_step(WriteStage.REPOSITORY, "Creating article", title=article.title):
            created = await self._repository.create(article)
        wlog.step_complete(WriteStage.COMPLETE, "Article created", id=created.id)
        return created

    async def update_article(
        self,
        article_id: int,
        form: ArticleForm,
        image: ImageUpload | None = None,
    ) -> Article:
        article = await self.get_article(article_id)
        image_url = await self._store_image(image)
        article.update(
            title=form.title,
            brief=form.brief,
            article=form.article,
            image_url=image_url,
            updated_at=self._clock(),
        )

        with wlog.timed_step(WriteStage.REPOSITORY, "Updating article", id=article_id):
            updated = await self._repository.update(article)
        wlog.step_complete(
            WriteStage.COMPLETE, "Article updated", id=article_id, image_replaced=image_url is not None
        )
        return updated

    async def delete_article(self, article_id: int) -> Article:
        article = await self.get_article(article_id)
        with wlog.timed_step(WriteStage.REPOSITORY, "Deleting article", id=article_id):
            await self._repository.delete(article_id)
        wlog.step_complete(WriteStage.COMPLETE, "Article deleted", id=article_id)
        return article

    async def _store_image(self, image: ImageUpload | None) -> str | None:
        if image is None:
            return None
        return await self._uploads.save(image)
