"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from pressroom.domain.exceptions import ValidationError

REQUIRED_FIELDS = ("title", "brief", "article")


def _blank_fields(**values: str | None) -> list[str]:
    return [name for name, value in values.items() if value is None or not value.strip()]


@dataclass
class Article:
    """Core domain entity representing a published article.

    ``title``, ``brief`` and ``article`` are stored trimmed and can never be
    blank; construction and ``update()`` both enforce it.
    """

    title: str
    brief: str
    article: str
    image_url: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        blank = _blank_fields(title=self.title, brief=self.brief, article=self.article)
        if blank:
            raise ValidationError(blank)
        self.title = self.title.strip()
        self.brief = self.brief.strip()
        self.article = self.article.strip()

    def update(
        self,
        title: str,
        brief: str,
        article: str,
        image_url: str | None = None,
        updated_at: datetime | None = None,
    ) -> None:
        """Overwrite the text fields, swap the image only when one is given."""
        blank = _blank_fields(title=title, brief=brief, article=article)
        if blank:
            raise ValidationError(blank)
        self.title = title.strip()
        self.brief = brief.strip()
        self.article = article.strip()
        if image_url is not None:
            self.image_url = image_url
        self.updated_at = updated_at or datetime.now(timezone.utc)
