"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from pressroom.domain.exceptions import ValidationError


class ArticleForm(BaseModel):
    """Text fields submitted by the compose and edit forms."""

    model_config = {"str_strip_whitespace": True}

    title: str = Field(..., min_length=1, examples=["Valorant"])
    brief: str = Field(..., min_length=1, examples=["A tactical shooter."])
    article: str = Field(..., min_length=1, examples=["Valorant is more than a game."])

    @classmethod
    def from_form(
        cls,
        title: str | None,
        brief: str | None,
        article: str | None,
    ) -> "ArticleForm":
        """Validate raw form values, raising the domain ValidationError on blanks."""
        try:
            return cls(title=title, brief=brief, article=article)
        except PydanticValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
            raise ValidationError(fields) from e


class ArticleView(BaseModel):
    """Article shape handed to the templates."""

    id: int
    title: str
    brief: str
    article: str
    image_url: str | None = None
    created_at: datetime
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
