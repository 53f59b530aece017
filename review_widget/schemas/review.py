from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from review_widget.core.config import settings


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class Review(CamelModel):
    id: str
    username: str
    rating: int
    content: str
    likes: int = 0
    dislikes: int = 0
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class RatingBucket(CamelModel):
    rating: int
    count: int = 0
    percentage: float = 0.0


class ReviewSummary(CamelModel):
    overall_rating: float = 0.0
    total_reviews: int = 0
    distribution: list[RatingBucket] = []


class ReviewMeta(CamelModel):
    page: int
    per_page: int
    total: int
    total_pages: int


class ReviewListResponse(CamelModel):
    summary: ReviewSummary
    data: list[Review]
    meta: ReviewMeta


class CreateReviewRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=255)
    rating: int = Field(..., ge=1, le=5, strict=True)
    content: str

    @field_validator("username")
    @classmethod
    def _username_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Username is required")
        return value

    @field_validator("content")
    @classmethod
    def _content_long_enough(cls, value: str) -> str:
        value = value.strip()
        if len(value) < settings.MIN_CONTENT_LENGTH:
            raise ValueError(f"Review must be at least {settings.MIN_CONTENT_LENGTH} characters")
        return value


class DeleteReviewResponse(CamelModel):
    deleted: bool


class ProfanityCheckRequest(CamelModel):
    content: str


class ProfanityCheckResponse(CamelModel):
    has_profanity: bool
    matches: list[str] = []
