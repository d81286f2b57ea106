"""
Pydantic schemas for book reviews.

Users rate a book from 1 to 5 stars and may leave a text.  The
reviewer's display name is copied onto the review when it is created
(``user_name``) and is not updated afterwards.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

MAX_REVIEW_TEXT = 5000


def _sanitize(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    text = text.strip()
    if len(text) > MAX_REVIEW_TEXT:
        raise ValueError(f"Review text must be {MAX_REVIEW_TEXT} characters or fewer")
    return text


class ReviewBase(BaseModel):
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    review_text: str = Field("", description="Review body")

    @field_validator("review_text")
    @classmethod
    def sanitize_review_text(cls, v: str) -> str:
        """Trim whitespace and enforce a maximum length."""
        return _sanitize(v)


class ReviewCreate(ReviewBase):
    """Schema for posting a review.

    ``user_id`` must be the id of the user the token was issued to.
    """

    book_id: str = Field(..., description="Identifier of the book being reviewed")
    user_id: str = Field(..., description="Identifier of the reviewer")


class ReviewUpdate(BaseModel):
    """Schema for editing a review.

    Only rating and text can change; fields left out of the patch keep
    their stored value.
    """

    rating: Optional[int] = Field(None, ge=1, le=5)
    review_text: Optional[str] = None

    model_config = {
        "extra": "forbid",
    }

    @field_validator("review_text")
    @classmethod
    def sanitize_review_text(cls, v: Optional[str]) -> Optional[str]:
        return _sanitize(v)


class ReviewRead(ReviewBase):
    """Schema for reading a review from the API."""

    id: str
    book_id: str
    user_id: str
    user_name: str

    model_config = {
        "from_attributes": True,
    }


class ReviewWithBookTitle(ReviewRead):
    book_title: str


class RatingStats(BaseModel):
    """Aggregate figures for a set of reviews."""

    average_rating: float = 0
    count: int = 0
    distribution: Dict[int, int] = Field(default_factory=lambda: {star: 0 for star in range(1, 6)})
