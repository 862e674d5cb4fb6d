"""
Pydantic schemas for book reviews.

Every review belongs to one book and one user.  Creating, re-rating
or deleting a review changes the ``average_rating`` and
``total_reviews`` of its book; see ``MemStorage`` for the
recomputation rules.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def _strip_text(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    if len(v) > 5000:
        raise ValueError("Review text must be 5000 characters or fewer")
    return v


class ReviewCreate(BaseModel):
    """Schema for creating a new review."""

    book_id: int = Field(..., description="Identifier of the book being reviewed")
    user_id: int = Field(..., description="Identifier of the reviewing user")
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    text: Optional[str] = Field(None, description="Optional review text")

    @field_validator("text")
    @classmethod
    def sanitize_text(cls, v: Optional[str]) -> Optional[str]:
        """Trim whitespace from the text and enforce a maximum length."""
        return _strip_text(v)


class ReviewUpdate(BaseModel):
    """Schema for editing a review.

    The book and the author of a review are fixed at creation time.
    """

    rating: Optional[int] = Field(None, ge=1, le=5)
    text: Optional[str] = None

    @field_validator("text")
    @classmethod
    def sanitize_text(cls, v: Optional[str]) -> Optional[str]:
        return _strip_text(v)


class ReviewRead(BaseModel):
    """Stored review record."""

    id: int
    book_id: int
    user_id: int
    rating: int
    text: Optional[str] = None
    created_at: datetime

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }
