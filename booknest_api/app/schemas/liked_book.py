"""
Pydantic schemas for liked books.

Same shape as the reading list minus the progress field.
"""

from datetime import datetime

from pydantic import BaseModel

from .book import BookRead


class LikedBookCreate(BaseModel):
    """Schema for liking a book."""

    user_id: int
    book_id: int


class LikedBookRead(LikedBookCreate):
    """Stored liked-book entry."""

    id: int
    liked_at: datetime

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }


class LikedBookItem(LikedBookRead):
    """Liked-book entry joined with its book."""

    book: BookRead
