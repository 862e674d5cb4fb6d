"""
Pydantic schemas for reading-list entries.

An entry records that a user intends to read (or is reading) a book
together with how far they have got.  Progress is a plain
non-negative counter; whether it counts pages or percent is up to the
client.  A user has at most one entry per book.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from .book import BookRead


class ReadingListCreate(BaseModel):
    """Schema for adding a book to a user's reading list."""

    user_id: int
    book_id: int
    progress: int = Field(0, ge=0, description="How far the user has read")


class ReadingProgressUpdate(BaseModel):
    """Schema for updating the progress of an entry."""

    progress: int = Field(..., ge=0)


class ReadingListRead(ReadingListCreate):
    """Stored reading-list entry."""

    id: int
    added_at: datetime

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }


class ReadingListItem(ReadingListRead):
    """Reading-list entry joined with its book."""

    book: BookRead
