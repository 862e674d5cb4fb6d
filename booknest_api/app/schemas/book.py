"""
Pydantic models for catalogue books.

``BookBase`` carries the catalogue fields supplied by callers.
``BookRead`` adds the identifier, the time the book was added and the
two derived rating fields.  The derived fields are maintained by the
storage service from the book's reviews and are deliberately absent
from ``BookUpdate``.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class BookBase(BaseModel):
    title: str = Field(..., examples=["The Hobbit"])
    author: str = Field(..., examples=["J.R.R. Tolkien"])
    category: str = Field(..., examples=["Fantasy"])
    description: Optional[str] = Field(None, examples=["A hobbit goes on an unexpected journey."])
    cover_image: Optional[str] = None
    isbn: Optional[str] = None
    published_year: Optional[int] = None
    page_count: Optional[int] = Field(None, ge=0)


class BookCreate(BookBase):
    """Schema for adding a book to the catalogue."""
    pass


class BookUpdate(BaseModel):
    """Schema for updating a book.

    All fields are optional; only provided fields will be updated.
    """
    title: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    cover_image: Optional[str] = None
    isbn: Optional[str] = None
    published_year: Optional[int] = None
    page_count: Optional[int] = Field(None, ge=0)


class BookRead(BookBase):
    """Stored book record."""

    id: int
    added_at: datetime
    average_rating: int = 0
    total_reviews: int = 0

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }
