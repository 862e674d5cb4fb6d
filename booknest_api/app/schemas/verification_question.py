"""
Pydantic schemas for book verification questions.

A verification question is attached to a book and lets the
application check that a reader actually finished it before accepting
a review.
"""

from typing import Optional

from pydantic import BaseModel, Field


class VerificationQuestionCreate(BaseModel):
    """Schema for attaching a question to a book."""

    book_id: int = Field(..., description="Identifier of the book the question belongs to")
    question: str = Field(..., examples=["What is the name of Bilbo's sword?"])
    answer: str = Field(..., examples=["Sting"])


class VerificationQuestionUpdate(BaseModel):
    """Schema for updating a question; the owning book cannot change."""

    question: Optional[str] = None
    answer: Optional[str] = None


class VerificationQuestionRead(VerificationQuestionCreate):
    """Stored verification question."""

    id: int

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }
