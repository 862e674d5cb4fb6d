"""
Storage interface for the BookNest catalogue.

``IStorage`` lists every data-access operation the application relies
on.  Implementations own all records: callers get pydantic models
back and must go through these methods to change anything.

Conventions shared by all implementations:

* lookups and updates by id return ``None`` when the record is absent;
* deletes by id return ``False`` when the record is absent;
* partial updates accept either the matching ``*Update`` schema or a
  plain ``dict`` that validates against it.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from ..schemas.book import BookCreate, BookRead, BookUpdate
from ..schemas.liked_book import LikedBookCreate, LikedBookItem, LikedBookRead
from ..schemas.reading_list import ReadingListCreate, ReadingListItem, ReadingListRead
from ..schemas.review import ReviewCreate, ReviewRead, ReviewUpdate
from ..schemas.statistics import StatsRead
from ..schemas.user import UserCreate, UserRead, UserUpdate
from ..schemas.verification_question import (
    VerificationQuestionCreate,
    VerificationQuestionRead,
    VerificationQuestionUpdate,
)


class IStorage(ABC):
    """Data-access operations for users, books and their dependents."""

    # Users

    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[UserRead]:
        pass

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[UserRead]:
        """Return the first user whose email matches, ignoring case."""

    @abstractmethod
    async def create_user(self, data: UserCreate) -> UserRead:
        pass

    @abstractmethod
    async def update_user(self, user_id: int, updates: Union[UserUpdate, dict]) -> Optional[UserRead]:
        pass

    @abstractmethod
    async def get_all_users(self) -> List[UserRead]:
        pass

    @abstractmethod
    async def get_active_users(self) -> List[UserRead]:
        pass

    # Books

    @abstractmethod
    async def get_book(self, book_id: int) -> Optional[BookRead]:
        pass

    @abstractmethod
    async def create_book(self, data: BookCreate) -> BookRead:
        pass

    @abstractmethod
    async def update_book(self, book_id: int, updates: Union[BookUpdate, dict]) -> Optional[BookRead]:
        pass

    @abstractmethod
    async def delete_book(self, book_id: int) -> bool:
        """Delete a book together with everything that references it."""

    @abstractmethod
    async def get_all_books(self) -> List[BookRead]:
        pass

    @abstractmethod
    async def get_books_by_category(self, category: str) -> List[BookRead]:
        pass

    @abstractmethod
    async def search_books(self, query: str) -> List[BookRead]:
        """Case-insensitive substring search over title, author and description."""

    # Verification questions

    @abstractmethod
    async def get_verification_questions(self, book_id: int) -> List[VerificationQuestionRead]:
        pass

    @abstractmethod
    async def create_verification_question(
        self, data: VerificationQuestionCreate
    ) -> VerificationQuestionRead:
        pass

    @abstractmethod
    async def update_verification_question(
        self,
        question_id: int,
        updates: Union[VerificationQuestionUpdate, dict],
    ) -> Optional[VerificationQuestionRead]:
        pass

    @abstractmethod
    async def delete_verification_question(self, question_id: int) -> bool:
        pass

    # Reviews

    @abstractmethod
    async def get_review(self, review_id: int) -> Optional[ReviewRead]:
        pass

    @abstractmethod
    async def get_reviews_by_book(self, book_id: int) -> List[ReviewRead]:
        pass

    @abstractmethod
    async def get_reviews_by_user(self, user_id: int) -> List[ReviewRead]:
        pass

    @abstractmethod
    async def create_review(self, data: ReviewCreate) -> ReviewRead:
        pass

    @abstractmethod
    async def update_review(self, review_id: int, updates: Union[ReviewUpdate, dict]) -> Optional[ReviewRead]:
        pass

    @abstractmethod
    async def delete_review(self, review_id: int) -> bool:
        pass

    # Reading list

    @abstractmethod
    async def get_reading_list(self, user_id: int) -> List[ReadingListItem]:
        pass

    @abstractmethod
    async def add_to_reading_list(self, data: ReadingListCreate) -> ReadingListRead:
        """Add a book to a reading list, returning the existing entry if present."""

    @abstractmethod
    async def update_reading_progress(self, entry_id: int, progress: int) -> Optional[ReadingListRead]:
        pass

    @abstractmethod
    async def remove_from_reading_list(self, entry_id: int) -> bool:
        pass

    # Liked books

    @abstractmethod
    async def get_liked_books(self, user_id: int) -> List[LikedBookItem]:
        pass

    @abstractmethod
    async def add_to_liked_books(self, data: LikedBookCreate) -> LikedBookRead:
        pass

    @abstractmethod
    async def remove_from_liked_books(self, entry_id: int) -> bool:
        pass

    # Statistics

    @abstractmethod
    async def get_stats(self) -> StatsRead:
        pass
