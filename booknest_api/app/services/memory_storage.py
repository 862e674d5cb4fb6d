"""
In-memory implementation of the storage interface.

``MemStorage`` keeps each entity type in its own ``dict`` keyed by id
and hands out ids from a per-type counter starting at 1.  Ids are
never reused, even after deletion.  All state lives in the instance
and disappears with it; construct one per application (or per test).

Operations are ``async`` to match ``IStorage`` but never await
anything, so each call runs to completion on the event loop without
interleaving with other requests.  Anything that introduces a real
suspension point here (I/O, ``asyncio.sleep``) must also introduce a
lock around the shared dicts.

Two consistency rules span collections:

* every review mutation recomputes ``average_rating`` and
  ``total_reviews`` on the reviewed book;
* deleting a book removes its verification questions, reviews,
  reading-list entries and liked-book entries.
"""

import logging
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from itertools import count
from typing import Dict, Iterable, List, Optional, Type, TypeVar, Union, get_args

from pydantic import BaseModel

from ..core.config import settings
from ..core.exceptions import StorageIntegrityError
from ..schemas.book import BookCreate, BookRead, BookUpdate
from ..schemas.liked_book import LikedBookCreate, LikedBookItem, LikedBookRead
from ..schemas.reading_list import (
    ReadingListCreate,
    ReadingListItem,
    ReadingListRead,
    ReadingProgressUpdate,
)
from ..schemas.review import ReviewCreate, ReviewRead, ReviewUpdate
from ..schemas.statistics import StatsRead
from ..schemas.user import UserCreate, UserRead, UserUpdate
from ..schemas.verification_question import (
    VerificationQuestionCreate,
    VerificationQuestionRead,
    VerificationQuestionUpdate,
)
from .storage import IStorage

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def compute_average_rating(ratings: Iterable[int]) -> int:
    """Return the mean of ``ratings`` rounded half-up, or 0 for no ratings.

    ``Decimal`` keeps ties exact, so a mean of 2.5 always becomes 3.
    """
    ratings = list(ratings)
    if not ratings:
        return 0
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return int(mean.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _is_nullable(model: Type[BaseModel], name: str) -> bool:
    annotation = model.model_fields[name].annotation
    return annotation is type(None) or type(None) in get_args(annotation)


def apply_update(
    record: RecordT,
    updates: Union[BaseModel, dict],
    schema: Type[BaseModel],
) -> RecordT:
    """Return a copy of ``record`` with the fields set in ``updates`` overwritten.

    ``updates`` is validated against ``schema`` when given as a dict.
    Keys the schema does not declare (``id``, timestamps, derived
    fields, foreign keys) are dropped and unset fields keep their
    current value.  An explicit ``None`` clears an optional field; on
    a field the record requires (``title``, ``rating``...) it is
    ignored.
    """
    if not isinstance(updates, schema):
        updates = schema.model_validate(updates)
    changes = {
        name: value
        for name, value in updates.model_dump(exclude_unset=True).items()
        if value is not None or _is_nullable(type(record), name)
    }
    return record.model_copy(update=changes)


class MemStorage(IStorage):
    """Storage service backed by in-process dictionaries."""

    def __init__(self, seed_admin: bool = True) -> None:
        self._users: Dict[int, UserRead] = {}
        self._books: Dict[int, BookRead] = {}
        self._questions: Dict[int, VerificationQuestionRead] = {}
        self._reviews: Dict[int, ReviewRead] = {}
        self._reading_list: Dict[int, ReadingListRead] = {}
        self._liked_books: Dict[int, LikedBookRead] = {}

        self._user_ids = count(1)
        self._book_ids = count(1)
        self._question_ids = count(1)
        self._review_ids = count(1)
        self._reading_list_ids = count(1)
        self._liked_book_ids = count(1)

        if seed_admin:
            admin = self._insert_user(
                UserCreate(
                    name=settings.admin_name,
                    email=settings.admin_email,
                    password=settings.admin_password,
                    is_admin=True,
                )
            )
            logger.info("Seeded default administrator %s (id=%s)", admin.email, admin.id)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def _insert_user(self, data: UserCreate) -> UserRead:
        user = UserRead(
            id=next(self._user_ids),
            is_active=True,
            joined_at=_utcnow(),
            **data.model_dump(),
        )
        self._users[user.id] = user
        return user

    async def get_user(self, user_id: int) -> Optional[UserRead]:
        return self._users.get(user_id)

    async def get_user_by_email(self, email: str) -> Optional[UserRead]:
        needle = email.lower()
        return next(
            (user for user in self._users.values() if user.email.lower() == needle),
            None,
        )

    async def create_user(self, data: UserCreate) -> UserRead:
        user = self._insert_user(data)
        logger.info("Created user %s (id=%s)", user.email, user.id)
        return user

    async def update_user(self, user_id: int, updates: Union[UserUpdate, dict]) -> Optional[UserRead]:
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = apply_update(user, updates, UserUpdate)
        self._users[user_id] = updated
        return updated

    async def get_all_users(self) -> List[UserRead]:
        return list(self._users.values())

    async def get_active_users(self) -> List[UserRead]:
        return [user for user in self._users.values() if user.is_active]

    # ------------------------------------------------------------------
    # Books
    # ------------------------------------------------------------------
    async def get_book(self, book_id: int) -> Optional[BookRead]:
        return self._books.get(book_id)

    async def create_book(self, data: BookCreate) -> BookRead:
        book = BookRead(
            id=next(self._book_ids),
            added_at=_utcnow(),
            average_rating=0,
            total_reviews=0,
            **data.model_dump(),
        )
        self._books[book.id] = book
        logger.info("Created book '%s' (id=%s)", book.title, book.id)
        return book

    async def update_book(self, book_id: int, updates: Union[BookUpdate, dict]) -> Optional[BookRead]:
        book = self._books.get(book_id)
        if book is None:
            return None
        updated = apply_update(book, updates, BookUpdate)
        self._books[book_id] = updated
        return updated

    async def delete_book(self, book_id: int) -> bool:
        """Delete a book and every record that references it.

        Returns ``False`` without touching other collections when the
        book does not exist.
        """
        if self._books.pop(book_id, None) is None:
            return False
        removed = {
            "questions": self._purge_book_refs(self._questions, book_id),
            "reviews": self._purge_book_refs(self._reviews, book_id),
            "reading_list": self._purge_book_refs(self._reading_list, book_id),
            "liked_books": self._purge_book_refs(self._liked_books, book_id),
        }
        logger.info("Deleted book %s", book_id)
        logger.debug("Cascade for book %s removed %s", book_id, removed)
        return True

    @staticmethod
    def _purge_book_refs(collection: Dict[int, BaseModel], book_id: int) -> int:
        # Linear scan; a book_id -> ids index would replace this at scale.
        stale = [key for key, record in collection.items() if record.book_id == book_id]
        for key in stale:
            del collection[key]
        return len(stale)

    async def get_all_books(self) -> List[BookRead]:
        return list(self._books.values())

    async def get_books_by_category(self, category: str) -> List[BookRead]:
        wanted = category.lower()
        return [book for book in self._books.values() if book.category.lower() == wanted]

    async def search_books(self, query: str) -> List[BookRead]:
        needle = query.lower()
        results: List[BookRead] = []
        for book in self._books.values():
            if (
                needle in book.title.lower()
                or needle in book.author.lower()
                or (book.description is not None and needle in book.description.lower())
            ):
                results.append(book)
        return results

    # ------------------------------------------------------------------
    # Verification questions
    # ------------------------------------------------------------------
    async def get_verification_questions(self, book_id: int) -> List[VerificationQuestionRead]:
        return [q for q in self._questions.values() if q.book_id == book_id]

    async def create_verification_question(
        self, data: VerificationQuestionCreate
    ) -> VerificationQuestionRead:
        question = VerificationQuestionRead(id=next(self._question_ids), **data.model_dump())
        self._questions[question.id] = question
        logger.info("Created verification question %s for book %s", question.id, question.book_id)
        return question

    async def update_verification_question(
        self,
        question_id: int,
        updates: Union[VerificationQuestionUpdate, dict],
    ) -> Optional[VerificationQuestionRead]:
        question = self._questions.get(question_id)
        if question is None:
            return None
        updated = apply_update(question, updates, VerificationQuestionUpdate)
        self._questions[question_id] = updated
        return updated

    async def delete_verification_question(self, question_id: int) -> bool:
        return self._questions.pop(question_id, None) is not None

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------
    def _recompute_book_rating(self, book_id: int) -> None:
        """Refresh the derived rating fields of ``book_id`` from its reviews.

        Reviews may reference a book that does not exist; nothing is
        recomputed for them.
        """
        book = self._books.get(book_id)
        if book is None:
            return
        ratings = [r.rating for r in self._reviews.values() if r.book_id == book_id]
        average = compute_average_rating(ratings)
        self._books[book_id] = book.model_copy(
            update={"average_rating": average, "total_reviews": len(ratings)}
        )
        logger.debug(
            "Book %s rating recomputed: average=%s total=%s", book_id, average, len(ratings)
        )

    async def get_review(self, review_id: int) -> Optional[ReviewRead]:
        return self._reviews.get(review_id)

    async def get_reviews_by_book(self, book_id: int) -> List[ReviewRead]:
        return [r for r in self._reviews.values() if r.book_id == book_id]

    async def get_reviews_by_user(self, user_id: int) -> List[ReviewRead]:
        return [r for r in self._reviews.values() if r.user_id == user_id]

    async def create_review(self, data: ReviewCreate) -> ReviewRead:
        review = ReviewRead(id=next(self._review_ids), created_at=_utcnow(), **data.model_dump())
        self._reviews[review.id] = review
        logger.info(
            "User %s submitted review %s for book %s", review.user_id, review.id, review.book_id
        )
        self._recompute_book_rating(review.book_id)
        return review

    async def update_review(self, review_id: int, updates: Union[ReviewUpdate, dict]) -> Optional[ReviewRead]:
        review = self._reviews.get(review_id)
        if review is None:
            return None
        updated = apply_update(review, updates, ReviewUpdate)
        self._reviews[review_id] = updated
        if updated.rating != review.rating:
            self._recompute_book_rating(updated.book_id)
        return updated

    async def delete_review(self, review_id: int) -> bool:
        review = self._reviews.pop(review_id, None)
        if review is None:
            return False
        logger.info("Deleted review %s", review_id)
        self._recompute_book_rating(review.book_id)
        return True

    # ------------------------------------------------------------------
    # Reading list and liked books
    # ------------------------------------------------------------------
    def _book_for_entry(self, entry: Union[ReadingListRead, LikedBookRead], entity: str) -> BookRead:
        book = self._books.get(entry.book_id)
        if book is None:
            # Book deletion cascades to every entry, so this is a bug.
            logger.error(
                "%s entry %s references missing book %s", entity, entry.id, entry.book_id
            )
            raise StorageIntegrityError(
                entity, f"entry {entry.id} references missing book {entry.book_id}"
            )
        return book

    async def get_reading_list(self, user_id: int) -> List[ReadingListItem]:
        return [
            ReadingListItem(**entry.model_dump(), book=self._book_for_entry(entry, "reading_list"))
            for entry in self._reading_list.values()
            if entry.user_id == user_id
        ]

    async def add_to_reading_list(self, data: ReadingListCreate) -> ReadingListRead:
        for entry in self._reading_list.values():
            if entry.user_id == data.user_id and entry.book_id == data.book_id:
                return entry
        entry = ReadingListRead(
            id=next(self._reading_list_ids),
            user_id=data.user_id,
            book_id=data.book_id,
            progress=data.progress or 0,
            added_at=_utcnow(),
        )
        self._reading_list[entry.id] = entry
        logger.info("User %s added book %s to reading list", entry.user_id, entry.book_id)
        return entry

    async def update_reading_progress(self, entry_id: int, progress: int) -> Optional[ReadingListRead]:
        entry = self._reading_list.get(entry_id)
        if entry is None:
            return None
        updated = apply_update(entry, ReadingProgressUpdate(progress=progress), ReadingProgressUpdate)
        self._reading_list[entry_id] = updated
        return updated

    async def remove_from_reading_list(self, entry_id: int) -> bool:
        return self._reading_list.pop(entry_id, None) is not None

    async def get_liked_books(self, user_id: int) -> List[LikedBookItem]:
        return [
            LikedBookItem(**entry.model_dump(), book=self._book_for_entry(entry, "liked_books"))
            for entry in self._liked_books.values()
            if entry.user_id == user_id
        ]

    async def add_to_liked_books(self, data: LikedBookCreate) -> LikedBookRead:
        for entry in self._liked_books.values():
            if entry.user_id == data.user_id and entry.book_id == data.book_id:
                return entry
        entry = LikedBookRead(
            id=next(self._liked_book_ids),
            user_id=data.user_id,
            book_id=data.book_id,
            liked_at=_utcnow(),
        )
        self._liked_books[entry.id] = entry
        logger.info("User %s liked book %s", entry.user_id, entry.book_id)
        return entry

    async def remove_from_liked_books(self, entry_id: int) -> bool:
        return self._liked_books.pop(entry_id, None) is not None

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------
    async def get_stats(self) -> StatsRead:
        return StatsRead(
            total_users=len(self._users),
            active_users=sum(1 for user in self._users.values() if user.is_active),
            total_books=len(self._books),
            total_reviews=len(self._reviews),
        )
