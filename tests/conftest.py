"""
Test configuration and fixtures
"""

import pytest
import pytest_asyncio

from booknest_api.app.schemas.book import BookCreate
from booknest_api.app.schemas.user import UserCreate
from booknest_api.app.services.memory_storage import MemStorage


@pytest.fixture
def storage():
    """Fresh storage seeded with the default administrator."""
    return MemStorage()


@pytest.fixture
def empty_storage():
    """Fresh storage without the seeded administrator."""
    return MemStorage(seed_admin=False)


@pytest.fixture
def hobbit_data():
    return BookCreate(
        title="The Hobbit",
        author="J.R.R. Tolkien",
        category="Fantasy",
        description="There and back again.",
        isbn="9780547928227",
        published_year=1937,
        page_count=310,
    )


@pytest.fixture
def dune_data():
    return BookCreate(
        title="Dune",
        author="Frank Herbert",
        category="Science Fiction",
    )


@pytest.fixture
def reader_data():
    return UserCreate(name="Jane Reader", email="Jane@Example.com", password="secret")


@pytest_asyncio.fixture
async def hobbit(storage, hobbit_data):
    return await storage.create_book(hobbit_data)


@pytest_asyncio.fixture
async def reader(storage, reader_data):
    return await storage.create_user(reader_data)
