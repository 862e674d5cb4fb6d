"""
Tests for user operations of the in-memory storage.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from booknest_api.app.schemas.user import UserCreate, UserUpdate


class TestSeededAdministrator:
    """Every storage instance starts with one administrator."""

    @pytest.mark.asyncio
    async def test_admin_is_first_user(self, storage):
        admin = await storage.get_user(1)

        assert admin is not None
        assert admin.name == "Admin User"
        assert admin.email == "admin@booknest.com"
        assert admin.is_admin is True
        assert admin.is_active is True

    @pytest.mark.asyncio
    async def test_lookup_by_email_ignores_case(self, storage):
        admin = await storage.get_user_by_email("Admin@Booknest.com")

        assert admin is not None
        assert admin.id == 1

    @pytest.mark.asyncio
    async def test_seeding_can_be_disabled(self, empty_storage):
        assert await empty_storage.get_all_users() == []


class TestCreateUser:
    """Test user creation."""

    @pytest.mark.asyncio
    async def test_defaults(self, storage, reader_data):
        before = datetime.now(timezone.utc)
        user = await storage.create_user(reader_data)

        assert user.id == 2
        assert user.is_active is True
        assert user.is_admin is False
        assert user.joined_at >= before
        assert await storage.get_user(user.id) == user

    @pytest.mark.asyncio
    async def test_ids_increase(self, empty_storage):
        ids = []
        for i in range(3):
            user = await empty_storage.create_user(
                UserCreate(name=f"User {i}", email=f"user{i}@example.com", password="pw")
            )
            ids.append(user.id)

        assert ids == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_new_user_is_always_active(self, storage):
        user = await storage.create_user(
            UserCreate.model_validate(
                {"name": "Ghost", "email": "ghost@example.com", "password": "pw", "is_active": False}
            )
        )

        assert user.is_active is True
        assert user in await storage.get_active_users()

    def test_missing_password_rejected(self):
        with pytest.raises(ValidationError):
            UserCreate(name="No Password", email="np@example.com")


class TestLookups:
    """Test user lookups."""

    @pytest.mark.asyncio
    async def test_unknown_id_returns_none(self, storage):
        assert await storage.get_user(999) is None

    @pytest.mark.asyncio
    async def test_unknown_email_returns_none(self, storage):
        assert await storage.get_user_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_duplicate_emails_return_first(self, storage, reader_data):
        first = await storage.create_user(reader_data)
        await storage.create_user(reader_data)

        found = await storage.get_user_by_email("jane@example.com")

        assert found.id == first.id

    @pytest.mark.asyncio
    async def test_active_users_filter(self, storage, reader):
        await storage.update_user(reader.id, {"is_active": False})

        active = await storage.get_active_users()

        assert [u.id for u in active] == [1]
        assert len(await storage.get_all_users()) == 2


class TestUpdateUser:
    """Test partial user updates."""

    @pytest.mark.asyncio
    async def test_merges_only_given_fields(self, storage, reader):
        updated = await storage.update_user(reader.id, UserUpdate(name="Jane R."))

        assert updated.name == "Jane R."
        assert updated.email == reader.email
        assert updated.password == reader.password
        assert updated.joined_at == reader.joined_at
        assert await storage.get_user(reader.id) == updated

    @pytest.mark.asyncio
    async def test_accepts_dict(self, storage, reader):
        updated = await storage.update_user(reader.id, {"is_admin": True})

        assert updated.is_admin is True

    @pytest.mark.asyncio
    async def test_identity_fields_are_ignored(self, storage, reader):
        updated = await storage.update_user(
            reader.id, {"id": 42, "joined_at": "2000-01-01T00:00:00Z", "name": "Renamed"}
        )

        assert updated.id == reader.id
        assert updated.joined_at == reader.joined_at
        assert updated.name == "Renamed"
        assert await storage.get_user(42) is None

    @pytest.mark.asyncio
    async def test_none_on_required_field_is_ignored(self, storage, reader):
        updated = await storage.update_user(reader.id, {"name": None, "email": None, "is_admin": True})

        assert updated.name == reader.name
        assert updated.email == reader.email
        assert updated.is_admin is True

    @pytest.mark.asyncio
    async def test_unknown_user_returns_none(self, storage):
        assert await storage.update_user(999, {"name": "x"}) is None

    @pytest.mark.asyncio
    async def test_returned_record_is_read_only(self, storage, reader):
        with pytest.raises(ValidationError):
            reader.name = "Mutated"

        assert (await storage.get_user(reader.id)).name == "Jane Reader"
