"""
Tests for the application factory and the storage dependency.
"""

import logging

from fastapi import Depends
from fastapi.testclient import TestClient

from booknest_api.app.core.config import Settings
from booknest_api.app.core.dependencies import get_storage
from booknest_api.app.core.exceptions import BookNestError, StorageIntegrityError
from booknest_api.app.core.logging_config import setup_logging
from booknest_api.app.main import create_app
from booknest_api.app.services.memory_storage import MemStorage
from booknest_api.app.services.storage import IStorage


def _client_for(app):
    @app.get("/stats")
    async def stats(storage: IStorage = Depends(get_storage)):
        return await storage.get_stats()

    return TestClient(app)


class TestCreateApp:
    """Test application wiring."""

    def test_default_storage_is_seeded(self):
        app = create_app()

        assert isinstance(app.state.storage, MemStorage)
        assert app.title == "BookNest API"

    def test_custom_storage_is_served(self):
        storage = MemStorage(seed_admin=False)
        client = _client_for(create_app(storage))

        response = client.get("/stats")

        assert response.status_code == 200
        assert response.json() == {
            "total_users": 0,
            "active_users": 0,
            "total_books": 0,
            "total_reviews": 0,
        }

    def test_apps_do_not_share_state(self):
        first = create_app()
        second = create_app()

        assert first.state.storage is not second.state.storage


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        s = Settings()

        assert s.admin_email == "admin@booknest.com"
        assert s.admin_name == "Admin User"
        assert s.log_level == "INFO"


class TestLogging:
    """Test logging setup."""

    def test_setup_is_noop_when_configured(self):
        root = logging.getLogger()
        handler = logging.NullHandler()
        root.addHandler(handler)
        try:
            before = list(root.handlers)
            setup_logging("DEBUG")
            assert root.handlers == before
        finally:
            root.removeHandler(handler)


class TestExceptions:
    """Test exception hierarchy."""

    def test_integrity_error(self):
        error = StorageIntegrityError("reading_list", "entry 1 references missing book 2")

        assert isinstance(error, BookNestError)
        assert error.details == {"entity": "reading_list", "reason": "entry 1 references missing book 2"}
        assert str(error) == "Data integrity error for reading_list: entry 1 references missing book 2"
