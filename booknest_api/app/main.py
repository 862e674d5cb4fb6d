"""
Main entrypoint for the BookNest API.

This module assembles the FastAPI application, sets up logging and
attaches the storage service.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn booknest_api.app.main:app --reload

The HTTP routers live outside this package; they obtain the storage
service through ``core.dependencies.get_storage``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .services.memory_storage import MemStorage
from .services.storage import IStorage


def create_app(storage: Optional[IStorage] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[IStorage]
        Storage service to expose to request handlers.  Defaults to a
        fresh ``MemStorage`` seeded with the administrator account.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the storage
    # seeding below is logged with the configured format.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.storage = storage if storage is not None else MemStorage()

    logging.getLogger(__name__).info(
        "%s %s ready with %s", settings.project_name, settings.api_version,
        type(app.state.storage).__name__,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
