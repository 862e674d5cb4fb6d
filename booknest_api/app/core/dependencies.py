"""
FastAPI dependencies shared by request handlers.

The storage service is created once by ``create_app`` and kept on
``app.state``.  Handlers receive it through ``Depends(get_storage)``
instead of importing a global instance, which lets tests swap in
their own storage.
"""

from fastapi import Request

from ..services.storage import IStorage


def get_storage(request: Request) -> IStorage:
    """Return the storage service attached to the running application."""
    return request.app.state.storage
