"""
Service layer abstraction.

``IStorage`` describes every data-access operation; ``MemStorage``
implements it over in-process dicts.  A database-backed implementation
can replace it without changing the callers.
"""

from .memory_storage import MemStorage  # noqa: F401
from .storage import IStorage  # noqa: F401
