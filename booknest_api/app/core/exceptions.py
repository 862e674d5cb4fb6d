"""
Exceptions raised by the BookNest data-access layer.

Missing records are not exceptional: lookups return ``None`` and
deletes return ``False``.  The classes below cover the remaining
failure modes, which indicate a defect rather than bad user input.
"""

from typing import Optional


class BookNestError(Exception):
    """Base exception for all BookNest errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class StorageIntegrityError(BookNestError):
    """Raised when a stored record references a parent that no longer exists.

    Book deletion cascades to every dependent collection, so this can
    only happen if that cascade is broken.
    """

    def __init__(self, entity: str, reason: str):
        message = f"Data integrity error for {entity}: {reason}"
        super().__init__(message=message, details={"entity": entity, "reason": reason})
