"""
Schema for the aggregate counters returned by ``get_stats``.
"""

from pydantic import BaseModel


class StatsRead(BaseModel):
    """High-level catalogue metrics, computed on every call."""

    total_users: int
    active_users: int
    total_books: int
    total_reviews: int
