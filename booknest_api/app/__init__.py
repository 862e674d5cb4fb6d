"""
Application package initializer.

This package contains the application factory and the data-access
layer of the BookNest catalogue.  Each domain (users, books, reviews,
reading lists, etc.) defines its own pydantic schemas under
``schemas``; all records are owned by the storage service under
``services``.
"""

from .main import app  # noqa: F401
