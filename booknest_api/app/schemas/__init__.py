"""
Pydantic schema definitions for stored records.

Each domain (users, books, reviews, etc.) defines its own models:
``*Create`` for inputs, ``*Update`` for partial updates and ``*Read``
for the stored record handed back to callers.

``*Read`` models are frozen: the storage service replaces a record
with an updated copy instead of mutating it, so callers holding a
record cannot change stored state behind the service's back.
"""
