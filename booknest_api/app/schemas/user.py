"""
Pydantic models for user data.

Defines schemas for creating users, updating them partially and
reading the stored record.  The stored record keeps the password as
supplied; the HTTP layer is responsible for never echoing it back.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., examples=["Jane Reader"])
    email: str = Field(..., examples=["jane@example.com"])
    is_admin: bool = Field(False, examples=[False])


class UserCreate(UserBase):
    """Schema for registering a user.

    New accounts are always active; deactivate them afterwards with
    ``update_user``.
    """

    password: str = Field(..., examples=["strongpassword"])


class UserUpdate(BaseModel):
    """Schema for updating a user.

    All fields are optional; only provided fields will be updated.
    ``id`` and ``joined_at`` are not part of the schema and therefore
    can never be overwritten.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    is_admin: Optional[bool] = None
    is_active: Optional[bool] = None


class UserRead(UserBase):
    """Stored user record."""

    id: int
    password: str
    is_active: bool = True
    joined_at: datetime

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }
