"""Pydantic schemas for the user resource."""
from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.user import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH


class UserWrite(BaseModel):
    """Full-replace payload shared by create and update. Any client `id` is ignored."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., max_length=NAME_MAX_LENGTH)
    email: str = Field(..., max_length=EMAIL_MAX_LENGTH)

    @field_validator("name", "email", mode="before")
    @classmethod
    def reject_blank(cls, v):
        # Blank text counts as missing, matching the "required" rule.
        if isinstance(v, str) and not v.strip():
            raise ValueError("blank")
        return v


class UserCreate(UserWrite):
    pass


class UserUpdate(UserWrite):
    pass


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
