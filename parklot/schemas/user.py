"""
Pydantic schemas for end-user accounts.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserOut(BaseModel):
    id: str
    name: str
    email: str
    contact: Optional[str] = None
    profile_image_url: Optional[str] = None
    verified: bool = False
    license: Optional[dict] = None
    address: Optional[dict] = None

    model_config = ConfigDict(from_attributes=True)


class UserListItem(BaseModel):
    name: str
    email: str
    profile_image_url: Optional[str] = None
    verified: bool = False
    license: Optional[dict] = None

    model_config = ConfigDict(from_attributes=True)


class VerifyUserIn(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
