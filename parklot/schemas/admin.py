"""
Pydantic schemas for admin accounts.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterIn(BaseModel):
    username: str = Field(..., min_length=3, max_length=128)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6, max_length=256)
    first_name: str = Field(..., min_length=1, max_length=128)
    last_name: str = Field(..., min_length=1, max_length=128)
    middle_initial: Optional[str] = Field(default=None, max_length=8)
    bio: Optional[str] = None
    phone: Optional[str] = Field(default=None, max_length=32)
    tin_id: Optional[str] = Field(default=None, max_length=64)
    country: Optional[str] = Field(default=None, max_length=128)
    zip_code: Optional[str] = Field(default=None, max_length=16)
    address: Optional[str] = Field(default=None, max_length=512)


class LoginIn(BaseModel):
    username: str
    password: str


class EditProfileIn(BaseModel):
    username: str
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=128)
    middle_initial: Optional[str] = Field(default=None, max_length=8)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=128)
    bio: Optional[str] = None
    email: Optional[str] = Field(default=None, max_length=255, pattern=EMAIL_PATTERN)
    phone: Optional[str] = Field(default=None, max_length=32)
    tin_id: Optional[str] = Field(default=None, max_length=64)
    country: Optional[str] = Field(default=None, max_length=128)
    zip_code: Optional[str] = Field(default=None, max_length=16)
    address: Optional[str] = Field(default=None, max_length=512)
    job: Optional[str] = Field(default=None, max_length=128)
