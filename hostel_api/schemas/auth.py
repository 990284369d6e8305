"""
Schemas for admin authentication and profile management.
"""
from datetime import datetime
from typing import Optional

from .base import CamelModel


class LoginRequest(CamelModel):
    # username or email
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(CamelModel):
    ok: bool = True
    token: str
    username: str
    user_id: int


class RegisterRequest(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = None


class RegisterResponse(CamelModel):
    id: int
    username: str


class AdminUserOut(CamelModel):
    id: int
    username: str
    email: Optional[str] = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileUpdateRequest(CamelModel):
    """All fields optional; a new password needs the current one"""
    username: Optional[str] = None
    email: Optional[str] = None
    current_password: Optional[str] = None
    new_password: Optional[str] = None


class ProfileSummary(CamelModel):
    id: int
    username: str
    email: Optional[str] = ""


class ProfileUpdateResponse(CamelModel):
    ok: bool = True
    message: str
    user: ProfileSummary
