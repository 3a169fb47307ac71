"""Domain models for admin users (auth user + profile row)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

ROLES = ("admin", "editor", "collab", "user")
STATUSES = ("active", "suspended")

PLACEHOLDER_EMAIL = "email@example.com"
PLACEHOLDER_NAME = "Unnamed user"


@dataclass(slots=True)
class Profile:
    id: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class AuthUser:
    id: str
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_sign_in_at: Optional[datetime] = None
    user_metadata: dict[str, Any] = field(default_factory=dict)
    app_metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class AuthSession:
    access_token: str
    refresh_token: Optional[str]
    user: AuthUser


@dataclass(slots=True)
class UserProfile:
    id: str
    email: str
    full_name: str
    role: str = "user"
    status: str = "active"
    avatar_url: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_sign_in_at: Optional[datetime] = None
    courses_count: int = 0
    projects_count: int = 0


@dataclass(slots=True)
class UserCreateInput:
    email: str
    full_name: str
    role: str = "user"
    password: Optional[str] = None
    avatar_url: Optional[str] = None
    phone: Optional[str] = None


# Sentinel used to differentiate between "not provided" and explicit None.
UNSET = object()


@dataclass(slots=True)
class UserUpdateInput:
    full_name: Optional[str] | object = UNSET
    role: Optional[str] | object = UNSET
    avatar_url: Optional[str] | object = UNSET
    phone: Optional[str] | object = UNSET
