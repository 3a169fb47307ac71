"""User management domain exports."""

from .exceptions import (
    AuthNotConfiguredError,
    AuthVendorError,
    InvalidCredentialsError,
    UserCreationError,
    UserError,
    UserNotFoundError,
)
from .models import (
    ROLES,
    UNSET,
    AuthSession,
    AuthUser,
    Profile,
    UserCreateInput,
    UserProfile,
    UserUpdateInput,
)
from .repository import AuthGateway, ProfileRepository
from .service import UserService

__all__ = [
    "ROLES",
    "UNSET",
    "AuthGateway",
    "AuthNotConfiguredError",
    "AuthSession",
    "AuthUser",
    "AuthVendorError",
    "InvalidCredentialsError",
    "Profile",
    "ProfileRepository",
    "UserCreateInput",
    "UserCreationError",
    "UserError",
    "UserNotFoundError",
    "UserProfile",
    "UserService",
    "UserUpdateInput",
]
