"""Reusable FastAPI dependencies."""

from .auth import CurrentUser, get_current_admin, get_current_staff, get_current_user, require_roles
from .database import get_db_session
from .services import (
    get_access_service,
    get_auth_gateway,
    get_blog_post_service,
    get_media_gateway,
    get_media_service,
    get_route_guard,
    get_session_verifier,
    get_user_service,
)

__all__ = [
    "CurrentUser",
    "get_access_service",
    "get_auth_gateway",
    "get_blog_post_service",
    "get_current_admin",
    "get_current_staff",
    "get_current_user",
    "get_db_session",
    "get_media_gateway",
    "get_media_service",
    "get_route_guard",
    "get_session_verifier",
    "get_user_service",
    "require_roles",
]
