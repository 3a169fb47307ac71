"""Role-gated access exports."""

from .guard import GuardDecision, RoleLookup, RouteGuard
from .roles import (
    ADMIN,
    COLLAB,
    DEFAULT_ALLOWED_ROLES,
    EDITOR,
    NAVIGATION,
    PAGE_ROLES,
    STAFF_ROLES,
    USER,
    NavItem,
    allowed_roles_for,
    default_page_for,
    navigation_for,
    redirect_after_sign_in,
)
from .service import AccessService, SignInResult

__all__ = [
    "ADMIN",
    "COLLAB",
    "DEFAULT_ALLOWED_ROLES",
    "EDITOR",
    "NAVIGATION",
    "PAGE_ROLES",
    "STAFF_ROLES",
    "USER",
    "AccessService",
    "GuardDecision",
    "NavItem",
    "RoleLookup",
    "RouteGuard",
    "SignInResult",
    "allowed_roles_for",
    "default_page_for",
    "navigation_for",
    "redirect_after_sign_in",
]
