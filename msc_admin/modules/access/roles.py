"""Role tags, per-page allow-lists and the role filtered navigation."""

from __future__ import annotations

from dataclasses import dataclass

ADMIN = "admin"
EDITOR = "editor"
COLLAB = "collab"
USER = "user"

STAFF_ROLES = frozenset({ADMIN, EDITOR, COLLAB})

# Pages that do not name their own list fall back to this one.
DEFAULT_ALLOWED_ROLES: tuple[str, ...] = (ADMIN, COLLAB)

PAGE_ROLES: dict[str, tuple[str, ...]] = {
    "dashboard": (ADMIN,),
    "users": (ADMIN,),
    "finance": (ADMIN,),
    "courses": (ADMIN,),
    "projects": (ADMIN, EDITOR),
    "articles": DEFAULT_ALLOWED_ROLES,
    "images": DEFAULT_ALLOWED_ROLES,
}

ROLE_HOME: dict[str, str] = {
    ADMIN: "/admin/dashboard",
    EDITOR: "/admin/projects",
    COLLAB: "/admin/articles",
}

FALLBACK_HOME = "/admin/dashboard"


def allowed_roles_for(page: str) -> tuple[str, ...]:
    return PAGE_ROLES.get(page, DEFAULT_ALLOWED_ROLES)


def default_page_for(role: str | None, login_path: str) -> str:
    """Where the guard sends a role that may not open the requested page."""
    if role is None:
        return login_path
    return ROLE_HOME.get(role, login_path)


def redirect_after_sign_in(role: str | None) -> str:
    if role is None:
        return FALLBACK_HOME
    return ROLE_HOME.get(role, FALLBACK_HOME)


@dataclass(frozen=True, slots=True)
class NavItem:
    title: str
    href: str
    roles: tuple[str, ...]


NAVIGATION: tuple[NavItem, ...] = (
    NavItem("Dashboard", "/admin/dashboard", (ADMIN, COLLAB)),
    NavItem("Users", "/admin/users", (ADMIN,)),
    NavItem("Finance", "/admin/finance", (ADMIN,)),
    NavItem("Courses", "/admin/courses", (ADMIN,)),
    NavItem("Projects", "/admin/projects", (ADMIN, EDITOR)),
    NavItem("Articles", "/admin/articles", (ADMIN, COLLAB)),
    NavItem("Images", "/admin/images", (ADMIN, COLLAB)),
)


def navigation_for(role: str | None) -> list[NavItem]:
    if role is None:
        return []
    return [item for item in NAVIGATION if role in item.roles]
