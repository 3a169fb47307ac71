"""Role-gated access check for the admin pages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Collection, Optional, Protocol

from msc_admin.core.security import InvalidSessionError, SessionUser

from .roles import default_page_for

logger = logging.getLogger(__name__)


class RoleLookup(Protocol):
    async def get_role(self, user_id: str) -> str | None:
        ...


SessionVerifier = Callable[[str], SessionUser]


@dataclass(slots=True)
class GuardDecision:
    allowed: bool
    redirect_to: Optional[str] = None
    user: Optional[SessionUser] = None
    role: Optional[str] = None
    # Role read from the database on a cache miss; the caller writes it back.
    cache_role: Optional[str] = None
    clear_role_cache: bool = False


class RouteGuard:
    """Decides whether a page request may proceed.

    The cached role is trusted as is; the database is only consulted on a
    cache miss. Every failure during the check sends the visitor to the login
    page, including transient database errors.
    """

    def __init__(
        self,
        verify_session: SessionVerifier,
        roles: RoleLookup,
        *,
        login_path: str = "/admin-login",
        default_role: str = "collab",
    ) -> None:
        self._verify_session = verify_session
        self._roles = roles
        self._login_path = login_path
        self._default_role = default_role

    def _to_login(self) -> GuardDecision:
        return GuardDecision(allowed=False, redirect_to=self._login_path, clear_role_cache=True)

    async def check(
        self,
        token: Optional[str],
        cached_role: Optional[str],
        allowed_roles: Collection[str],
    ) -> GuardDecision:
        if not token:
            return self._to_login()

        try:
            user = self._verify_session(token)
        except InvalidSessionError as exc:
            logger.info("Rejected session: %s", exc)
            return self._to_login()

        cache_role = None
        role = cached_role
        if not role:
            try:
                role = await self._roles.get_role(user.id)
            except Exception as exc:
                logger.error("Role lookup failed for %s: %s", user.id, exc)
                return self._to_login()
            role = role or self._default_role
            cache_role = role

        if role not in allowed_roles:
            return GuardDecision(
                allowed=False,
                redirect_to=default_page_for(role, self._login_path),
                user=user,
                role=role,
                cache_role=cache_role,
            )

        return GuardDecision(allowed=True, user=user, role=role, cache_role=cache_role)


__all__ = ["GuardDecision", "RoleLookup", "RouteGuard", "SessionVerifier"]
