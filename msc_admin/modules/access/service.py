"""Sign-in through the hosted auth service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from msc_admin.modules.users.exceptions import AuthNotConfiguredError
from msc_admin.modules.users.models import AuthSession
from msc_admin.modules.users.repository import AuthGateway

from .guard import RoleLookup
from .roles import redirect_after_sign_in

logger = logging.getLogger(__name__)


class ProfileProvisioner(RoleLookup, Protocol):
    async def create_missing_profile(self, user_id: str, *, email: Optional[str], role: str) -> None:
        ...


@dataclass(slots=True)
class SignInResult:
    session: AuthSession
    role: str
    redirect_to: str


class AccessService:
    def __init__(self, auth: AuthGateway | None, users: ProfileProvisioner, *, default_role: str = "collab") -> None:
        self._auth = auth
        self._users = users
        self._default_role = default_role

    async def sign_in(self, email: str, password: str) -> SignInResult:
        """Sign in and resolve the role, creating the profile row on first sign-in."""
        if self._auth is None:
            raise AuthNotConfiguredError("Supabase is not configured")
        session = await self._auth.sign_in(email, password)
        user = session.user
        role = await self._users.get_role(user.id)
        if role is None:
            role = self._default_role
            await self._users.create_missing_profile(user.id, email=user.email or email, role=role)
        logger.info("User %s signed in as %s", user.id, role)
        return SignInResult(session=session, role=role, redirect_to=redirect_after_sign_in(role))
