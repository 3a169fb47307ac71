"""User management use cases spanning the auth service and the profiles table."""

from __future__ import annotations

import logging
import secrets
from typing import Any, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import AuthNotConfiguredError, AuthVendorError, UserCreationError, UserNotFoundError
from .models import (
    PLACEHOLDER_EMAIL,
    PLACEHOLDER_NAME,
    ROLES,
    UNSET,
    AuthUser,
    Profile,
    UserCreateInput,
    UserProfile,
    UserUpdateInput,
)
from .repository import AuthGateway, ProfileRepository

logger = logging.getLogger(__name__)

# Roughly a hundred years; the auth service has no permanent ban flag.
SUSPEND_BAN_DURATION = "876000h"


def _normalize_role(role: Optional[str]) -> str:
    return role if role in ROLES else "user"


def _status_of(auth_user: AuthUser | None) -> str:
    if auth_user is None:
        return "active"
    return "suspended" if auth_user.user_metadata.get("status") == "suspended" else "active"


def _merge(profile: Profile, auth_user: AuthUser | None) -> UserProfile:
    return UserProfile(
        id=profile.id,
        email=(auth_user.email if auth_user else None) or PLACEHOLDER_EMAIL,
        full_name=profile.full_name or PLACEHOLDER_NAME,
        role=_normalize_role(profile.role),
        status=_status_of(auth_user),
        avatar_url=profile.avatar_url,
        phone=profile.phone,
        created_at=profile.created_at or (auth_user.created_at if auth_user else None),
        updated_at=auth_user.updated_at if auth_user else None,
        last_sign_in_at=auth_user.last_sign_in_at if auth_user else None,
    )


def _from_auth_only(auth_user: AuthUser) -> UserProfile:
    metadata = auth_user.user_metadata
    email = auth_user.email or PLACEHOLDER_EMAIL
    full_name = (
        metadata.get("full_name")
        or metadata.get("name")
        or (auth_user.email.split("@")[0] if auth_user.email else None)
        or PLACEHOLDER_NAME
    )
    return UserProfile(
        id=auth_user.id,
        email=email,
        full_name=full_name,
        role=_normalize_role(metadata.get("role")),
        status=_status_of(auth_user),
        avatar_url=metadata.get("avatar_url"),
        phone=auth_user.phone,
        created_at=auth_user.created_at,
        updated_at=auth_user.updated_at,
        last_sign_in_at=auth_user.last_sign_in_at,
    )


class UserService:
    """Combines auth users with their profile rows.

    ``auth`` is ``None`` when the auth service is not configured; listing then
    works from profiles alone and every write is refused.
    """

    def __init__(self, profiles: ProfileRepository, auth: AuthGateway | None) -> None:
        self._profiles = profiles
        self._auth = auth

    @classmethod
    def with_session(cls, session: AsyncSession, auth: AuthGateway | None) -> "UserService":
        # Deferred: the repository module imports this package.
        from msc_admin.infrastructure.database.repositories.profile_repository import SqlProfileRepository

        return cls(SqlProfileRepository(session), auth)

    def _require_auth(self) -> AuthGateway:
        if self._auth is None:
            raise AuthNotConfiguredError("Supabase is not configured")
        return self._auth

    async def get_role(self, user_id: str) -> str | None:
        profile = await self._profiles.get_by_id(user_id)
        return profile.role if profile else None

    async def create_missing_profile(self, user_id: str, *, email: str | None, role: str) -> None:
        full_name = (email or "").split("@", 1)[0] or user_id
        await self._profiles.create_profile(user_id=user_id, full_name=full_name, role=role)
        logger.info("Created profile for %s with role %s", user_id, role)

    async def list_users(self) -> Sequence[UserProfile]:
        profiles = await self._profiles.list_profiles()

        auth_users: list[AuthUser] = []
        if self._auth is not None:
            try:
                auth_users = list(await self._auth.list_users())
            except AuthVendorError as exc:
                logger.warning("Auth admin API unavailable, listing profiles only: %s", exc)

        if profiles:
            by_id = {user.id: user for user in auth_users}
            return [_merge(profile, by_id.get(profile.id)) for profile in profiles]
        return [_from_auth_only(user) for user in auth_users]

    async def create_user(self, payload: UserCreateInput) -> UserProfile:
        auth = self._require_auth()
        role = _normalize_role(payload.role)
        password = payload.password or secrets.token_urlsafe(16)

        try:
            auth_user = await auth.create_user(
                email=payload.email,
                password=password,
                user_metadata={"full_name": payload.full_name},
                app_metadata={"role": role},
            )
        except AuthVendorError as exc:
            raise UserCreationError(f"Could not create account: {exc}") from exc

        try:
            profile = await self._profiles.create_profile(
                user_id=auth_user.id,
                full_name=payload.full_name,
                role=role,
                avatar_url=payload.avatar_url,
                phone=payload.phone,
            )
        except Exception as exc:
            logger.error("Profile insert failed for %s, removing auth user: %s", auth_user.id, exc)
            await auth.delete_user(auth_user.id)
            raise UserCreationError(f"Could not create profile: {exc}") from exc

        logger.info("Created user %s with role %s", auth_user.id, role)
        return _merge(profile, auth_user)

    async def update_user(self, user_id: str, payload: UserUpdateInput) -> Profile:
        auth = self._require_auth()
        if await self._profiles.get_by_id(user_id) is None:
            raise UserNotFoundError(user_id)

        if payload.full_name is not UNSET and payload.full_name:
            try:
                await auth.update_user(user_id, {"user_metadata": {"full_name": payload.full_name}})
            except AuthVendorError as exc:
                logger.warning("Could not update auth metadata for %s: %s", user_id, exc)

        values: dict[str, Any] = {}
        if payload.full_name is not UNSET and payload.full_name:
            values["full_name"] = payload.full_name
        if payload.role is not UNSET and payload.role:
            values["role"] = _normalize_role(payload.role)
        if payload.avatar_url is not UNSET:
            values["avatar_url"] = payload.avatar_url
        if payload.phone is not UNSET:
            values["phone"] = payload.phone

        return await self._profiles.update_profile(user_id, values)

    async def delete_user(self, user_id: str) -> None:
        auth = self._require_auth()
        await auth.delete_user(user_id)
        await self._profiles.delete_profile(user_id)
        logger.info("Deleted user %s", user_id)

    async def set_suspended(self, user_id: str, suspended: bool) -> str:
        auth = self._require_auth()
        status = "suspended" if suspended else "active"
        await auth.update_user(
            user_id,
            {
                "user_metadata": {"status": status},
                "ban_duration": SUSPEND_BAN_DURATION if suspended else "none",
            },
        )
        return status
