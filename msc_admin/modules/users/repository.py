"""Repository and gateway protocols for users."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .models import AuthSession, AuthUser, Profile


class ProfileRepository(Protocol):
    """Persistence of the ``profiles`` table."""

    async def get_by_id(self, user_id: str) -> Profile | None:
        ...

    async def list_profiles(self) -> Sequence[Profile]:
        ...

    async def create_profile(
        self,
        *,
        user_id: str,
        full_name: str,
        role: str,
        avatar_url: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Profile:
        ...

    async def update_profile(self, user_id: str, values: Mapping[str, Any]) -> Profile:
        ...

    async def delete_profile(self, user_id: str) -> None:
        ...


class AuthGateway(Protocol):
    """Admin and sign-in operations of the hosted auth service.

    Implementations raise ``AuthVendorError`` when the vendor call fails and
    ``InvalidCredentialsError`` when a sign-in is rejected.
    """

    async def list_users(self) -> Sequence[AuthUser]:
        ...

    async def create_user(
        self,
        *,
        email: str,
        password: str,
        user_metadata: Mapping[str, Any],
        app_metadata: Mapping[str, Any],
    ) -> AuthUser:
        ...

    async def update_user(self, user_id: str, attributes: Mapping[str, Any]) -> AuthUser:
        ...

    async def delete_user(self, user_id: str) -> None:
        ...

    async def sign_in(self, email: str, password: str) -> AuthSession:
        ...
