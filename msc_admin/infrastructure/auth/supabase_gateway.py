"""Supabase implementation of the auth gateway."""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import Any, Callable, Mapping, Optional, Sequence

from supabase import Client, ClientOptions, create_client
from supabase_auth.errors import AuthApiError, AuthError

from msc_admin.modules.users.exceptions import AuthVendorError, InvalidCredentialsError
from msc_admin.modules.users.models import AuthSession, AuthUser
from msc_admin.modules.users.repository import AuthGateway

logger = logging.getLogger("msc_admin.supabase")


def _to_auth_user(user: Any) -> AuthUser:
    return AuthUser(
        id=str(user.id),
        email=user.email,
        phone=user.phone or None,
        created_at=user.created_at,
        updated_at=user.updated_at,
        last_sign_in_at=user.last_sign_in_at,
        user_metadata=dict(user.user_metadata or {}),
        app_metadata=dict(user.app_metadata or {}),
    )


class SupabaseAuthGateway(AuthGateway):
    """Runs the synchronous Supabase auth admin API in worker threads."""

    def __init__(self, url: str, service_role_key: str, anon_key: Optional[str] = None) -> None:
        self._url = url
        self._anon_key = anon_key or service_role_key
        self._admin: Client = create_client(url, service_role_key, options=self._options())

    @staticmethod
    def _options() -> ClientOptions:
        return ClientOptions(auto_refresh_token=False, persist_session=False)

    async def _call(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        try:
            return await asyncio.to_thread(partial(func, *args, **kwargs))
        except AuthError as exc:
            logger.error("Supabase auth call %s failed: %s", getattr(func, "__name__", func), exc)
            raise AuthVendorError(str(exc)) from exc

    async def list_users(self) -> Sequence[AuthUser]:
        users = await self._call(self._admin.auth.admin.list_users)
        return [_to_auth_user(user) for user in users]

    async def create_user(
        self,
        *,
        email: str,
        password: str,
        user_metadata: Mapping[str, Any],
        app_metadata: Mapping[str, Any],
    ) -> AuthUser:
        response = await self._call(
            self._admin.auth.admin.create_user,
            {
                "email": email,
                "password": password,
                "email_confirm": True,
                "user_metadata": dict(user_metadata),
                "app_metadata": dict(app_metadata),
            },
        )
        return _to_auth_user(response.user)

    async def update_user(self, user_id: str, attributes: Mapping[str, Any]) -> AuthUser:
        response = await self._call(self._admin.auth.admin.update_user_by_id, user_id, dict(attributes))
        return _to_auth_user(response.user)

    async def delete_user(self, user_id: str) -> None:
        await self._call(self._admin.auth.admin.delete_user, user_id)

    async def sign_in(self, email: str, password: str) -> AuthSession:
        # A throwaway client keeps the admin client's headers on the service key.
        client = create_client(self._url, self._anon_key, options=self._options())
        try:
            response = await asyncio.to_thread(
                client.auth.sign_in_with_password, {"email": email, "password": password}
            )
        except AuthApiError as exc:
            if exc.status in (400, 401):
                raise InvalidCredentialsError(str(exc)) from exc
            raise AuthVendorError(str(exc)) from exc
        except AuthError as exc:
            raise AuthVendorError(str(exc)) from exc

        if response.session is None or response.user is None:
            raise InvalidCredentialsError("No session returned")
        return AuthSession(
            access_token=response.session.access_token,
            refresh_token=response.session.refresh_token,
            user=_to_auth_user(response.user),
        )


__all__ = ["SupabaseAuthGateway"]
