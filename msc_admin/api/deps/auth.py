"""Authentication dependencies for the JSON API.

Unlike the page guard, these always read the role from the profiles table;
the role cookie is never trusted here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from msc_admin.core.config import Settings, get_settings
from msc_admin.core.security import InvalidSessionError
from msc_admin.modules.access import ADMIN, STAFF_ROLES
from msc_admin.modules.access.guard import SessionVerifier
from msc_admin.modules.users import UserService

from .services import get_session_verifier, get_user_service

bearer = HTTPBearer(auto_error=False)


@dataclass(slots=True)
class CurrentUser:
    id: str
    role: str
    email: Optional[str] = None


def extract_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
    settings: Settings,
) -> Optional[str]:
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.access.session_cookie)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    settings: Settings = Depends(get_settings),
    verify_session: SessionVerifier = Depends(get_session_verifier),
    users: UserService = Depends(get_user_service),
) -> CurrentUser:
    token = extract_token(request, credentials, settings)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    try:
        session_user = verify_session(token)
    except InvalidSessionError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc

    role = await users.get_role(session_user.id) or settings.access.default_role
    return CurrentUser(id=session_user.id, role=role, email=session_user.email)


def require_roles(*roles: str) -> Callable[..., object]:
    allowed = frozenset(roles)

    async def dependency(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if user.role not in allowed:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient role")
        return user

    return dependency


get_current_staff = require_roles(*STAFF_ROLES)
get_current_admin = require_roles(ADMIN)


__all__ = [
    "CurrentUser",
    "extract_token",
    "get_current_admin",
    "get_current_staff",
    "get_current_user",
    "require_roles",
]
