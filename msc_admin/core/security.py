"""Verification of session tokens issued by the hosted auth service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from msc_admin.core.config import Settings, get_settings

ALGORITHMS = ["HS256"]


class InvalidSessionError(Exception):
    """Raised when a session token is missing claims, expired or forged."""


@dataclass(slots=True)
class SessionUser:
    id: str
    email: Optional[str] = None


def decode_session_token(token: str, settings: Settings | None = None) -> SessionUser:
    settings = settings or get_settings()
    secret = settings.supabase.jwt_secret
    if not secret:
        raise InvalidSessionError("SUPABASE__JWT_SECRET is not configured")

    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=ALGORITHMS,
            audience=settings.supabase.jwt_audience,
        )
    except ExpiredSignatureError as exc:
        raise InvalidSessionError("session expired") from exc
    except JWTError as exc:
        raise InvalidSessionError("invalid session token") from exc

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidSessionError("session token has no subject")
    return SessionUser(id=user_id, email=payload.get("email"))


def create_session_token(
    user_id: str,
    *,
    email: str | None = None,
    expires_in: int = 3600,
    settings: Settings | None = None,
) -> str:
    """Issue a token shaped like the auth service's; used by local runs and tests."""
    settings = settings or get_settings()
    if not settings.supabase.jwt_secret:
        raise InvalidSessionError("SUPABASE__JWT_SECRET is not configured")
    payload = {
        "sub": user_id,
        "email": email,
        "aud": settings.supabase.jwt_audience,
        "role": "authenticated",
        "exp": datetime.now(timezone.utc) + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, settings.supabase.jwt_secret, algorithm=ALGORITHMS[0])


__all__ = [
    "InvalidSessionError",
    "SessionUser",
    "create_session_token",
    "decode_session_token",
]
