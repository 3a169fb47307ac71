"""Service providers wired from the application container."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from msc_admin.core.config import Settings, get_settings
from msc_admin.core.container import get_container
from msc_admin.core.security import SessionUser, decode_session_token
from msc_admin.modules.access import AccessService, RouteGuard
from msc_admin.modules.access.guard import SessionVerifier
from msc_admin.modules.media import MediaGateway, MediaService
from msc_admin.modules.posts import BlogPostService
from msc_admin.modules.users import AuthGateway, UserService

from .database import get_db_session


def get_media_gateway() -> MediaGateway | None:
    return get_container().media_gateway


def get_auth_gateway() -> AuthGateway | None:
    return get_container().auth_gateway


def get_media_service(gateway: MediaGateway | None = Depends(get_media_gateway)) -> MediaService:
    return MediaService(gateway)


def get_blog_post_service(db: AsyncSession = Depends(get_db_session)) -> BlogPostService:
    return BlogPostService.with_session(db)


def get_user_service(
    db: AsyncSession = Depends(get_db_session),
    auth: AuthGateway | None = Depends(get_auth_gateway),
) -> UserService:
    return UserService.with_session(db, auth)


def get_session_verifier(settings: Settings = Depends(get_settings)) -> SessionVerifier:
    def verify(token: str) -> SessionUser:
        return decode_session_token(token, settings)

    return verify


def get_route_guard(
    users: UserService = Depends(get_user_service),
    verify_session: SessionVerifier = Depends(get_session_verifier),
    settings: Settings = Depends(get_settings),
) -> RouteGuard:
    return RouteGuard(
        verify_session,
        users,
        login_path=settings.access.login_path,
        default_role=settings.access.default_role,
    )


def get_access_service(
    users: UserService = Depends(get_user_service),
    auth: AuthGateway | None = Depends(get_auth_gateway),
    settings: Settings = Depends(get_settings),
) -> AccessService:
    return AccessService(auth, users, default_role=settings.access.default_role)


__all__ = [
    "get_access_service",
    "get_auth_gateway",
    "get_blog_post_service",
    "get_media_gateway",
    "get_media_service",
    "get_route_guard",
    "get_session_verifier",
    "get_user_service",
]
