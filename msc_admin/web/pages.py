"""Role-guarded admin pages rendered on the server."""
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from msc_admin.api.deps import get_access_service, get_blog_post_service, get_media_service, get_route_guard, get_user_service
from msc_admin.api.routers.auth import clear_session_cookies, set_session_cookies
from msc_admin.core.config import Settings, get_settings
from msc_admin.modules.access import (
    PAGE_ROLES,
    AccessService,
    GuardDecision,
    RouteGuard,
    allowed_roles_for,
    navigation_for,
)
from msc_admin.modules.media import MediaError, MediaService
from msc_admin.modules.posts import BlogPostService
from msc_admin.modules.users import AuthNotConfiguredError, AuthVendorError, InvalidCredentialsError, UserService

from .templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(include_in_schema=False)

HOME_PAGE = "/admin/dashboard"

# Pages without live data; they render the shared shell only.
STATIC_PAGES = {
    "dashboard": "Dashboard",
    "finance": "Finance",
    "courses": "Courses",
    "projects": "Projects",
}


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def _apply_role_cache(response: Response, decision: GuardDecision, settings: Settings) -> Response:
    if decision.clear_role_cache:
        response.delete_cookie(settings.access.role_cookie)
    elif decision.cache_role:
        response.set_cookie(settings.access.role_cookie, decision.cache_role, samesite="lax")
    return response


async def _check(request: Request, page: str, guard: RouteGuard, settings: Settings) -> GuardDecision:
    return await guard.check(
        request.cookies.get(settings.access.session_cookie),
        request.cookies.get(settings.access.role_cookie),
        allowed_roles_for(page),
    )


def _render(
    request: Request,
    template: str,
    page: str,
    decision: GuardDecision,
    settings: Settings,
    **context: Any,
) -> Response:
    response = templates.TemplateResponse(
        request,
        template,
        {
            "page": page,
            "role": decision.role,
            "user": decision.user,
            "navigation": navigation_for(decision.role),
            "project_name": settings.project_name,
            **context,
        },
    )
    return _apply_role_cache(response, decision, settings)


@router.get("/admin-login", response_class=HTMLResponse)
async def login_page(request: Request, settings: Settings = Depends(get_settings)):
    return templates.TemplateResponse(request, "login.html", {"project_name": settings.project_name})


@router.post("/admin-login", response_class=HTMLResponse)
async def login_submit(
    request: Request,
    email: str = Form(...),
    password: str = Form(...),
    access: AccessService = Depends(get_access_service),
    settings: Settings = Depends(get_settings),
):
    try:
        result = await access.sign_in(email, password)
    except InvalidCredentialsError:
        error, status_code = "Invalid email or password", status.HTTP_401_UNAUTHORIZED
    except AuthNotConfiguredError:
        error, status_code = "Sign-in is not available: Supabase is not configured", status.HTTP_503_SERVICE_UNAVAILABLE
    except AuthVendorError as exc:
        logger.error("Sign-in failed for %s: %s", email, exc)
        error, status_code = "Sign-in failed, please try again", status.HTTP_502_BAD_GATEWAY
    else:
        response = _redirect(result.redirect_to)
        set_session_cookies(response, result, settings)
        return response

    return templates.TemplateResponse(
        request,
        "login.html",
        {"project_name": settings.project_name, "error": error, "email": email},
        status_code=status_code,
    )


@router.get("/admin/logout")
async def logout_page(settings: Settings = Depends(get_settings)):
    response = _redirect(settings.access.login_path)
    clear_session_cookies(response, settings)
    return response


@router.get("/admin", include_in_schema=False)
async def admin_root():
    return _redirect(HOME_PAGE)


@router.get("/admin/images", response_class=HTMLResponse)
async def images_page(
    request: Request,
    folder: str = "",
    q: str = "",
    guard: RouteGuard = Depends(get_route_guard),
    media: MediaService = Depends(get_media_service),
    settings: Settings = Depends(get_settings),
):
    decision = await _check(request, "images", guard, settings)
    if not decision.allowed:
        return _apply_role_cache(_redirect(decision.redirect_to), decision, settings)

    error: Optional[str] = None
    catalog = None
    try:
        catalog = await media.catalog(folder=folder, query=q)
    except MediaError as exc:
        error = exc.message or exc.error
    return _render(request, "images.html", "images", decision, settings, catalog=catalog, error=error, folder=folder, query=q)


@router.get("/admin/articles", response_class=HTMLResponse)
async def articles_page(
    request: Request,
    guard: RouteGuard = Depends(get_route_guard),
    posts: BlogPostService = Depends(get_blog_post_service),
    settings: Settings = Depends(get_settings),
):
    decision = await _check(request, "articles", guard, settings)
    if not decision.allowed:
        return _apply_role_cache(_redirect(decision.redirect_to), decision, settings)
    return _render(request, "articles.html", "articles", decision, settings, posts=await posts.list_posts())


@router.get("/admin/users", response_class=HTMLResponse)
async def users_page(
    request: Request,
    guard: RouteGuard = Depends(get_route_guard),
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    decision = await _check(request, "users", guard, settings)
    if not decision.allowed:
        return _apply_role_cache(_redirect(decision.redirect_to), decision, settings)
    return _render(request, "users.html", "users", decision, settings, users=await users.list_users())


@router.get("/admin/{page}", response_class=HTMLResponse)
async def static_page(
    request: Request,
    page: str,
    guard: RouteGuard = Depends(get_route_guard),
    settings: Settings = Depends(get_settings),
):
    if page not in PAGE_ROLES or page not in STATIC_PAGES:
        return _redirect(HOME_PAGE)
    decision = await _check(request, page, guard, settings)
    if not decision.allowed:
        return _apply_role_cache(_redirect(decision.redirect_to), decision, settings)
    return _render(request, "page.html", page, decision, settings, title=STATIC_PAGES[page])


@router.get("/admin/{rest:path}")
async def unknown_admin_page(rest: str):
    return _redirect(HOME_PAGE)
