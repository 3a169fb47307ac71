import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from msc_admin import __version__
from msc_admin.api import create_api_router
from msc_admin.core.config import get_settings
from msc_admin.core.container import get_container
from msc_admin.core.logging import configure_logging
from msc_admin.infrastructure.database import dispose_engine, init_db
from msc_admin.modules.media import MediaError
from msc_admin.modules.posts import BlogPostNotFoundError
from msc_admin.modules.users import AuthNotConfiguredError, AuthVendorError, UserNotFoundError
from msc_admin.schemas import ApiResponse
from msc_admin.web import pages
from msc_admin.web.templating import resolve_path

logger = logging.getLogger(__name__)

settings = get_settings()
STATIC_DIR = resolve_path(settings.static_dir)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings)
    if settings.environment == "development":
        await init_db()
    get_container().log_vendor_status()
    logger.info("%s %s started", settings.project_name, __version__)
    yield
    await dispose_engine()


def _envelope(status_code: int, error: str, message: str | None = None, details=None) -> JSONResponse:
    body = ApiResponse(success=False, error=error, message=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(MediaError)
    async def media_error_handler(request: Request, exc: MediaError):
        return _envelope(exc.status_code, exc.error, exc.message, exc.details)

    @app.exception_handler(AuthNotConfiguredError)
    async def auth_not_configured_handler(request: Request, exc: AuthNotConfiguredError):
        return _envelope(status.HTTP_400_BAD_REQUEST, "Supabase not configured", str(exc))

    @app.exception_handler(AuthVendorError)
    async def auth_vendor_handler(request: Request, exc: AuthVendorError):
        return _envelope(status.HTTP_502_BAD_GATEWAY, "Auth service request failed", str(exc))

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError):
        return _envelope(status.HTTP_404_NOT_FOUND, "User not found")

    @app.exception_handler(BlogPostNotFoundError)
    async def post_not_found_handler(request: Request, exc: BlogPostNotFoundError):
        return _envelope(status.HTTP_404_NOT_FOUND, "Post not found")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        response = _envelope(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _envelope(
            422,
            "Invalid request",
            details=jsonable_encoder(exc.errors()),
        )


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="Admin backend for the MSC content site",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.static_version = __version__

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    register_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))
    app.include_router(pages.router)

    return app


app = create_app()
