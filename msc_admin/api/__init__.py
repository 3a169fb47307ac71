from fastapi import APIRouter

from msc_admin.api.routers import auth, folders, images, posts, users


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    router.include_router(images.router, prefix="/images", tags=["images"])
    router.include_router(folders.router, prefix="/images/folders", tags=["folders"])
    # Must stay after every other /images route.
    router.include_router(images.asset_router, prefix="/images", tags=["images"])
    router.include_router(posts.router, prefix="/posts", tags=["posts"])
    router.include_router(users.router, prefix="/users", tags=["users"])
    return router


__all__ = [
    "create_api_router",
]
