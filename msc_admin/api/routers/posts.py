"""Blog post CRUD endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from msc_admin.api.deps import CurrentUser, get_blog_post_service, get_current_staff
from msc_admin.modules.posts import (
    BlogPostCreateInput,
    BlogPostNotFoundError,
    BlogPostService,
    BlogPostSlugConflictError,
)
from msc_admin.schemas import (
    ApiResponse,
    BlogPostCreate,
    BlogPostResponse,
    BlogPostUpdate,
    CounterResponse,
)

router = APIRouter()


def _not_found(post_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Post {post_id} not found")


@router.get("", response_model=ApiResponse, response_model_exclude_none=True, summary="List blog posts")
async def list_posts(
    _: CurrentUser = Depends(get_current_staff),
    service: BlogPostService = Depends(get_blog_post_service),
) -> ApiResponse:
    posts = await service.list_posts()
    return ApiResponse(success=True, data=[BlogPostResponse.model_validate(post) for post in posts])


@router.get("/{post_id}", response_model=ApiResponse, response_model_exclude_none=True, summary="Get a blog post")
async def get_post(
    post_id: int,
    _: CurrentUser = Depends(get_current_staff),
    service: BlogPostService = Depends(get_blog_post_service),
) -> ApiResponse:
    try:
        post = await service.get_post(post_id)
    except BlogPostNotFoundError as exc:
        raise _not_found(post_id) from exc
    return ApiResponse(success=True, data=BlogPostResponse.model_validate(post))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a blog post",
)
async def create_post(
    payload: BlogPostCreate,
    _: CurrentUser = Depends(get_current_staff),
    service: BlogPostService = Depends(get_blog_post_service),
) -> ApiResponse:
    values = payload.model_dump()
    try:
        post = await service.create_post(BlogPostCreateInput(**values))
    except BlogPostSlugConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Slug already exists: {exc}") from exc
    return ApiResponse(success=True, data=BlogPostResponse.model_validate(post))


@router.put("/{post_id}", response_model=ApiResponse, response_model_exclude_none=True, summary="Update a blog post")
async def update_post(
    post_id: int,
    payload: BlogPostUpdate,
    _: CurrentUser = Depends(get_current_staff),
    service: BlogPostService = Depends(get_blog_post_service),
) -> ApiResponse:
    try:
        post = await service.update_post(post_id, payload.model_dump(exclude_unset=True))
    except BlogPostNotFoundError as exc:
        raise _not_found(post_id) from exc
    except BlogPostSlugConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Slug already exists: {exc}") from exc
    return ApiResponse(success=True, data=BlogPostResponse.model_validate(post))


@router.delete("/{post_id}", response_model=ApiResponse, response_model_exclude_none=True, summary="Delete a blog post")
async def delete_post(
    post_id: int,
    _: CurrentUser = Depends(get_current_staff),
    service: BlogPostService = Depends(get_blog_post_service),
) -> ApiResponse:
    try:
        await service.delete_post(post_id)
    except BlogPostNotFoundError as exc:
        raise _not_found(post_id) from exc
    return ApiResponse(success=True, data={"id": post_id, "status": "deleted"})


@router.post("/{post_id}/views", response_model=ApiResponse, response_model_exclude_none=True, summary="Count a view")
async def increment_views(
    post_id: int,
    service: BlogPostService = Depends(get_blog_post_service),
) -> ApiResponse:
    try:
        value = await service.increment_views(post_id)
    except BlogPostNotFoundError as exc:
        raise _not_found(post_id) from exc
    return ApiResponse(success=True, data=CounterResponse(id=post_id, value=value))


@router.post("/{post_id}/likes", response_model=ApiResponse, response_model_exclude_none=True, summary="Count a like")
async def increment_likes(
    post_id: int,
    service: BlogPostService = Depends(get_blog_post_service),
) -> ApiResponse:
    try:
        value = await service.increment_likes(post_id)
    except BlogPostNotFoundError as exc:
        raise _not_found(post_id) from exc
    return ApiResponse(success=True, data=CounterResponse(id=post_id, value=value))
