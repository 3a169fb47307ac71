"""Image endpoints proxied to the media vendor."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status

from msc_admin.api.deps import CurrentUser, get_current_staff, get_media_service
from msc_admin.core.config import Settings, get_settings
from msc_admin.modules.media import MediaResult, MediaService, UploadedFile, split_tags
from msc_admin.modules.media.service import DEFAULT_PAGE_SIZE
from msc_admin.schemas import ApiResponse, ImageUpdateRequest

router = APIRouter()
# Registered last: the path parameter swallows every sub-path.
asset_router = APIRouter()


def envelope(result: MediaResult) -> ApiResponse:
    return ApiResponse(success=result.success, data=result.data, message=result.message)


@router.get("", response_model=ApiResponse, response_model_exclude_none=True, summary="List images")
async def list_images(
    folder: str = "",
    tags: Optional[str] = None,
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=500),
    next_cursor: Optional[str] = None,
    _: CurrentUser = Depends(get_current_staff),
    service: MediaService = Depends(get_media_service),
) -> ApiResponse:
    result = await service.list_images(
        folder=folder,
        tags=split_tags(tags),
        limit=limit,
        next_cursor=next_cursor,
    )
    return envelope(result)


@router.post("/upload", response_model=ApiResponse, response_model_exclude_none=True, summary="Upload images")
async def upload_images(
    files: Optional[list[UploadFile]] = File(default=None),
    folder: Optional[str] = Form(default=None),
    tags: Optional[str] = Form(default=None),
    _: CurrentUser = Depends(get_current_staff),
    service: MediaService = Depends(get_media_service),
) -> ApiResponse:
    uploads: list[UploadedFile] = []
    for upload in files or []:
        try:
            content = await upload.read()
        finally:
            await upload.close()
        uploads.append(
            UploadedFile(
                filename=upload.filename or "file",
                content=content,
                content_type=upload.content_type,
            )
        )
    result = await service.upload_images(uploads, folder=folder, tags=split_tags(tags))
    return envelope(result)


@router.delete("/upload", response_model=ApiResponse, response_model_exclude_none=True, summary="Delete an image")
async def delete_uploaded_image(
    public_id: Optional[str] = None,
    _: CurrentUser = Depends(get_current_staff),
    service: MediaService = Depends(get_media_service),
) -> ApiResponse:
    return envelope(await service.delete_image(public_id or ""))


@router.get("/upload", include_in_schema=False)
async def upload_is_not_readable() -> None:
    # Keeps the asset catch-all from treating "upload" as a public id.
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method Not Allowed",
        headers={"Allow": "POST, DELETE"},
    )


@router.get("/stats", response_model=ApiResponse, response_model_exclude_none=True, summary="Media usage statistics")
async def image_stats(
    _: CurrentUser = Depends(get_current_staff),
    service: MediaService = Depends(get_media_service),
) -> ApiResponse:
    return envelope(await service.get_stats())


@router.get("/test", response_model=ApiResponse, response_model_exclude_none=True, summary="Check the media vendor connection")
async def test_connection(
    _: CurrentUser = Depends(get_current_staff),
    settings: Settings = Depends(get_settings),
    service: MediaService = Depends(get_media_service),
) -> ApiResponse:
    config_status = settings.cloudinary_config_status
    if not service.configured:
        return ApiResponse(
            success=False,
            error="Cloudinary configuration incomplete",
            message="Please check your environment variables",
            data={"config_status": config_status},
        )
    result = await service.ping()
    return ApiResponse(
        success=True,
        message=result.message,
        data={
            **result.data,
            "config_status": config_status,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


@asset_router.get("/{public_id:path}", response_model=ApiResponse, response_model_exclude_none=True, summary="Image details")
async def get_image(
    public_id: str,
    _: CurrentUser = Depends(get_current_staff),
    service: MediaService = Depends(get_media_service),
) -> ApiResponse:
    return envelope(await service.get_image(public_id))


@asset_router.put("/{public_id:path}", response_model=ApiResponse, response_model_exclude_none=True, summary="Update image tags and context")
async def update_image(
    public_id: str,
    payload: ImageUpdateRequest,
    _: CurrentUser = Depends(get_current_staff),
    service: MediaService = Depends(get_media_service),
) -> ApiResponse:
    result = await service.update_image(public_id, tags=payload.tags, context=payload.context)
    return envelope(result)


@asset_router.delete("/{public_id:path}", response_model=ApiResponse, response_model_exclude_none=True, summary="Delete an image")
async def delete_image(
    public_id: str,
    _: CurrentUser = Depends(get_current_staff),
    service: MediaService = Depends(get_media_service),
) -> ApiResponse:
    return envelope(await service.delete_image(public_id))
