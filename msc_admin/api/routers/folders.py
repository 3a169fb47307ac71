"""Folder endpoints proxied to the media vendor."""
from typing import Optional

from fastapi import APIRouter, Depends

from msc_admin.api.deps import CurrentUser, get_current_staff, get_media_service
from msc_admin.modules.media import MediaService
from msc_admin.schemas import ApiResponse, FolderCreateRequest, FolderRenameRequest

from .images import envelope

router = APIRouter()


@router.get("", response_model=ApiResponse, response_model_exclude_none=True, summary="List folders with subfolders")
async def list_folders(
    _: CurrentUser = Depends(get_current_staff),
    service: MediaService = Depends(get_media_service),
) -> ApiResponse:
    return envelope(await service.list_folders())


@router.post("", response_model=ApiResponse, response_model_exclude_none=True, summary="Create a folder")
async def create_folder(
    payload: FolderCreateRequest,
    _: CurrentUser = Depends(get_current_staff),
    service: MediaService = Depends(get_media_service),
) -> ApiResponse:
    return envelope(await service.create_folder(payload.folder_path))


@router.delete("", response_model=ApiResponse, response_model_exclude_none=True, summary="Delete a folder and its images")
async def delete_folder(
    path: Optional[str] = None,
    _: CurrentUser = Depends(get_current_staff),
    service: MediaService = Depends(get_media_service),
) -> ApiResponse:
    return envelope(await service.delete_folder(path))


@router.put("", response_model=ApiResponse, response_model_exclude_none=True, summary="Rename a folder")
async def rename_folder(
    payload: FolderRenameRequest,
    _: CurrentUser = Depends(get_current_staff),
    service: MediaService = Depends(get_media_service),
) -> ApiResponse:
    return envelope(await service.rename_folder(payload.old_path, payload.new_path))
