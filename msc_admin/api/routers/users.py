"""Administrative user management endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from msc_admin.api.deps import CurrentUser, get_current_admin, get_user_service
from msc_admin.modules.users import (
    UNSET,
    UserCreateInput,
    UserCreationError,
    UserNotFoundError,
    UserService,
    UserUpdateInput,
)
from msc_admin.schemas import (
    ApiResponse,
    ProfileResponse,
    UserCreate,
    UserResponse,
    UserStatusUpdate,
    UserUpdate,
)

router = APIRouter()


@router.get("", response_model=ApiResponse, response_model_exclude_none=True, summary="List users")
async def list_users(
    _: CurrentUser = Depends(get_current_admin),
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    users = await service.list_users()
    return ApiResponse(success=True, data=[UserResponse.model_validate(user) for user in users])


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
async def create_user(
    payload: UserCreate,
    _: CurrentUser = Depends(get_current_admin),
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    try:
        user = await service.create_user(UserCreateInput(**payload.model_dump()))
    except UserCreationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ApiResponse(success=True, data=UserResponse.model_validate(user))


@router.put("/{user_id}", response_model=ApiResponse, response_model_exclude_none=True, summary="Update a user")
async def update_user(
    user_id: str,
    payload: UserUpdate,
    _: CurrentUser = Depends(get_current_admin),
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    changes = payload.model_dump(exclude_unset=True)
    update = UserUpdateInput(
        full_name=changes.get("full_name", UNSET),
        role=changes.get("role", UNSET),
        avatar_url=changes.get("avatar_url", UNSET),
        phone=changes.get("phone", UNSET),
    )
    try:
        profile = await service.update_user(user_id, update)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from exc
    return ApiResponse(success=True, data=ProfileResponse.model_validate(profile))


@router.delete("/{user_id}", response_model=ApiResponse, response_model_exclude_none=True, summary="Delete a user")
async def delete_user(
    user_id: str,
    admin: CurrentUser = Depends(get_current_admin),
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    if user_id == admin.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot delete your own account")
    await service.delete_user(user_id)
    return ApiResponse(success=True, data={"id": user_id, "status": "deleted"})


@router.put("/{user_id}/status", response_model=ApiResponse, response_model_exclude_none=True, summary="Suspend or reactivate a user")
async def set_user_status(
    user_id: str,
    payload: UserStatusUpdate,
    _: CurrentUser = Depends(get_current_admin),
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    new_status = await service.set_suspended(user_id, payload.suspended)
    return ApiResponse(success=True, data={"id": user_id, "status": new_status})
