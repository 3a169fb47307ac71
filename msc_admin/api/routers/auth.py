"""Sign-in and sign-out endpoints backed by the hosted auth service."""
from fastapi import APIRouter, Depends, HTTPException, Response, status

from msc_admin.api.deps import get_access_service
from msc_admin.core.config import Settings, get_settings
from msc_admin.modules.access import AccessService, SignInResult
from msc_admin.modules.users import AuthNotConfiguredError, AuthVendorError, InvalidCredentialsError
from msc_admin.schemas import ApiResponse, LoginRequest, LoginResponse

router = APIRouter()


def set_session_cookies(response: Response, result: SignInResult, settings: Settings) -> None:
    access = settings.access
    response.set_cookie(
        access.session_cookie,
        result.session.access_token,
        httponly=True,
        samesite="lax",
        secure=settings.environment == "production",
    )
    response.set_cookie(access.role_cookie, result.role, samesite="lax", secure=settings.environment == "production")


def clear_session_cookies(response: Response, settings: Settings) -> None:
    response.delete_cookie(settings.access.session_cookie)
    response.delete_cookie(settings.access.role_cookie)


@router.post("/login", response_model=ApiResponse, response_model_exclude_none=True, summary="Sign in")
async def login(
    payload: LoginRequest,
    response: Response,
    access: AccessService = Depends(get_access_service),
    settings: Settings = Depends(get_settings),
) -> ApiResponse:
    try:
        result = await access.sign_in(payload.email, payload.password)
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password") from exc
    except AuthNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except AuthVendorError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc

    set_session_cookies(response, result, settings)
    user = result.session.user
    return ApiResponse(
        success=True,
        data=LoginResponse(
            access_token=result.session.access_token,
            user_id=user.id,
            email=user.email,
            role=result.role,
            redirect_to=result.redirect_to,
        ),
    )


@router.post("/logout", response_model=ApiResponse, response_model_exclude_none=True, summary="Sign out")
async def logout(response: Response, settings: Settings = Depends(get_settings)) -> ApiResponse:
    clear_session_cookies(response, settings)
    return ApiResponse(success=True, data={"redirect_to": settings.access.login_path})
