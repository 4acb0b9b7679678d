"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Response, status
import logfire

from cradle.application.usecase.auth import (
    DevLoginRequest,
    DevLoginResponse,
    DevLoginUseCase,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from cradle.config import Settings
from cradle.domain.service import JWTService
from cradle.interface.api.session import COOKIE_NAME, require_principal

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.post("/dev-login", response_model=DevLoginResponse)
async def dev_login(
    request: DevLoginRequest,
    response: Response,
    dev_login_use_case: FromDishka[DevLoginUseCase],
    settings: FromDishka[Settings],
) -> DevLoginResponse:
    """Sign in as any email address (development and tests only).

    Sets cookie: auth_token

    Raises:
        HTTPException: 404 when development login is disabled
    """
    if not settings.auth.dev_login_enabled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    login = await dev_login_use_case.execute(request)
    response.set_cookie(
        key=COOKIE_NAME,
        value=login.token,
        httponly=True,
        secure=False,
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )
    logfire.info("Development login", user_id=login.user_id)
    return login


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """Return the signed-in user."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(principal=principal)
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(response: Response) -> None:
    """Clear the session cookie."""
    response.delete_cookie(key=COOKIE_NAME, path="/")
