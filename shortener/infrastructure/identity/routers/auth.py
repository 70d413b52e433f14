import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, Response, status

from shortener.application.common.errors import ErrorKind, presentation_error
from shortener.application.common.result import Failure
from shortener.application.identity.dtos import AuthTokens
from shortener.application.identity.use_cases.login_user_use_case import LoginUserUseCase
from shortener.application.identity.use_cases.logout_user_use_case import LogoutUserUseCase
from shortener.application.identity.use_cases.refresh_token_use_case import RefreshTokenUseCase
from shortener.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from shortener.config import get_settings
from shortener.core import container
from shortener.infrastructure.common.di import inject_use_case
from shortener.infrastructure.common.error_mapping import to_api_error
from shortener.infrastructure.identity.dependencies import ClientFingerPrint, CurrentUser
from shortener.infrastructure.identity.routers.users import to_user_response
from shortener.infrastructure.identity.schemas import (
    LoginRequest,
    MessageResponse,
    TokenResponse,
    UserDetailsResponse,
    UserRegisterRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])

REFRESH_COOKIE_NAME = "refresh_token"
REFRESH_COOKIE_PATH = "/api/v1/auth"

RefreshCookie = Annotated[str | None, Cookie(alias=REFRESH_COOKIE_NAME)]


def set_refresh_cookie(response: Response, tokens: AuthTokens) -> None:
    """Set the refresh secret (hex) as an httpOnly cookie living as long as the session."""
    max_age = int((tokens.session_expires_at - datetime.now(UTC)).total_seconds())
    response.set_cookie(
        key=REFRESH_COOKIE_NAME,
        value=tokens.refresh_secret.to_hex(),
        httponly=True,
        secure=get_settings().COOKIE_SECURE,
        samesite="strict",
        path=REFRESH_COOKIE_PATH,
        max_age=max(max_age, 0),
    )


def clear_refresh_cookie(response: Response) -> None:
    """Clear the refresh token cookie."""
    response.delete_cookie(
        key=REFRESH_COOKIE_NAME,
        httponly=True,
        secure=get_settings().COOKIE_SECURE,
        samesite="strict",
        path=REFRESH_COOKIE_PATH,
    )


def expired_refresh_cookie() -> str:
    """Set-Cookie value that removes the refresh cookie, for error responses."""
    scratch = Response()
    clear_refresh_cookie(scratch)
    return scratch.headers["set-cookie"]


def to_token_response(tokens: AuthTokens) -> TokenResponse:
    return TokenResponse(access_token=tokens.access_token, expires_in=tokens.expires_in)


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    register_data: UserRegisterRequest,
    use_case: Annotated[
        RegisterUserUseCase, Depends(inject_use_case(container.register_user_use_case))
    ],
) -> UserDetailsResponse:
    """Register a new user account."""
    result = use_case.register_user(
        register_data.first_name,
        register_data.last_name,
        register_data.email,
        register_data.password,
    )
    if isinstance(result, Failure):
        raise to_api_error(result.error)
    return to_user_response(result.value)


@router.post("/login")
def login(
    credentials: LoginRequest,
    response: Response,
    fingerprint: ClientFingerPrint,
    use_case: Annotated[
        LoginUserUseCase, Depends(inject_use_case(container.login_user_use_case))
    ],
) -> TokenResponse:
    """Exchange credentials for an access token and a refresh cookie."""
    result = use_case.login(credentials.email, credentials.password, fingerprint)
    if isinstance(result, Failure):
        raise to_api_error(result.error)
    set_refresh_cookie(response, result.value)
    return to_token_response(result.value)


@router.post("/refresh")
def refresh(
    response: Response,
    fingerprint: ClientFingerPrint,
    use_case: Annotated[
        RefreshTokenUseCase, Depends(inject_use_case(container.refresh_token_use_case))
    ],
    refresh_token: RefreshCookie = None,
) -> TokenResponse:
    """
    Rotate the refresh cookie and issue a new access token.

    Any failure clears the cookie: the session it pointed to is no longer usable.
    """
    if not refresh_token:
        raise to_api_error(
            presentation_error(ErrorKind.UNAUTHENTICATED, "Refresh token required")
        )

    result = use_case.refresh(fingerprint, refresh_token)
    if isinstance(result, Failure):
        api_error = to_api_error(result.error)
        api_error.headers["set-cookie"] = expired_refresh_cookie()
        raise api_error
    set_refresh_cookie(response, result.value)
    return to_token_response(result.value)


@router.post("/logout")
def logout(
    response: Response,
    current_user: CurrentUser,
    fingerprint: ClientFingerPrint,
    use_case: Annotated[
        LogoutUserUseCase, Depends(inject_use_case(container.logout_user_use_case))
    ],
    refresh_token: RefreshCookie = None,
) -> MessageResponse:
    """Revoke the session behind the refresh cookie and clear it."""
    result = use_case.logout_session(current_user.id or "", fingerprint, refresh_token)
    if isinstance(result, Failure):
        raise to_api_error(result.error)
    clear_refresh_cookie(response)
    return MessageResponse(message="Logged out successfully")


@router.post("/logout-all")
def logout_all(
    response: Response,
    current_user: CurrentUser,
    use_case: Annotated[
        LogoutUserUseCase, Depends(inject_use_case(container.logout_user_use_case))
    ],
) -> MessageResponse:
    """Revoke every active session of the current user."""
    result = use_case.logout_all_sessions(current_user.id or "")
    if isinstance(result, Failure):
        raise to_api_error(result.error)
    logger.info(f"Revoked {result.value} sessions for user {current_user.id}")
    clear_refresh_cookie(response)
    return MessageResponse(message="Logged out from all devices successfully")
