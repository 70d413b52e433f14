"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends, Header, Request
from fastapi.security import OAuth2PasswordBearer

from shortener.application.common.errors import (
    AppError,
    ErrorKind,
    application_error,
    presentation_error,
)
from shortener.application.common.result import Failure
from shortener.application.identity.dtos import FingerPrint
from shortener.application.identity.use_cases.get_user_by_id_use_case import GetUserByIdUseCase
from shortener.core import container
from shortener.domain.identity.entities.user import User
from shortener.infrastructure.common.di import inject_use_case
from shortener.infrastructure.common.error_mapping import to_api_error

DEFAULT_CLIENT_ID = "web"

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login", auto_error=False)


def get_fingerprint(
    request: Request,
    x_client_id: Annotated[str | None, Header()] = None,
    user_agent: Annotated[str | None, Header()] = None,
) -> FingerPrint:
    """Identify the calling client; sessions are bound to ``client_id``."""
    return FingerPrint(
        client_id=x_client_id or DEFAULT_CLIENT_ID,
        ip=request.client.host if request.client else None,
        user_agent=user_agent,
    )


def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    use_case: Annotated[
        GetUserByIdUseCase, Depends(inject_use_case(container.get_user_by_id_use_case))
    ],
) -> User:
    """
    Get the current authenticated user from the access token.

    Raises:
        ApiError: UNAUTHENTICATED without a bearer token, INVALID_ACCESS_TOKEN
            when the token is invalid or its user no longer exists
    """
    if not token:
        raise to_api_error(presentation_error(ErrorKind.UNAUTHENTICATED, "Not authenticated"))

    user_id = container.access_token_service().verify(token)
    if user_id is None:
        raise to_api_error(invalid_access_token())

    result = use_case.get_user(user_id)
    if isinstance(result, Failure):
        if result.error.kind == ErrorKind.RESOURCE_NOT_FOUND:
            raise to_api_error(invalid_access_token())
        raise to_api_error(result.error)
    return result.value


def invalid_access_token() -> AppError:
    return application_error(ErrorKind.INVALID_ACCESS_TOKEN, "Could not validate credentials")


CurrentUser = Annotated[User, Depends(get_current_user)]
ClientFingerPrint = Annotated[FingerPrint, Depends(get_fingerprint)]
