from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status

from shortener.application.common.result import Failure
from shortener.application.shortening.use_cases.shorten_url_use_case import ShortenUrlUseCase
from shortener.config import get_settings
from shortener.core import container
from shortener.domain.shortening.entities.short_url import ShortUrl
from shortener.infrastructure.common.di import inject_use_case
from shortener.infrastructure.common.error_mapping import to_api_error
from shortener.infrastructure.common.schemas import ErrorResponse
from shortener.infrastructure.identity.dependencies import CurrentUser
from shortener.infrastructure.shortening.schemas import ShortenRequest, ShortUrlResponse

logger = structlog.get_logger(__name__)
router = APIRouter(tags=["shortener"])

ShortenUseCase = Annotated[
    ShortenUrlUseCase, Depends(inject_use_case(container.shorten_url_use_case))
]

ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
}


def to_response(short_url: ShortUrl) -> ShortUrlResponse:
    settings = get_settings()
    return ShortUrlResponse(
        id=short_url.id or "",
        code=short_url.code,
        url=short_url.url,
        short_url=f"{settings.BASE_URL}/{short_url.code}",
    )


def shorten_or_raise(
    use_case: ShortenUrlUseCase, url: str, owner_id: str | None = None
) -> ShortUrlResponse:
    result = use_case.shorten(
        url, owner_id=owner_id, timeout=get_settings().SHORTEN_TIMEOUT_SECONDS
    )
    if isinstance(result, Failure):
        raise to_api_error(result.error)
    return to_response(result.value)


@router.post(
    "/shorten",
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def shorten(body: ShortenRequest, use_case: ShortenUseCase) -> ShortUrlResponse:
    """Create an anonymous short link."""
    return shorten_or_raise(use_case, body.url)


@router.post(
    "/me/shorten",
    status_code=status.HTTP_201_CREATED,
    responses={**ERROR_RESPONSES, status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}},
)
def shorten_for_current_user(
    body: ShortenRequest, current_user: CurrentUser, use_case: ShortenUseCase
) -> ShortUrlResponse:
    """Create a short link owned by the authenticated user."""
    return shorten_or_raise(use_case, body.url, owner_id=current_user.id)
