from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from shortener.application.common.result import Failure
from shortener.application.shortening.use_cases.resolve_url_use_case import ResolveUrlUseCase
from shortener.config import get_settings
from shortener.core import container
from shortener.domain.shortening.value_objects.valid_url import to_ascii_url
from shortener.infrastructure.common.di import inject_use_case
from shortener.infrastructure.common.error_mapping import to_api_error
from shortener.infrastructure.common.schemas import ErrorResponse

router = APIRouter(tags=["redirect"])


@router.get(
    "/{code}",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
    },
)
def redirect(
    code: str,
    use_case: Annotated[
        ResolveUrlUseCase, Depends(inject_use_case(container.resolve_url_use_case))
    ],
) -> RedirectResponse:
    """
    Redirect to the URL stored under ``code``.

    The Location header carries an IDNA host; Starlette percent-encodes the
    rest of any non-ASCII URL.
    """
    result = use_case.resolve(code, timeout=get_settings().RESOLVE_TIMEOUT_SECONDS)
    if isinstance(result, Failure):
        raise to_api_error(result.error)
    return RedirectResponse(to_ascii_url(result.value.url), status_code=status.HTTP_302_FOUND)
