"""Use case for resolving a short code."""

import time
from collections.abc import Callable

import structlog

from shortener.application.common.errors import AppError, not_found, timed_out
from shortener.application.common.result import Failure, Result, Success
from shortener.application.shortening.protocols.short_url_repository import (
    ShortUrlRepositoryProtocol,
)
from shortener.domain.shortening.entities.short_url import ShortUrl

logger = structlog.get_logger(__name__)


class ResolveUrlUseCase:
    def __init__(
        self,
        short_url_repository: ShortUrlRepositoryProtocol,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.short_url_repository = short_url_repository
        self.monotonic = monotonic

    def resolve(self, code: str, timeout: float | None = None) -> Result[ShortUrl, AppError]:
        """
        Look up ``code``.

        Args:
            code: Short code taken from the request path
            timeout: Seconds the lookup may take; passed on to the store

        Returns:
            Success with the stored ShortUrl, or Failure with
            RESOURCE_NOT_FOUND, OPERATION_TIMEOUT or the store's own error
        """
        if not code:
            return Failure(not_found("ShortUrl", code))
        if timeout is not None and timeout <= 0:
            return Failure(timed_out("Timed out while resolving a short code", code=code))

        started = self.monotonic()
        result = self.short_url_repository.find_by_code(code, timeout=timeout)
        if isinstance(result, Failure):
            return result

        # A store that ignored the bound still must not answer late
        if timeout is not None and self.monotonic() - started >= timeout:
            logger.warning("resolve_timed_out", code=code, timeout=timeout)
            return Failure(timed_out("Timed out while resolving a short code", code=code))

        if result.value is None:
            return Failure(not_found("ShortUrl", code))
        return Success(result.value)
