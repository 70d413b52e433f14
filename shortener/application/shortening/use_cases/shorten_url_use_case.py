"""Use case for turning a long URL into a short code."""

import time
from collections.abc import Callable

import structlog

from shortener.application.common.errors import (
    AppError,
    ErrorKind,
    application_error,
    from_domain_exception,
    timed_out,
)
from shortener.application.common.result import Failure, Result, Success
from shortener.application.common.unit_of_work import UnitOfWork
from shortener.application.shortening.protocols.code_generator import CodeGeneratorProtocol
from shortener.application.shortening.protocols.short_url_repository import (
    ShortUrlRepositoryProtocol,
)
from shortener.domain.common.exceptions import DomainError
from shortener.domain.shortening.entities.short_url import ShortUrl
from shortener.domain.shortening.value_objects.valid_url import ValidUrl

logger = structlog.get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 8


class ShortenUrlUseCase:
    """
    Validates a URL, draws a code and stores the mapping.

    Uniqueness is decided by the store's atomic insert, never by a prior
    lookup: on DUPLICATE_CODE a fresh code is drawn and the insert retried,
    up to ``max_attempts`` inserts in total.
    """

    def __init__(
        self,
        short_url_repository: ShortUrlRepositoryProtocol,
        uow: UnitOfWork,
        code_generator: CodeGeneratorProtocol,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize use case with dependencies."""
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.short_url_repository = short_url_repository
        self.uow = uow
        self.code_generator = code_generator
        self.max_attempts = max_attempts
        self.monotonic = monotonic

    def shorten(
        self, raw_url: str, owner_id: str | None = None, timeout: float | None = None
    ) -> Result[ShortUrl, AppError]:
        """
        Shorten ``raw_url``.

        Args:
            raw_url: URL as received from the caller
            owner_id: Id of the authenticated owner, None for anonymous links
            timeout: Seconds after which no further attempt is started

        Returns:
            Success with the persisted ShortUrl, or Failure with
            INVALID_URL, MAX_CODE_GENERATION_ATTEMPTS, OPERATION_TIMEOUT or
            the repository's own non-collision error
        """
        try:
            url = ValidUrl(raw_url)
        except DomainError as e:
            return Failure(from_domain_exception(e))

        deadline = None if timeout is None else self.monotonic() + timeout
        return self.uow.run(lambda: self._save_with_retry(url, owner_id, deadline))

    def _save_with_retry(
        self, url: ValidUrl, owner_id: str | None, deadline: float | None
    ) -> Result[ShortUrl, AppError]:
        for attempt in range(1, self.max_attempts + 1):
            if deadline is not None and self.monotonic() >= deadline:
                logger.warning("shorten_timed_out", attempts=attempt - 1)
                return Failure(
                    timed_out("Timed out while generating a short code", attempts=attempt - 1)
                )

            try:
                short_url = ShortUrl.create(self.code_generator.generate(), url, owner_id)
            except DomainError as e:
                return Failure(from_domain_exception(e))

            result = self.short_url_repository.save(short_url)
            if isinstance(result, Success):
                logger.info(
                    "short_url_created",
                    code=result.value.code,
                    owner_id=owner_id,
                    attempts=attempt,
                )
                return result

            if result.error.kind != ErrorKind.DUPLICATE_CODE:
                return result

            logger.warning("short_code_collision", code=short_url.code, attempt=attempt)

        logger.error("short_code_attempts_exhausted", attempts=self.max_attempts)
        return Failure(
            application_error(
                ErrorKind.MAX_CODE_GENERATION_ATTEMPTS,
                f"Could not generate a unique code after {self.max_attempts} attempts",
                attempts=self.max_attempts,
            )
        )
