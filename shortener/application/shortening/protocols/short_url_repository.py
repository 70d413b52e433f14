from typing import Protocol

from shortener.application.common.errors import AppError
from shortener.application.common.result import Result
from shortener.domain.shortening.entities.short_url import ShortUrl


class ShortUrlRepositoryProtocol(Protocol):
    def save(self, short_url: ShortUrl) -> Result[ShortUrl, AppError]:
        """
        Insert a new short URL.

        Fails with DUPLICATE_CODE when the code is taken, IMMUTABLE_CODE when
        asked to overwrite an already persisted record, STORAGE_FAILURE
        otherwise. A failed save leaves nothing behind.
        """
        ...

    def find_by_code(
        self, code: str, timeout: float | None = None
    ) -> Result[ShortUrl | None, AppError]:
        """
        Look up a short URL; None when the code is unknown.

        A lookup cut off after ``timeout`` seconds fails with OPERATION_TIMEOUT.
        """
        ...
