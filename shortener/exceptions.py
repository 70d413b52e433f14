"""Exceptions raised by the HTTP layer."""

from shortener.application.common.errors import AppError, ErrorKind


class ApiError(Exception):
    """
    An error on its way to becoming an HTTP response.

    Routers raise it from a Failure; the registered exception handler
    renders ``{code, message}`` with ``status_code``.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        kind: ErrorKind,
        error: AppError | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.kind = kind
        self.error = error
        self.headers = headers or {}
        super().__init__(message)
