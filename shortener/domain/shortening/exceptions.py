"""Shortening domain exceptions."""

from shortener.domain.common.exceptions import DomainError


class InvalidUrlError(DomainError):
    """Raised when a string is not an absolute http(s) URL."""

    code = "INVALID_URL"

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Invalid Url: {reason}", {"url": url})
        self.url = url
        self.reason = reason


class InvalidCodeError(DomainError):
    """Raised when a short code is empty or malformed."""

    code = "INVALID_CODE"

    def __init__(self, code: str, reason: str = "Code cannot be empty") -> None:
        super().__init__(f"Invalid Code: {reason}", {"code": code})
        self.short_code = code
