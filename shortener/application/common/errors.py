"""
Error values carried by Failure results.

Every failure that crosses a layer boundary is an AppError: a category
(which layer detected it), a machine-readable kind and a human-readable
message. Callers branch on ``error.kind``; the presentation layer maps the
kind to an HTTP status in one table.
"""

from dataclasses import dataclass, field
from enum import StrEnum

from shortener.domain.common.exceptions import DomainError


class ErrorCategory(StrEnum):
    """Layer in which an error originated."""

    DOMAIN = "domain"
    APPLICATION = "application"
    INFRASTRUCTURE = "infrastructure"
    PRESENTATION = "presentation"


class ErrorKind(StrEnum):
    """Machine-readable error codes exposed to API clients."""

    # domain
    INVALID_URL = "INVALID_URL"
    INVALID_CODE = "INVALID_CODE"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_VALUE = "INVALID_VALUE"
    PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"
    PASSWORD_TOO_LONG = "PASSWORD_TOO_LONG"
    PASSWORD_TOO_WEAK = "PASSWORD_TOO_WEAK"
    INVALID_REFRESH_SECRET = "INVALID_REFRESH_SECRET"
    SESSION_NOT_ACTIVE = "SESSION_NOT_ACTIVE"
    NO_ACTIVE_REFRESH_TOKEN = "NO_ACTIVE_REFRESH_TOKEN"
    SESSION_EXPIRED = "SESSION_EXPIRED"
    REFRESH_TOKEN_REUSE_DETECTED = "REFRESH_TOKEN_REUSE_DETECTED"

    # application
    MAX_CODE_GENERATION_ATTEMPTS = "MAX_CODE_GENERATION_ATTEMPTS"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    INVALID_SESSION = "INVALID_SESSION"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_ACCESS_TOKEN = "INVALID_ACCESS_TOKEN"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    OPERATION_TIMEOUT = "OPERATION_TIMEOUT"

    # infrastructure
    UNSUPPORTED_HMAC_ALGORITHM = "UNSUPPORTED_HMAC_ALGORITHM"
    DUPLICATE_CODE = "DUPLICATE_CODE"
    IMMUTABLE_CODE = "IMMUTABLE_CODE"
    STORAGE_FAILURE = "STORAGE_FAILURE"

    # presentation
    REQUEST_VALIDATION = "REQUEST_VALIDATION"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    INTERNAL = "INTERNAL"


@dataclass(frozen=True, kw_only=True)
class AppError:
    """
    A failure travelling through the system as data.

    Attributes:
        category: Layer that detected the failure
        kind: Machine-readable error code
        message: Human-readable message
        details: Optional structured context (safe to log)
        cause: Originating exception, kept for diagnostics only
    """

    category: ErrorCategory
    kind: ErrorKind
    message: str
    details: dict[str, object] = field(default_factory=dict)
    cause: BaseException | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


def domain_error(kind: ErrorKind, message: str, **details: object) -> AppError:
    return AppError(category=ErrorCategory.DOMAIN, kind=kind, message=message, details=details)


def application_error(kind: ErrorKind, message: str, **details: object) -> AppError:
    return AppError(
        category=ErrorCategory.APPLICATION, kind=kind, message=message, details=details
    )


def infrastructure_error(
    kind: ErrorKind, message: str, cause: BaseException | None = None, **details: object
) -> AppError:
    return AppError(
        category=ErrorCategory.INFRASTRUCTURE,
        kind=kind,
        message=message,
        details=details,
        cause=cause,
    )


def presentation_error(kind: ErrorKind, message: str, **details: object) -> AppError:
    return AppError(
        category=ErrorCategory.PRESENTATION, kind=kind, message=message, details=details
    )


def from_domain_exception(exc: DomainError) -> AppError:
    """Convert a raised domain validation error into an AppError."""
    return AppError(
        category=ErrorCategory.DOMAIN,
        kind=ErrorKind(exc.code),
        message=exc.message,
        details=dict(exc.details),
        cause=exc,
    )


def not_found(resource: str, identifier: object) -> AppError:
    return application_error(
        ErrorKind.RESOURCE_NOT_FOUND,
        f"{resource} {identifier} not found",
        resource=resource,
        identifier=identifier,
    )


def timed_out(message: str, **details: object) -> AppError:
    return application_error(ErrorKind.OPERATION_TIMEOUT, message, **details)
