"""Identity domain layer."""

from shortener.domain.identity.entities.refresh_token import RefreshToken, RefreshTokenStatus
from shortener.domain.identity.entities.session import EndReason, Session, SessionStatus
from shortener.domain.identity.entities.user import User
from shortener.domain.identity.exceptions import (
    InvalidEmailError,
    InvalidRefreshSecretError,
    NoActiveRefreshTokenError,
    PasswordTooLongError,
    PasswordTooShortError,
    PasswordTooWeakError,
    RefreshTokenReuseDetectedError,
    SessionExpiredError,
    SessionNotActiveError,
)

__all__ = [
    "EndReason",
    "InvalidEmailError",
    "InvalidRefreshSecretError",
    "NoActiveRefreshTokenError",
    "PasswordTooLongError",
    "PasswordTooShortError",
    "PasswordTooWeakError",
    "RefreshToken",
    "RefreshTokenReuseDetectedError",
    "RefreshTokenStatus",
    "Session",
    "SessionExpiredError",
    "SessionNotActiveError",
    "SessionStatus",
    "User",
]
