"""Identity domain exceptions."""

from shortener.domain.common.exceptions import DomainError


class InvalidEmailError(DomainError):
    code = "INVALID_EMAIL"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid Email: {reason}")


class PasswordTooShortError(DomainError):
    code = "PASSWORD_TOO_SHORT"

    def __init__(self, min_length: int) -> None:
        super().__init__(
            f"Password must be at least {min_length} characters long", {"min_length": min_length}
        )


class PasswordTooLongError(DomainError):
    code = "PASSWORD_TOO_LONG"

    def __init__(self, max_bytes: int) -> None:
        super().__init__(f"Password cannot exceed {max_bytes} bytes", {"max_bytes": max_bytes})


class PasswordTooWeakError(DomainError):
    code = "PASSWORD_TOO_WEAK"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Password too weak: {reason}")


class InvalidRefreshSecretError(DomainError):
    code = "INVALID_REFRESH_SECRET"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid refresh secret: {reason}")


class SessionNotActiveError(DomainError):
    """Raised when rotating a token on a session that has already ended."""

    code = "SESSION_NOT_ACTIVE"

    def __init__(self) -> None:
        super().__init__("Cannot rotate token on non-active session")


class NoActiveRefreshTokenError(DomainError):
    """Raised when an active session has no active refresh token left."""

    code = "NO_ACTIVE_REFRESH_TOKEN"

    def __init__(self) -> None:
        super().__init__("No active token found for session")


class SessionExpiredError(DomainError):
    code = "SESSION_EXPIRED"

    def __init__(self) -> None:
        super().__init__("Cannot rotate token on expired session")


class RefreshTokenReuseDetectedError(DomainError):
    """Raised when a superseded refresh token is presented again."""

    code = "REFRESH_TOKEN_REUSE_DETECTED"

    def __init__(self) -> None:
        super().__init__("Refresh token reuse detected")
