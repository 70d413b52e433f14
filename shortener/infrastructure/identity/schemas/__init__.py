"""Identity context schemas."""

from shortener.infrastructure.identity.schemas.auth_schemas import (
    LoginRequest,
    MessageResponse,
    TokenResponse,
)
from shortener.infrastructure.identity.schemas.user_schemas import (
    UserDetailsResponse,
    UserRegisterRequest,
)

__all__ = [
    "LoginRequest",
    "MessageResponse",
    "TokenResponse",
    "UserDetailsResponse",
    "UserRegisterRequest",
]
