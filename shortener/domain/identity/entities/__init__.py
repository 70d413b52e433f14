from .refresh_token import RefreshToken, RefreshTokenStatus
from .session import EndReason, Session, SessionStatus
from .user import User

__all__ = [
    "EndReason",
    "RefreshToken",
    "RefreshTokenStatus",
    "Session",
    "SessionStatus",
    "User",
]
