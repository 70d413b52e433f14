"""DTOs for identity use cases."""

from dataclasses import dataclass
from datetime import datetime

from shortener.domain.identity.value_objects.plain_refresh_secret import PlainRefreshSecret


@dataclass(frozen=True)
class FingerPrint:
    """What the API knows about the calling client."""

    client_id: str
    ip: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True)
class AuthTokens:
    """Credentials handed back by login and refresh."""

    access_token: str
    expires_in: int
    refresh_secret: PlainRefreshSecret
    session_expires_at: datetime
