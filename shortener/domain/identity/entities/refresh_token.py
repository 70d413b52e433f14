"""RefreshToken entity."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import StrEnum

from shortener.domain.common.entity import Entity
from shortener.domain.identity.value_objects.digest import Digest


class RefreshTokenStatus(StrEnum):
    ACTIVE = "active"
    ROTATED = "rotated"
    REVOKED = "revoked"
    EXPIRED = "expired"
    REUSE_DETECTED = "reuse_detected"


@dataclass(eq=False)
class RefreshToken(Entity):
    """
    One link in a session's refresh token chain.

    Only the digest of the secret is kept. At most one token per session is
    ACTIVE; rotating it marks it ROTATED and appends its successor.
    """

    user_id: str
    digest: Digest
    issued_at: datetime
    expires_at: datetime
    status: RefreshTokenStatus = RefreshTokenStatus.ACTIVE
    session_id: str | None = None
    last_used_at: datetime | None = None
    previous_token_id: str | None = None
    ip: str | None = None
    user_agent: str | None = None
    id: str | None = None

    @classmethod
    def fresh(
        cls,
        user_id: str,
        digest: Digest,
        now: datetime,
        ttl: timedelta,
        session_id: str | None = None,
        previous_token_id: str | None = None,
        ip: str | None = None,
        user_agent: str | None = None,
    ) -> "RefreshToken":
        return cls(
            user_id=user_id,
            digest=digest,
            issued_at=now,
            expires_at=now + ttl,
            last_used_at=now,
            session_id=session_id,
            previous_token_id=previous_token_id,
            ip=ip,
            user_agent=user_agent,
        )

    @property
    def is_active(self) -> bool:
        return self.status == RefreshTokenStatus.ACTIVE

    def mark_rotated(self, when: datetime) -> None:
        self.status = RefreshTokenStatus.ROTATED
        self.last_used_at = when

    def mark_revoked(self) -> None:
        self.status = RefreshTokenStatus.REVOKED

    def mark_reused(self) -> None:
        self.status = RefreshTokenStatus.REUSE_DETECTED

    def mark_expired(self) -> None:
        self.status = RefreshTokenStatus.EXPIRED
