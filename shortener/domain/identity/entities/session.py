"""Session entity."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import StrEnum

from shortener.domain.common.entity import Entity
from shortener.domain.identity.entities.refresh_token import RefreshToken
from shortener.domain.identity.exceptions import (
    NoActiveRefreshTokenError,
    RefreshTokenReuseDetectedError,
    SessionExpiredError,
    SessionNotActiveError,
)
from shortener.domain.identity.services.token_digester import TokenDigester
from shortener.domain.identity.value_objects.digest import Digest
from shortener.domain.identity.value_objects.plain_refresh_secret import PlainRefreshSecret


class SessionStatus(StrEnum):
    ACTIVE = "active"
    REVOKED = "revoked"
    EXPIRED = "expired"
    REUSE_DETECTED = "reuse_detected"


class EndReason(StrEnum):
    LOGOUT = "user_logout"
    LOGOUT_ALL = "global_logout"
    EXPIRED = "expired"
    REUSE_DETECTED = "token_reuse_detected"
    NO_ACTIVE_TOKEN = "no_active_token"


@dataclass(eq=False)
class Session(Entity):
    """
    A logged-in client of one user, refreshed through a chain of tokens.

    Business Rules:
    - A session starts ACTIVE with exactly one ACTIVE refresh token
    - Rotation is only allowed while ACTIVE and before ``expires_at``
    - Presenting anything but the current token ends the session as
      REUSE_DETECTED, since an older token in the chain has leaked
    - Once ended a session never becomes ACTIVE again
    """

    user_id: str
    client_id: str
    expires_at: datetime
    status: SessionStatus = SessionStatus.ACTIVE
    tokens: list[RefreshToken] = field(default_factory=list)
    ip: str | None = None
    user_agent: str | None = None
    last_used_at: datetime | None = None
    ended_at: datetime | None = None
    end_reason: str | None = None
    id: str | None = None

    @classmethod
    def start(
        cls,
        user_id: str,
        client_id: str,
        digest: Digest,
        now: datetime,
        ttl: timedelta,
        ip: str | None = None,
        user_agent: str | None = None,
    ) -> "Session":
        """Open a session whose first refresh token has the given digest."""
        token = RefreshToken.fresh(
            user_id=user_id, digest=digest, now=now, ttl=ttl, ip=ip, user_agent=user_agent
        )
        return cls(
            user_id=user_id,
            client_id=client_id,
            expires_at=now + ttl,
            tokens=[token],
            ip=ip,
            user_agent=user_agent,
            last_used_at=now,
        )

    @property
    def is_active(self) -> bool:
        return self.status == SessionStatus.ACTIVE

    @property
    def active_token(self) -> RefreshToken | None:
        return next((token for token in self.tokens if token.is_active), None)

    def has_active_refresh_token(self) -> bool:
        return self.active_token is not None

    def holds_active_token(self, presented: PlainRefreshSecret, digester: TokenDigester) -> bool:
        """True when ``presented`` is the secret of the current active token."""
        active = self.active_token
        return active is not None and digester.verify(presented.value, active.digest)

    def touch(self, now: datetime) -> None:
        self.last_used_at = now

    def rotate_token(
        self,
        presented: PlainRefreshSecret,
        new_digest: Digest,
        digester: TokenDigester,
        now: datetime,
    ) -> RefreshToken:
        """
        Replace the active refresh token with one for ``new_digest``.

        Every failing branch leaves the session ended, so the caller must
        persist it before reporting the error.

        Returns:
            The newly issued refresh token

        Raises:
            SessionNotActiveError: Session already ended
            NoActiveRefreshTokenError: No token left to rotate (session is revoked)
            SessionExpiredError: Session lifetime is over (session is expired)
            RefreshTokenReuseDetectedError: Presented secret is not the active one
        """
        if not self.is_active:
            raise SessionNotActiveError

        active = self.active_token
        if active is None:
            self.revoke(now, EndReason.NO_ACTIVE_TOKEN)
            raise NoActiveRefreshTokenError

        if self.expires_at <= now:
            self._end(SessionStatus.EXPIRED, now, EndReason.EXPIRED)
            active.mark_revoked()
            raise SessionExpiredError

        if not digester.verify(presented.value, active.digest):
            self._end(SessionStatus.REUSE_DETECTED, now, EndReason.REUSE_DETECTED)
            active.mark_reused()
            raise RefreshTokenReuseDetectedError

        token = RefreshToken.fresh(
            user_id=self.user_id,
            digest=new_digest,
            now=now,
            ttl=self.expires_at - now,
            session_id=self.id,
            previous_token_id=active.id,
            ip=self.ip,
            user_agent=self.user_agent,
        )
        active.mark_rotated(now)
        self.tokens.append(token)
        self.touch(now)
        return token

    def revoke(self, now: datetime, reason: str) -> None:
        """End the session. Revoking an already revoked session is a no-op."""
        if self.status == SessionStatus.REVOKED:
            return
        self._end(SessionStatus.REVOKED, now, reason)
        for token in self.tokens:
            if token.is_active:
                token.mark_revoked()

    def _end(self, status: SessionStatus, now: datetime, reason: str) -> None:
        self.status = status
        self.ended_at = now
        self.end_reason = reason
