"""Access token creation and verification service."""

import uuid
from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError

ALGORITHM = "HS256"


class JwtAccessTokenService:
    """Issues short-lived HS256 access tokens carrying the user id in ``sub``."""

    def __init__(
        self,
        secret_key: str,
        expire_minutes: int,
        issuer: str,
        audience: str,
    ) -> None:
        self.secret_key = secret_key
        self.expire_minutes = expire_minutes
        self.issuer = issuer
        self.audience = audience

    @property
    def expires_in(self) -> int:
        return self.expire_minutes * 60

    def issue(self, user_id: str) -> str:
        """Create an access token for a user."""
        now = datetime.now(UTC)
        to_encode = {
            "sub": user_id,
            "iat": now,
            "exp": now + timedelta(minutes=self.expire_minutes),
            "iss": self.issuer,
            "aud": self.audience,
            "jti": str(uuid.uuid4()),
            "type": "access",
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=ALGORITHM)

    def verify(self, token: str) -> str | None:
        """Verify an access token and return the user_id if valid."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[ALGORITHM],
                issuer=self.issuer,
                audience=self.audience,
                options={"require": ["exp", "sub", "iss", "aud"]},
            )
        except InvalidTokenError:
            return None
        if payload.get("type") != "access":
            return None
        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            return None
        return user_id
