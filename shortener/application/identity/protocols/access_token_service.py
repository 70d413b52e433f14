from typing import Protocol


class AccessTokenServiceProtocol(Protocol):
    @property
    def expires_in(self) -> int:
        """Lifetime of issued tokens in seconds."""
        ...

    def issue(self, user_id: str) -> str: ...

    def verify(self, token: str) -> str | None:
        """Return the user id carried by a valid token, None otherwise."""
        ...
