"""Refresh secret value object."""

from dataclasses import dataclass, field

from shortener.domain.common.value_object import ValueObject
from shortener.domain.identity.exceptions import InvalidRefreshSecretError

MIN_SECRET_BYTES = 16
MAX_SECRET_BYTES = 32


@dataclass(frozen=True)
class PlainRefreshSecret(ValueObject):
    """Raw refresh secret bytes as handed to (or presented by) the client."""

    value: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            raise InvalidRefreshSecretError("secret must be bytes")
        if not MIN_SECRET_BYTES <= len(self.value) <= MAX_SECRET_BYTES:
            raise InvalidRefreshSecretError(
                f"secret must be between {MIN_SECRET_BYTES} and {MAX_SECRET_BYTES} bytes"
            )

    @classmethod
    def from_hex(cls, value: str) -> "PlainRefreshSecret":
        try:
            raw = bytes.fromhex(value)
        except ValueError as e:
            raise InvalidRefreshSecretError("secret is not valid hex") from e
        return cls(raw)

    def to_hex(self) -> str:
        return self.value.hex()

    def __repr__(self) -> str:
        return "PlainRefreshSecret(***)"
