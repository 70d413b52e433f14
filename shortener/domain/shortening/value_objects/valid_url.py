"""ValidUrl value object."""

from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from shortener.domain.common.value_object import ValueObject
from shortener.domain.shortening.exceptions import InvalidUrlError

ALLOWED_SCHEMES = frozenset({"http", "https"})


def to_ascii_url(url: str) -> str:
    """
    Return ``url`` with an internationalised host converted to IDNA.

    Userinfo, port, path and query are left untouched; HTTP clients
    percent-encode those themselves.

    Raises:
        UnicodeError: If the host is not a valid internationalised domain name
    """
    parts = urlsplit(url)
    userinfo, at, hostport = parts.netloc.rpartition("@")
    if hostport.isascii():
        return url
    host, colon, port = hostport.partition(":")
    ascii_host = host.encode("idna").decode("ascii")
    return urlunsplit(parts._replace(netloc=f"{userinfo}{at}{ascii_host}{colon}{port}"))


@dataclass(frozen=True)
class ValidUrl(ValueObject):
    """
    An absolute http or https URL with a host.

    The stored value is the input with surrounding whitespace removed;
    no other normalisation is applied, so resolving a code returns exactly
    what was shortened. Internationalised hosts must be IDNA-encodable.
    """

    value: str

    def __post_init__(self) -> None:
        value = self.value.strip() if isinstance(self.value, str) else ""
        if not value:
            raise InvalidUrlError(self.value, "Url cannot be empty")
        if any(char.isspace() for char in value):
            raise InvalidUrlError(value, "Url cannot contain whitespace")

        try:
            parts = urlsplit(value)
            # Accessing port validates it
            _ = parts.port
        except ValueError as e:
            raise InvalidUrlError(value, str(e)) from e

        if parts.scheme.lower() not in ALLOWED_SCHEMES:
            raise InvalidUrlError(value, "Must Start With http or https")
        if not parts.hostname:
            raise InvalidUrlError(value, "Url must have a host")
        try:
            to_ascii_url(value)
        except UnicodeError as e:
            raise InvalidUrlError(value, "Url host is not a valid domain name") from e

        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value
