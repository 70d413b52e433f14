"""Email value object."""

import re
import unicodedata
from dataclasses import dataclass

from shortener.domain.common.value_object import ValueObject
from shortener.domain.identity.exceptions import InvalidEmailError

MAX_EMAIL_LENGTH = 100
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True)
class Email(ValueObject):
    """An email address, NFC-normalised and trimmed."""

    value: str

    def __post_init__(self) -> None:
        normalized = unicodedata.normalize("NFC", self.value or "").strip()
        if not normalized:
            raise InvalidEmailError("Email cannot be empty")
        if len(normalized) > MAX_EMAIL_LENGTH:
            raise InvalidEmailError(f"Email cannot exceed {MAX_EMAIL_LENGTH} characters")
        if not EMAIL_PATTERN.match(normalized):
            raise InvalidEmailError("Email format is not valid")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
