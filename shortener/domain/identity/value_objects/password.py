"""Password value object."""

import string
import unicodedata
from dataclasses import dataclass, field

from shortener.domain.common.value_object import ValueObject
from shortener.domain.identity.exceptions import (
    PasswordTooLongError,
    PasswordTooShortError,
    PasswordTooWeakError,
)

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 1024


def _is_symbol(char: str) -> bool:
    if char in string.punctuation:
        return True
    # Unicode punctuation (P*) and symbol (S*) categories
    return unicodedata.category(char)[0] in ("P", "S")


@dataclass(frozen=True)
class Password(ValueObject):
    """
    A plain text password that satisfies the strength policy.

    Rules:
    - At least MIN_PASSWORD_LENGTH characters
    - At most MAX_PASSWORD_BYTES bytes once UTF-8 encoded
    - At least one uppercase letter and one punctuation or symbol character
    """

    value: str = field(repr=False)

    def __post_init__(self) -> None:
        value = self.value or ""
        if len(value) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError(MIN_PASSWORD_LENGTH)
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise PasswordTooLongError(MAX_PASSWORD_BYTES)
        if not any(char.isupper() for char in value):
            raise PasswordTooWeakError("must contain an uppercase letter")
        if not any(_is_symbol(char) for char in value):
            raise PasswordTooWeakError("must contain a symbol")

    def __repr__(self) -> str:
        return "Password(***)"
