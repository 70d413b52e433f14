"""Shortening domain layer."""

from shortener.domain.shortening.entities.short_url import ShortUrl
from shortener.domain.shortening.exceptions import InvalidCodeError, InvalidUrlError
from shortener.domain.shortening.value_objects.valid_url import ValidUrl

__all__ = [
    "InvalidCodeError",
    "InvalidUrlError",
    "ShortUrl",
    "ValidUrl",
]
