"""Digest value object."""

from dataclasses import dataclass

from shortener.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Digest(ValueObject):
    """Keyed hash of a secret together with the algorithm that produced it."""

    value: bytes
    algorithm: str
