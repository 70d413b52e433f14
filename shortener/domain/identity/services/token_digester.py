from typing import Protocol

from shortener.domain.identity.value_objects.digest import Digest


class TokenDigester(Protocol):
    """Computes and checks keyed digests of refresh secrets."""

    def digest(self, plain: bytes) -> Digest: ...

    def verify(self, plain: bytes, digest: Digest) -> bool: ...
