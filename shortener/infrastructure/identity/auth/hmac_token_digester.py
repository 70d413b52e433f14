"""HMAC implementation of the token digester port."""

import hashlib
import hmac
from collections.abc import Callable
from typing import Any

from shortener.domain.identity.value_objects.digest import Digest

SUPPORTED_ALGORITHMS: dict[str, Callable[..., Any]] = {
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
}


class UnsupportedHmacAlgorithmError(Exception):
    """Raised at construction when the configured algorithm is not supported."""

    code = "UNSUPPORTED_HMAC_ALGORITHM"

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(
            f"Unsupported HMAC algorithm {algorithm!r}; "
            f"expected one of {', '.join(sorted(SUPPORTED_ALGORITHMS))}"
        )


class HmacTokenDigester:
    """Keyed digests of refresh secrets; only digests are ever stored."""

    def __init__(self, secret: str | bytes, algorithm: str = "sha256") -> None:
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise UnsupportedHmacAlgorithmError(algorithm)
        self.key = secret.encode("utf-8") if isinstance(secret, str) else secret
        self.algorithm = algorithm
        self._digestmod = SUPPORTED_ALGORITHMS[algorithm]

    def digest(self, plain: bytes) -> Digest:
        value = hmac.new(self.key, plain, self._digestmod).digest()
        return Digest(value=value, algorithm=self.algorithm)

    def verify(self, plain: bytes, digest: Digest) -> bool:
        if digest.algorithm != self.algorithm:
            return False
        expected = self.digest(plain).value
        if len(expected) != len(digest.value):
            return False
        return hmac.compare_digest(expected, digest.value)
