"""Tests for the HMAC digester, JWT access tokens and password hashing."""

import hashlib
import hmac
from datetime import UTC, datetime, timedelta

import jwt
import pytest

from shortener.domain.identity.value_objects import Digest
from shortener.infrastructure.identity.auth.hmac_token_digester import (
    HmacTokenDigester,
    UnsupportedHmacAlgorithmError,
)
from shortener.infrastructure.identity.auth.password_service import PasswordService
from shortener.infrastructure.identity.auth.refresh_secret_generator import (
    RandomRefreshSecretGenerator,
)
from shortener.infrastructure.identity.auth.token_service import JwtAccessTokenService

SECRET_KEY = "jwt-test-secret-key-that-is-long-enough"


class TestHmacTokenDigester:
    def test_matches_stdlib_hmac(self) -> None:
        digest = HmacTokenDigester("key").digest(b"plain")

        assert digest.algorithm == "sha256"
        assert digest.value == hmac.new(b"key", b"plain", hashlib.sha256).digest()

    def test_sha512(self) -> None:
        digester = HmacTokenDigester("key", "sha512")
        digest = digester.digest(b"plain")

        assert len(digest.value) == 64
        assert digester.verify(b"plain", digest)

    def test_verify(self) -> None:
        digester = HmacTokenDigester("key")
        digest = digester.digest(b"plain")

        assert digester.verify(b"plain", digest)
        assert not digester.verify(b"other", digest)
        assert not HmacTokenDigester("other-key").verify(b"plain", digest)

    def test_length_mismatch_is_false(self) -> None:
        digester = HmacTokenDigester("key")

        assert not digester.verify(b"plain", Digest(value=b"short", algorithm="sha256"))

    def test_algorithm_mismatch_is_false(self) -> None:
        digest = HmacTokenDigester("key", "sha512").digest(b"plain")

        assert not HmacTokenDigester("key", "sha256").verify(b"plain", digest)

    def test_unsupported_algorithm(self) -> None:
        with pytest.raises(UnsupportedHmacAlgorithmError) as exc_info:
            HmacTokenDigester("key", "md5")

        assert exc_info.value.code == "UNSUPPORTED_HMAC_ALGORITHM"
        assert exc_info.value.algorithm == "md5"


class TestJwtAccessTokenService:
    def _service(self, **overrides: object) -> JwtAccessTokenService:
        options: dict[str, object] = {
            "secret_key": SECRET_KEY,
            "expire_minutes": 10,
            "issuer": "urlShortenerAPI",
            "audience": "urlShortenerAPI",
        }
        options.update(overrides)
        return JwtAccessTokenService(**options)  # type: ignore[arg-type]

    def test_issue_and_verify(self) -> None:
        service = self._service()

        token = service.issue("user-1")

        assert service.verify(token) == "user-1"
        assert service.expires_in == 600

    def test_claims(self) -> None:
        token = self._service().issue("user-1")

        payload = jwt.decode(
            token, SECRET_KEY, algorithms=["HS256"], audience="urlShortenerAPI"
        )

        assert payload["sub"] == "user-1"
        assert payload["iss"] == "urlShortenerAPI"
        assert payload["type"] == "access"
        assert payload["exp"] - payload["iat"] == 600

    def test_wrong_secret(self) -> None:
        token = self._service().issue("user-1")

        other = self._service(secret_key="another-secret-key-that-is-long-enough")

        assert other.verify(token) is None

    def test_wrong_audience(self) -> None:
        token = self._service(audience="someone-else").issue("user-1")

        assert self._service().verify(token) is None

    def test_expired(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "sub": "user-1",
                "iat": now - timedelta(hours=1),
                "exp": now - timedelta(minutes=1),
                "iss": "urlShortenerAPI",
                "aud": "urlShortenerAPI",
                "type": "access",
            },
            SECRET_KEY,
            algorithm="HS256",
        )

        assert self._service().verify(token) is None

    def test_wrong_type(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "sub": "user-1",
                "exp": now + timedelta(minutes=5),
                "iss": "urlShortenerAPI",
                "aud": "urlShortenerAPI",
                "type": "refresh",
            },
            SECRET_KEY,
            algorithm="HS256",
        )

        assert self._service().verify(token) is None

    def test_garbage(self) -> None:
        assert self._service().verify("not.a.jwt") is None


class TestPasswordService:
    def test_hash_and_verify(self) -> None:
        service = PasswordService(pepper="pepper")

        hashed = service.hash_password("Str0ng!Password")

        assert hashed != "Str0ng!Password"
        assert service.verify_password("Str0ng!Password", hashed)
        assert not service.verify_password("Wrong!Password", hashed)

    def test_pepper_is_applied(self) -> None:
        hashed = PasswordService(pepper="one").hash_password("Str0ng!Password")

        assert not PasswordService(pepper="two").verify_password("Str0ng!Password", hashed)

    def test_unknown_hash_format(self) -> None:
        assert not PasswordService().verify_password("Str0ng!Password", "not-a-hash")

    def test_dummy_hash_is_real(self) -> None:
        service = PasswordService()

        assert not service.verify_password("anything", service.get_dummy_hash())


def test_refresh_secret_generator() -> None:
    generator = RandomRefreshSecretGenerator()

    first = generator.generate(16)
    second = generator.generate(32)

    assert len(first.value) == 16
    assert len(second.value) == 32
    assert first != generator.generate(16)
