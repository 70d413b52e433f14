"""Tests for RedisShortUrlRepository with an in-memory stand-in client."""

from datetime import timedelta
from unittest.mock import Mock

import redis

from shortener.application.common.errors import ErrorKind
from shortener.application.common.result import Failure, Success
from shortener.domain.shortening.entities.short_url import ShortUrl
from shortener.infrastructure.shortening.repositories import RedisShortUrlRepository
from shortener.infrastructure.shortening.repositories.redis_short_url_repository import key_for


class DictRedis:
    """Implements the two commands the repository uses."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.ttls: dict[str, timedelta | None] = {}

    def set(
        self, name: str, value: str, nx: bool = False, ex: timedelta | None = None
    ) -> bool | None:
        if nx and name in self.values:
            return None
        self.values[name] = value
        self.ttls[name] = ex
        return True

    def get(self, name: str) -> str | None:
        return self.values.get(name)


def make_repository() -> tuple[RedisShortUrlRepository, DictRedis]:
    client = DictRedis()
    return RedisShortUrlRepository(client, anonymous_ttl=timedelta(days=7)), client  # type: ignore[arg-type]


def test_save_and_find() -> None:
    repository, client = make_repository()

    saved = repository.save(ShortUrl(code="aZ3kP9q", url="https://example.com"))

    assert isinstance(saved, Success)
    assert saved.value.id
    assert key_for("aZ3kP9q") == "short_url:aZ3kP9q"
    assert "short_url:aZ3kP9q" in client.values

    found = repository.find_by_code("aZ3kP9q")
    assert isinstance(found, Success)
    assert found.value == saved.value
    assert found.value is not None
    assert found.value.url == "https://example.com"
    assert found.value.created_at == saved.value.created_at


def test_missing_code() -> None:
    repository, _ = make_repository()

    assert repository.find_by_code("missing") == Success(None)


def test_duplicate_code() -> None:
    repository, client = make_repository()
    repository.save(ShortUrl(code="samecod", url="https://one.example"))

    result = repository.save(ShortUrl(code="samecod", url="https://two.example"))

    assert isinstance(result, Failure)
    assert result.error.kind == ErrorKind.DUPLICATE_CODE
    assert "one.example" in client.values["short_url:samecod"]


def test_anonymous_links_expire_owned_links_do_not() -> None:
    repository, client = make_repository()

    repository.save(ShortUrl(code="anon123", url="https://example.com"))
    repository.save(ShortUrl(code="owned12", url="https://example.com", owner_id="user-1"))

    assert client.ttls["short_url:anon123"] == timedelta(days=7)
    assert client.ttls["short_url:owned12"] is None


def test_persisted_entity_is_immutable() -> None:
    repository, _ = make_repository()
    saved = repository.save(ShortUrl(code="aZ3kP9q", url="https://example.com")).unwrap()
    assert saved is not None

    result = repository.save(saved)

    assert isinstance(result, Failure)
    assert result.error.kind == ErrorKind.IMMUTABLE_CODE


def test_redis_errors_are_storage_failures() -> None:
    client = Mock()
    client.set.side_effect = redis.ConnectionError("refused")
    client.get.side_effect = redis.ConnectionError("refused")
    repository = RedisShortUrlRepository(client)

    saved = repository.save(ShortUrl(code="aZ3kP9q", url="https://example.com"))
    found = repository.find_by_code("aZ3kP9q")

    assert isinstance(saved, Failure)
    assert saved.error.kind == ErrorKind.STORAGE_FAILURE
    assert isinstance(saved.error.cause, redis.ConnectionError)
    assert isinstance(found, Failure)
    assert found.error.kind == ErrorKind.STORAGE_FAILURE


def test_redis_timeouts_are_operation_timeouts() -> None:
    client = Mock()
    client.set.side_effect = redis.TimeoutError("Timeout reading from socket")
    client.get.side_effect = redis.TimeoutError("Timeout reading from socket")
    repository = RedisShortUrlRepository(client)

    saved = repository.save(ShortUrl(code="aZ3kP9q", url="https://example.com"))
    found = repository.find_by_code("aZ3kP9q", timeout=2.0)

    assert isinstance(saved, Failure)
    assert saved.error.kind == ErrorKind.OPERATION_TIMEOUT
    assert isinstance(found, Failure)
    assert found.error.kind == ErrorKind.OPERATION_TIMEOUT
    assert found.error.details["code"] == "aZ3kP9q"
    assert isinstance(found.error.cause, redis.TimeoutError)
