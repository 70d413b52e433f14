"""Redis-backed repository for ShortUrl domain entities."""

import json
import logging
import uuid
from datetime import UTC, datetime, timedelta

import redis

from shortener.application.common.errors import AppError, ErrorKind, infrastructure_error
from shortener.application.common.result import Failure, Result, Success
from shortener.domain.shortening.entities.short_url import ShortUrl

logger = logging.getLogger(__name__)

KEY_PREFIX = "short_url:"


def key_for(code: str) -> str:
    return f"{KEY_PREFIX}{code}"


def timeout_error(message: str, cause: redis.TimeoutError, code: str) -> AppError:
    return infrastructure_error(ErrorKind.OPERATION_TIMEOUT, message, cause=cause, code=code)


class RedisShortUrlRepository:
    """
    Stores each short URL as a JSON document under ``short_url:<code>``.

    Uniqueness comes from ``SET NX``. Anonymous links expire after
    ``anonymous_ttl``; owned links are kept indefinitely. Writes are
    immediate and do not take part in the SQL unit of work. Every command is
    bounded by the client's ``socket_timeout``; running out of it fails
    with OPERATION_TIMEOUT.
    """

    def __init__(self, client: redis.Redis, anonymous_ttl: timedelta | None = None) -> None:
        self.client = client
        self.anonymous_ttl = anonymous_ttl

    def save(self, short_url: ShortUrl) -> Result[ShortUrl, AppError]:
        if short_url.is_persisted:
            return Failure(
                infrastructure_error(
                    ErrorKind.IMMUTABLE_CODE,
                    f"Short URL {short_url.id} is already stored and cannot change",
                    code=short_url.code,
                )
            )

        stored = ShortUrl(
            id=str(uuid.uuid4()),
            code=short_url.code,
            url=short_url.url,
            owner_id=short_url.owner_id,
            created_at=datetime.now(UTC),
        )
        ttl = self.anonymous_ttl if stored.is_anonymous else None
        try:
            created = self.client.set(key_for(stored.code), self._dump(stored), nx=True, ex=ttl)
        except redis.TimeoutError as e:
            logger.warning(f"Redis set timed out: {e}")
            return Failure(timeout_error("Timed out while saving short URL", e, stored.code))
        except redis.RedisError as e:
            logger.error(f"Redis set error: {e}")
            return Failure(
                infrastructure_error(ErrorKind.STORAGE_FAILURE, "Could not save short URL", cause=e)
            )

        if not created:
            return Failure(
                infrastructure_error(
                    ErrorKind.DUPLICATE_CODE,
                    f"Code {stored.code} is already taken",
                    code=stored.code,
                )
            )
        return Success(stored)

    def find_by_code(
        self, code: str, timeout: float | None = None
    ) -> Result[ShortUrl | None, AppError]:
        """
        Look up ``code``.

        redis-py has no per-command timeout: the client's ``socket_timeout``
        bounds the call and the caller enforces ``timeout`` on the result.
        """
        try:
            raw = self.client.get(key_for(code))
        except redis.TimeoutError as e:
            logger.warning(f"Redis get timed out: {e}")
            return Failure(timeout_error("Timed out while reading short URL", e, code))
        except redis.RedisError as e:
            logger.error(f"Redis get error: {e}")
            return Failure(
                infrastructure_error(ErrorKind.STORAGE_FAILURE, "Could not read short URL", cause=e)
            )
        if raw is None:
            return Success(None)
        return Success(self._load(raw))

    def _dump(self, short_url: ShortUrl) -> str:
        return json.dumps(
            {
                "id": short_url.id,
                "code": short_url.code,
                "url": short_url.url,
                "owner_id": short_url.owner_id,
                "created_at": short_url.created_at.isoformat() if short_url.created_at else None,
            }
        )

    def _load(self, raw: str | bytes) -> ShortUrl:
        data = json.loads(raw)
        created_at = data.get("created_at")
        return ShortUrl(
            id=data["id"],
            code=data["code"],
            url=data["url"],
            owner_id=data.get("owner_id"),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )
