"""Repository for ShortUrl domain entities."""

import logging

from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from shortener.application.common.errors import AppError, ErrorKind, infrastructure_error
from shortener.application.common.result import Failure, Result, Success
from shortener.domain.shortening.entities.short_url import ShortUrl
from shortener.infrastructure.shortening.mappers.short_url_mapper import ShortUrlMapper
from shortener.models import ShortUrl as ShortUrlORM

logger = logging.getLogger(__name__)

# Markers of the code uniqueness violation in SQLite and PostgreSQL messages
CODE_CONSTRAINT_MARKERS = ("uq_short_urls_code", "short_urls.code")

# SQLSTATE raised by PostgreSQL when statement_timeout cancels a query
QUERY_CANCELED = "57014"


def is_code_conflict(error: IntegrityError) -> bool:
    message = str(error.orig)
    return any(marker in message for marker in CODE_CONSTRAINT_MARKERS)


def is_statement_timeout(error: SQLAlchemyError) -> bool:
    return getattr(getattr(error, "orig", None), "pgcode", None) == QUERY_CANCELED


class ShortUrlRepository:
    """Repository for ShortUrl domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ShortUrlMapper()

    def save(self, short_url: ShortUrl) -> Result[ShortUrl, AppError]:
        """
        Insert a short URL inside a SAVEPOINT.

        A unique violation on ``code`` rolls back only the savepoint, so the
        caller's transaction stays usable for the next attempt.

        Args:
            short_url: Transient entity to insert

        Returns:
            Success with the persisted entity, or Failure with
            DUPLICATE_CODE, IMMUTABLE_CODE or STORAGE_FAILURE
        """
        if short_url.is_persisted:
            return Failure(
                infrastructure_error(
                    ErrorKind.IMMUTABLE_CODE,
                    f"Short URL {short_url.id} is already stored and cannot change",
                    code=short_url.code,
                )
            )

        orm_model = self.mapper.to_orm(short_url)
        try:
            with self.db.begin_nested():
                self.db.add(orm_model)
        except IntegrityError as e:
            if is_code_conflict(e):
                return Failure(
                    infrastructure_error(
                        ErrorKind.DUPLICATE_CODE,
                        f"Code {short_url.code} is already taken",
                        cause=e,
                        code=short_url.code,
                    )
                )
            logger.error(f"Integrity error while saving short URL: {e.orig}")
            return Failure(
                infrastructure_error(ErrorKind.STORAGE_FAILURE, "Could not save short URL", cause=e)
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to save short URL: {e}")
            return Failure(
                infrastructure_error(ErrorKind.STORAGE_FAILURE, "Could not save short URL", cause=e)
            )

        return Success(self.mapper.to_domain(orm_model))

    def find_by_code(
        self, code: str, timeout: float | None = None
    ) -> Result[ShortUrl | None, AppError]:
        """
        Find a short URL by code.

        On PostgreSQL ``timeout`` becomes a ``statement_timeout`` for the rest
        of the current transaction. Other dialects run the query unbounded.

        Returns:
            Success with the entity or None, Failure OPERATION_TIMEOUT when the
            query is cancelled, STORAGE_FAILURE on other errors
        """
        stmt = select(ShortUrlORM).where(ShortUrlORM.code == code)
        try:
            if timeout is not None:
                self._limit_statement_time(timeout)
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            if is_statement_timeout(e):
                logger.warning(f"Lookup of short URL {code} exceeded {timeout}s")
                return Failure(
                    infrastructure_error(
                        ErrorKind.OPERATION_TIMEOUT,
                        "Timed out while reading short URL",
                        cause=e,
                        code=code,
                    )
                )
            logger.error(f"Failed to look up short URL {code}: {e}")
            return Failure(
                infrastructure_error(ErrorKind.STORAGE_FAILURE, "Could not read short URL", cause=e)
            )
        return Success(self.mapper.to_domain(orm_model) if orm_model else None)

    def _limit_statement_time(self, timeout: float) -> None:
        if self.db.get_bind().dialect.name != "postgresql":
            return
        milliseconds = max(int(timeout * 1000), 1)
        # SET does not take bind parameters
        self.db.execute(text(f"SET LOCAL statement_timeout = {milliseconds}"))
