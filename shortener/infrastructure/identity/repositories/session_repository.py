"""Repository for Session aggregates and their refresh tokens."""

import logging
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as DbSession
from sqlalchemy.orm import selectinload

from shortener.application.common.errors import AppError, ErrorKind, infrastructure_error
from shortener.application.common.result import Failure, Result, Success
from shortener.domain.identity.entities.session import Session, SessionStatus
from shortener.domain.identity.value_objects.digest import Digest
from shortener.infrastructure.identity.mappers.session_mapper import SessionMapper
from shortener.models import RefreshToken as RefreshTokenORM
from shortener.models import Session as SessionORM

logger = logging.getLogger(__name__)


def storage_failure(action: str, e: SQLAlchemyError | None = None) -> AppError:
    return infrastructure_error(ErrorKind.STORAGE_FAILURE, f"Could not {action} session", cause=e)


class SessionRepository:
    """Repository for Session aggregates."""

    def __init__(self, db: DbSession) -> None:
        self.db = db
        self.mapper = SessionMapper()

    def find_active_by_user_id(self, user_id: str) -> Result[list[Session], AppError]:
        stmt = (
            select(SessionORM)
            .where(
                SessionORM.user_id == user_id,
                SessionORM.status == str(SessionStatus.ACTIVE),
                SessionORM.expires_at > datetime.now(UTC),
            )
            .options(selectinload(SessionORM.tokens))
            .order_by(SessionORM.last_used_at.desc())
        )
        try:
            orm_models = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            return Failure(storage_failure("read", e))
        return Success([self.mapper.to_domain(orm_model) for orm_model in orm_models])

    def find_session_for_refresh(self, digest: Digest) -> Result[Session | None, AppError]:
        stmt = (
            select(SessionORM)
            .join(RefreshTokenORM, RefreshTokenORM.session_id == SessionORM.id)
            .where(
                RefreshTokenORM.digest == digest.value,
                RefreshTokenORM.digest_algorithm == digest.algorithm,
            )
            .options(selectinload(SessionORM.tokens))
        )
        try:
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            return Failure(storage_failure("read", e))
        return Success(self.mapper.to_domain(orm_model) if orm_model else None)

    def save(self, session: Session) -> Result[Session, AppError]:
        """Insert a new session or write back the state of a loaded one."""
        try:
            if session.is_persisted:
                orm_model = self.db.get(SessionORM, session.id)
                if orm_model is None:
                    return Failure(storage_failure(f"find {session.id} to update"))
                self.mapper.to_orm(session, orm_model)
            else:
                orm_model = self.mapper.to_orm(session)
                self.db.add(orm_model)
            self.db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to save session: {e}")
            return Failure(storage_failure("save", e))

        return Success(self.mapper.to_domain(orm_model))
