"""Repository for User domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from shortener.application.common.errors import (
    AppError,
    ErrorKind,
    application_error,
    infrastructure_error,
)
from shortener.application.common.result import Failure, Result, Success
from shortener.domain.identity.entities.user import User
from shortener.domain.identity.value_objects.email import Email
from shortener.infrastructure.identity.mappers.user_mapper import UserMapper
from shortener.models import User as UserORM

logger = logging.getLogger(__name__)


def storage_failure(action: str, e: SQLAlchemyError) -> AppError:
    return infrastructure_error(ErrorKind.STORAGE_FAILURE, f"Could not {action} user", cause=e)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: str) -> Result[User | None, AppError]:
        """
        Find a user by ID.

        Returns:
            Success with the user, or None when no such user exists
        """
        stmt = select(UserORM).where(UserORM.id == user_id)
        try:
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            return Failure(storage_failure("read", e))
        return Success(self.mapper.to_domain(orm_model) if orm_model else None)

    def find_by_email(self, email: Email) -> Result[User | None, AppError]:
        """
        Find a user by email.

        Returns:
            Success with the user, or None when no such user exists
        """
        stmt = select(UserORM).where(UserORM.email == email.value)
        try:
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            return Failure(storage_failure("read", e))
        return Success(self.mapper.to_domain(orm_model) if orm_model else None)

    def save(self, user: User) -> Result[User, AppError]:
        """
        Save a user entity.

        Returns:
            Success with the saved user carrying its database id, or Failure
            with EMAIL_ALREADY_EXISTS or STORAGE_FAILURE
        """
        try:
            with self.db.begin_nested():
                if user.is_persisted:
                    orm_model = self.db.get(UserORM, user.id)
                    if orm_model is None:
                        return Failure(
                            infrastructure_error(
                                ErrorKind.STORAGE_FAILURE, f"User {user.id} does not exist"
                            )
                        )
                    self.mapper.to_orm(user, orm_model)
                else:
                    orm_model = self.mapper.to_orm(user)
                    self.db.add(orm_model)
        except IntegrityError as e:
            # Check if it's a unique constraint violation on email
            if "email" in str(e.orig):
                logger.info("Registration rejected: email already registered")
                return Failure(
                    application_error(
                        ErrorKind.EMAIL_ALREADY_EXISTS,
                        f"Email {user.email} is already registered",
                    )
                )
            return Failure(storage_failure("save", e))
        except SQLAlchemyError as e:
            logger.error(f"Failed to save user: {e}")
            return Failure(storage_failure("save", e))

        logger.info(f"Saved user {orm_model.id}")
        return Success(self.mapper.to_domain(orm_model))
