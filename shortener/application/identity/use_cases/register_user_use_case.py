"""Use case for user registration."""

import structlog

from shortener.application.common.clock import Clock
from shortener.application.common.errors import AppError, from_domain_exception
from shortener.application.common.result import Failure, Result, Success
from shortener.application.common.unit_of_work import UnitOfWork
from shortener.application.identity.protocols.password_service import PasswordServiceProtocol
from shortener.application.identity.protocols.user_repository import UserRepositoryProtocol
from shortener.domain.common.exceptions import DomainError
from shortener.domain.identity.entities.user import User
from shortener.domain.identity.value_objects.email import Email
from shortener.domain.identity.value_objects.password import Password

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Use case for user registration operations."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        uow: UnitOfWork,
        clock: Clock,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.password_service = password_service
        self.uow = uow
        self.clock = clock

    def register_user(
        self, first_name: str, last_name: str, email: str, password: str
    ) -> Result[User, AppError]:
        """
        Register a new user account.

        Args:
            first_name: Given name
            last_name: Family name
            email: User's email address
            password: User's plain text password (will be hashed)

        Returns:
            Success with the persisted user, or Failure with a validation
            error or EMAIL_ALREADY_EXISTS
        """
        try:
            valid_email = Email(email)
            valid_password = Password(password)
            user = User.create(
                first_name=first_name,
                last_name=last_name,
                email=valid_email,
                password_hash=self.password_service.hash_password(valid_password.value),
                now=self.clock.now(),
            )
        except DomainError as e:
            return Failure(from_domain_exception(e))

        result = self.uow.run(lambda: self.user_repository.save(user))
        if isinstance(result, Success):
            logger.info("user_registered", user_id=result.value.id)
        return result
