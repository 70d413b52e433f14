"""Use case for getting a user by ID (used internally by dependency injection)."""

from shortener.application.common.errors import AppError, not_found
from shortener.application.common.result import Failure, Result, Success
from shortener.application.identity.protocols.user_repository import UserRepositoryProtocol
from shortener.domain.identity.entities.user import User


class GetUserByIdUseCase:
    """Use case for getting a user by ID (used internally by dependency injection)."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository

    def get_user(self, user_id: str) -> Result[User, AppError]:
        """
        Get a user by ID.

        Returns:
            Success with the user, or Failure RESOURCE_NOT_FOUND
        """
        found = self.user_repository.find_by_id(user_id)
        if isinstance(found, Failure):
            return found
        if found.value is None:
            return Failure(not_found("User", user_id))
        return Success(found.value)
