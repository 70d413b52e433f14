from typing import Protocol

from shortener.application.common.errors import AppError
from shortener.application.common.result import Result
from shortener.domain.identity.entities.user import User
from shortener.domain.identity.value_objects.email import Email


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: str) -> Result[User | None, AppError]: ...

    def find_by_email(self, email: Email) -> Result[User | None, AppError]: ...

    def save(self, user: User) -> Result[User, AppError]:
        """Insert or update; EMAIL_ALREADY_EXISTS when the email is taken."""
        ...
