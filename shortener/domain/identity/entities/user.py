"""User entity for identity management."""

from dataclasses import dataclass
from datetime import datetime

from shortener.domain.common.entity import Entity
from shortener.domain.common.exceptions import ValidationError
from shortener.domain.identity.value_objects.email import Email


@dataclass(eq=False)
class User(Entity):
    """
    User entity representing an account that can own short URLs.

    Business Rules:
    - Email must be unique (enforced at repository level)
    - First and last name are non-empty
    - Password hashing is an infrastructure concern (never stored as plain text)
    """

    first_name: str
    last_name: str
    email: Email
    password_hash: str
    password_updated_at: datetime
    id: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.first_name or not self.first_name.strip():
            raise ValidationError("First name cannot be empty", field="first_name")
        if not self.last_name or not self.last_name.strip():
            raise ValidationError("Last name cannot be empty", field="last_name")
        if not self.password_hash:
            raise ValidationError("Password hash cannot be empty", field="password_hash")

    def change_password_hash(self, password_hash: str, now: datetime) -> None:
        """
        Replace the stored hash.

        Raises:
            ValidationError: If the hash is empty or ``now`` is not later
                than the previous update
        """
        if not password_hash:
            raise ValidationError("Password hash cannot be empty", field="password_hash")
        if now <= self.password_updated_at:
            raise ValidationError(
                "New password update time must be later than the current one",
                field="password_updated_at",
            )
        self.password_hash = password_hash
        self.password_updated_at = now

    @classmethod
    def create(
        cls, first_name: str, last_name: str, email: Email, password_hash: str, now: datetime
    ) -> "User":
        """
        Create a new, not yet persisted user.

        Raises:
            ValidationError: If a required field is empty
        """
        return cls(
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            email=email,
            password_hash=password_hash,
            password_updated_at=now,
        )
