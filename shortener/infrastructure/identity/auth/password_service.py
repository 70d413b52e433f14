"""Password hashing and verification service."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

password_hash = PasswordHash.recommended()

# Generate a real hash so timing-attack prevention in login works correctly.
# A fake string would cause pwdlib to raise UnknownHashError.
DUMMY_HASH = password_hash.hash("dummy_password_for_timing_attack_prevention")


class PasswordService:
    """Argon2 hashing with an application-wide pepper."""

    def __init__(self, pepper: str = "") -> None:
        self.pepper = pepper

    def hash_password(self, plain_password: str) -> str:
        """Hash a plain password for storage with pepper."""
        return password_hash.hash(plain_password + self.pepper)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a plain password against a hashed password."""
        try:
            return password_hash.verify(plain_password + self.pepper, hashed_password)
        except UnknownHashError:
            return False

    def get_dummy_hash(self) -> str:
        """Get a dummy hash for timing attack prevention."""
        return DUMMY_HASH
