from shortener.domain.identity.services.token_digester import TokenDigester

from .access_token_service import AccessTokenServiceProtocol
from .password_service import PasswordServiceProtocol
from .refresh_secret_generator import RefreshSecretGeneratorProtocol
from .session_repository import SessionRepositoryProtocol
from .user_repository import UserRepositoryProtocol

__all__ = [
    "AccessTokenServiceProtocol",
    "PasswordServiceProtocol",
    "RefreshSecretGeneratorProtocol",
    "SessionRepositoryProtocol",
    "TokenDigester",
    "UserRepositoryProtocol",
]
