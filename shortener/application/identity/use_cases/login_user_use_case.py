"""Use case for authenticating a user and opening a session."""

from datetime import timedelta

import structlog

from shortener.application.common.clock import Clock
from shortener.application.common.errors import AppError, ErrorKind, application_error
from shortener.application.common.result import Failure, Result, Success
from shortener.application.common.unit_of_work import UnitOfWork
from shortener.application.identity.dtos import AuthTokens, FingerPrint
from shortener.application.identity.protocols.access_token_service import (
    AccessTokenServiceProtocol,
)
from shortener.application.identity.protocols.password_service import PasswordServiceProtocol
from shortener.application.identity.protocols.refresh_secret_generator import (
    RefreshSecretGeneratorProtocol,
)
from shortener.application.identity.protocols.session_repository import (
    SessionRepositoryProtocol,
)
from shortener.application.identity.protocols.user_repository import UserRepositoryProtocol
from shortener.domain.identity.entities.session import Session
from shortener.domain.identity.exceptions import InvalidEmailError
from shortener.domain.identity.services.token_digester import TokenDigester
from shortener.domain.identity.value_objects.email import Email

logger = structlog.get_logger(__name__)


def invalid_credentials() -> AppError:
    return application_error(ErrorKind.INVALID_CREDENTIALS, "Invalid email or password")


class LoginUserUseCase:
    """Use case for authenticating a user with email and password."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        session_repository: SessionRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        access_token_service: AccessTokenServiceProtocol,
        token_digester: TokenDigester,
        refresh_secret_generator: RefreshSecretGeneratorProtocol,
        uow: UnitOfWork,
        clock: Clock,
        session_ttl: timedelta,
        secret_length: int,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.session_repository = session_repository
        self.password_service = password_service
        self.access_token_service = access_token_service
        self.token_digester = token_digester
        self.refresh_secret_generator = refresh_secret_generator
        self.uow = uow
        self.clock = clock
        self.session_ttl = session_ttl
        self.secret_length = secret_length

    def login(
        self, email: str, password: str, fingerprint: FingerPrint
    ) -> Result[AuthTokens, AppError]:
        """
        Check credentials and start a session for ``fingerprint``.

        Unknown emails and wrong passwords both yield INVALID_CREDENTIALS.
        """
        try:
            valid_email = Email(email)
        except InvalidEmailError:
            self.password_service.verify_password(password, self.password_service.get_dummy_hash())
            return Failure(invalid_credentials())

        found = self.user_repository.find_by_email(valid_email)
        if isinstance(found, Failure):
            return found
        user = found.value

        # Use constant-time comparison to prevent timing attacks
        if user is None or user.id is None:
            self.password_service.verify_password(password, self.password_service.get_dummy_hash())
            return Failure(invalid_credentials())

        if not self.password_service.verify_password(password, user.password_hash):
            return Failure(invalid_credentials())

        user_id = user.id
        secret = self.refresh_secret_generator.generate(self.secret_length)
        session = Session.start(
            user_id=user_id,
            client_id=fingerprint.client_id,
            digest=self.token_digester.digest(secret.value),
            now=self.clock.now(),
            ttl=self.session_ttl,
            ip=fingerprint.ip,
            user_agent=fingerprint.user_agent,
        )

        saved = self.uow.run(lambda: self.session_repository.save(session))
        if isinstance(saved, Failure):
            return saved

        logger.info("user_authenticated", user_id=user_id, session_id=saved.value.id)

        return Success(
            AuthTokens(
                access_token=self.access_token_service.issue(user_id),
                expires_in=self.access_token_service.expires_in,
                refresh_secret=secret,
                session_expires_at=saved.value.expires_at,
            )
        )
