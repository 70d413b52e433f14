"""Use case for rotating a refresh token and issuing a new access token."""

import structlog

from shortener.application.common.clock import Clock
from shortener.application.common.errors import (
    AppError,
    ErrorKind,
    application_error,
    from_domain_exception,
)
from shortener.application.common.result import Failure, Result, Success
from shortener.application.common.unit_of_work import UnitOfWork
from shortener.application.identity.dtos import AuthTokens, FingerPrint
from shortener.application.identity.protocols.access_token_service import (
    AccessTokenServiceProtocol,
)
from shortener.application.identity.protocols.refresh_secret_generator import (
    RefreshSecretGeneratorProtocol,
)
from shortener.application.identity.protocols.session_repository import (
    SessionRepositoryProtocol,
)
from shortener.domain.common.exceptions import DomainError
from shortener.domain.identity.services.token_digester import TokenDigester
from shortener.domain.identity.value_objects.plain_refresh_secret import PlainRefreshSecret

logger = structlog.get_logger(__name__)


def invalid_session(reason: str) -> AppError:
    return application_error(ErrorKind.INVALID_SESSION, "Invalid session", reason=reason)


class RefreshTokenUseCase:
    """
    Rotates the refresh token of a session.

    The session must belong to the calling client. A rejected rotation
    (expired, ended, reused token) still changes the session state, and that
    change is saved before the failure is returned.
    """

    def __init__(
        self,
        session_repository: SessionRepositoryProtocol,
        access_token_service: AccessTokenServiceProtocol,
        token_digester: TokenDigester,
        refresh_secret_generator: RefreshSecretGeneratorProtocol,
        uow: UnitOfWork,
        clock: Clock,
        secret_length: int,
    ) -> None:
        """Initialize use case with dependencies."""
        self.session_repository = session_repository
        self.access_token_service = access_token_service
        self.token_digester = token_digester
        self.refresh_secret_generator = refresh_secret_generator
        self.uow = uow
        self.clock = clock
        self.secret_length = secret_length

    def refresh(self, fingerprint: FingerPrint, presented_hex: str) -> Result[AuthTokens, AppError]:
        """
        Exchange the presented refresh secret for new credentials.

        Args:
            fingerprint: Calling client
            presented_hex: Refresh secret as stored in the cookie

        Returns:
            Success with a fresh access token and refresh secret, or Failure
            with INVALID_REFRESH_SECRET, INVALID_SESSION or one of the
            session rotation errors
        """
        try:
            presented = PlainRefreshSecret.from_hex(presented_hex)
        except DomainError as e:
            return Failure(from_domain_exception(e))

        return self.uow.run(lambda: self._rotate(fingerprint, presented))

    def _rotate(
        self, fingerprint: FingerPrint, presented: PlainRefreshSecret
    ) -> Result[AuthTokens, AppError]:
        found = self.session_repository.find_session_for_refresh(
            self.token_digester.digest(presented.value)
        )
        if isinstance(found, Failure):
            return found
        session = found.value
        if session is None:
            return Failure(invalid_session("Session not found"))
        if session.client_id != fingerprint.client_id:
            logger.warning("refresh_client_mismatch", session_id=session.id)
            return Failure(invalid_session("Session belongs to another device"))

        new_secret = self.refresh_secret_generator.generate(self.secret_length)
        try:
            session.rotate_token(
                presented,
                self.token_digester.digest(new_secret.value),
                self.token_digester,
                self.clock.now(),
            )
        except DomainError as e:
            saved = self.session_repository.save(session)
            if isinstance(saved, Failure):
                return saved
            logger.warning(
                "refresh_rejected",
                session_id=session.id,
                reason=e.code,
                session_status=str(session.status),
            )
            return Failure(from_domain_exception(e))

        saved = self.session_repository.save(session)
        if isinstance(saved, Failure):
            return saved

        logger.info("refresh_token_rotated", session_id=session.id, user_id=session.user_id)

        return Success(
            AuthTokens(
                access_token=self.access_token_service.issue(session.user_id),
                expires_in=self.access_token_service.expires_in,
                refresh_secret=new_secret,
                session_expires_at=session.expires_at,
            )
        )
