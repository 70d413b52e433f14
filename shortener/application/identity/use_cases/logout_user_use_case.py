"""Use case for ending sessions."""

import structlog

from shortener.application.common.clock import Clock
from shortener.application.common.errors import AppError
from shortener.application.common.result import Failure, Result, Success, collect
from shortener.application.common.unit_of_work import UnitOfWork
from shortener.application.identity.dtos import FingerPrint
from shortener.application.identity.protocols.session_repository import (
    SessionRepositoryProtocol,
)
from shortener.domain.common.exceptions import DomainError
from shortener.domain.identity.entities.session import EndReason
from shortener.domain.identity.services.token_digester import TokenDigester
from shortener.domain.identity.value_objects.plain_refresh_secret import PlainRefreshSecret

logger = structlog.get_logger(__name__)


class LogoutUserUseCase:
    """
    Revokes one session or every session of a user.

    Logging out without a (usable) refresh secret is a no-op.
    """

    def __init__(
        self,
        session_repository: SessionRepositoryProtocol,
        token_digester: TokenDigester,
        uow: UnitOfWork,
        clock: Clock,
    ) -> None:
        """Initialize use case with dependencies."""
        self.session_repository = session_repository
        self.token_digester = token_digester
        self.uow = uow
        self.clock = clock

    def logout_session(
        self, user_id: str, fingerprint: FingerPrint, presented_hex: str | None
    ) -> Result[None, AppError]:
        """Revoke the caller's session that holds the presented refresh secret."""
        if not presented_hex:
            return Success(None)
        try:
            presented = PlainRefreshSecret.from_hex(presented_hex)
        except DomainError:
            return Success(None)

        return self.uow.run(lambda: self._revoke_matching(user_id, fingerprint, presented))

    def _revoke_matching(
        self, user_id: str, fingerprint: FingerPrint, presented: PlainRefreshSecret
    ) -> Result[None, AppError]:
        found = self.session_repository.find_active_by_user_id(user_id)
        if isinstance(found, Failure):
            return found

        for session in found.value:
            if session.client_id == fingerprint.client_id and session.holds_active_token(
                presented, self.token_digester
            ):
                session.revoke(self.clock.now(), EndReason.LOGOUT)
                saved = self.session_repository.save(session)
                if isinstance(saved, Failure):
                    return saved
                logger.info("user_logged_out", user_id=user_id, session_id=session.id)
                break

        return Success(None)

    def logout_all_sessions(self, user_id: str) -> Result[int, AppError]:
        """Revoke every active session of ``user_id``; returns how many were revoked."""
        return self.uow.run(lambda: self._revoke_all(user_id))

    def _revoke_all(self, user_id: str) -> Result[int, AppError]:
        found = self.session_repository.find_active_by_user_id(user_id)
        if isinstance(found, Failure):
            return found

        now = self.clock.now()
        for session in found.value:
            session.revoke(now, EndReason.LOGOUT_ALL)

        saved = collect(self.session_repository.save(session) for session in found.value)
        if isinstance(saved, Failure):
            return saved

        logger.info("user_logged_out_everywhere", user_id=user_id, sessions=len(saved.value))
        return Success(len(saved.value))
