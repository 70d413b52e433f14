from typing import Protocol

from shortener.application.common.errors import AppError
from shortener.application.common.result import Result
from shortener.domain.identity.entities.session import Session
from shortener.domain.identity.value_objects.digest import Digest


class SessionRepositoryProtocol(Protocol):
    def find_active_by_user_id(self, user_id: str) -> Result[list[Session], AppError]:
        """Sessions of ``user_id`` that are ACTIVE and not yet past their expiry."""
        ...

    def find_session_for_refresh(self, digest: Digest) -> Result[Session | None, AppError]:
        """The session owning a refresh token with this digest, whatever its status."""
        ...

    def save(self, session: Session) -> Result[Session, AppError]:
        """Insert or update the session together with its tokens."""
        ...
