"""Mapper for Session ORM ↔ Domain conversion, refresh tokens included."""

from shortener.domain.identity.entities.refresh_token import RefreshToken, RefreshTokenStatus
from shortener.domain.identity.entities.session import Session, SessionStatus
from shortener.domain.identity.value_objects.digest import Digest
from shortener.infrastructure.common.datetimes import as_utc, as_utc_or_none
from shortener.models import RefreshToken as RefreshTokenORM
from shortener.models import Session as SessionORM


class SessionMapper:
    """Mapper for Session ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: SessionORM) -> Session:
        """Convert ORM model to domain entity."""
        return Session(
            id=orm_model.id,
            user_id=orm_model.user_id,
            client_id=orm_model.client_id,
            expires_at=as_utc(orm_model.expires_at),
            status=SessionStatus(orm_model.status),
            tokens=[self.token_to_domain(token) for token in orm_model.tokens],
            ip=orm_model.ip,
            user_agent=orm_model.user_agent,
            last_used_at=as_utc_or_none(orm_model.last_used_at),
            ended_at=as_utc_or_none(orm_model.ended_at),
            end_reason=orm_model.end_reason,
        )

    def token_to_domain(self, orm_model: RefreshTokenORM) -> RefreshToken:
        return RefreshToken(
            id=orm_model.id,
            session_id=orm_model.session_id,
            user_id=orm_model.user_id,
            digest=Digest(value=bytes(orm_model.digest), algorithm=orm_model.digest_algorithm),
            status=RefreshTokenStatus(orm_model.status),
            issued_at=as_utc(orm_model.issued_at),
            expires_at=as_utc(orm_model.expires_at),
            last_used_at=as_utc_or_none(orm_model.last_used_at),
            previous_token_id=orm_model.previous_token_id,
            ip=orm_model.ip,
            user_agent=orm_model.user_agent,
        )

    def to_orm(self, domain_entity: Session, orm_model: SessionORM | None = None) -> SessionORM:
        """
        Convert domain entity to ORM model.

        Existing tokens are matched by id and only their mutable fields are
        copied; tokens without an id are appended as new rows.
        """
        if orm_model is None:
            orm_model = SessionORM(
                user_id=domain_entity.user_id,
                client_id=domain_entity.client_id,
                expires_at=domain_entity.expires_at,
                ip=domain_entity.ip,
                user_agent=domain_entity.user_agent,
            )

        orm_model.status = str(domain_entity.status)
        orm_model.last_used_at = domain_entity.last_used_at
        orm_model.ended_at = domain_entity.ended_at
        orm_model.end_reason = domain_entity.end_reason

        existing = {token.id: token for token in orm_model.tokens}
        for token in domain_entity.tokens:
            if token.id is not None and token.id in existing:
                existing[token.id].status = str(token.status)
                existing[token.id].last_used_at = token.last_used_at
            else:
                orm_model.tokens.append(self._new_token(domain_entity, token))
        return orm_model

    def _new_token(self, session: Session, token: RefreshToken) -> RefreshTokenORM:
        return RefreshTokenORM(
            user_id=session.user_id,
            digest=token.digest.value,
            digest_algorithm=token.digest.algorithm,
            status=str(token.status),
            issued_at=token.issued_at,
            expires_at=token.expires_at,
            last_used_at=token.last_used_at,
            previous_token_id=token.previous_token_id,
            ip=token.ip,
            user_agent=token.user_agent,
        )
