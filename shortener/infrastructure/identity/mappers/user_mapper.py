"""Mapper for User ORM ↔ Domain conversion."""

from shortener.domain.identity.entities.user import User
from shortener.domain.identity.value_objects.email import Email
from shortener.infrastructure.common.datetimes import as_utc, as_utc_or_none
from shortener.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=orm_model.id,
            first_name=orm_model.first_name,
            last_name=orm_model.last_name,
            email=Email(orm_model.email),
            password_hash=orm_model.password_hash,
            password_updated_at=as_utc(orm_model.password_updated_at),
            created_at=as_utc_or_none(orm_model.created_at),
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.first_name = domain_entity.first_name
            orm_model.last_name = domain_entity.last_name
            orm_model.email = domain_entity.email.value
            orm_model.password_hash = domain_entity.password_hash
            orm_model.password_updated_at = domain_entity.password_updated_at
            return orm_model

        # Create new
        return UserORM(
            first_name=domain_entity.first_name,
            last_name=domain_entity.last_name,
            email=domain_entity.email.value,
            password_hash=domain_entity.password_hash,
            password_updated_at=domain_entity.password_updated_at,
        )
