"""Mapper for ShortUrl ORM ↔ Domain conversion."""

from shortener.domain.shortening.entities.short_url import ShortUrl
from shortener.infrastructure.common.datetimes import as_utc_or_none
from shortener.models import ShortUrl as ShortUrlORM


class ShortUrlMapper:
    """Mapper for ShortUrl ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ShortUrlORM) -> ShortUrl:
        """Convert ORM model to domain entity."""
        return ShortUrl(
            id=orm_model.id,
            code=orm_model.code,
            url=orm_model.url,
            owner_id=orm_model.owner_id,
            created_at=as_utc_or_none(orm_model.created_at),
        )

    def to_orm(self, domain_entity: ShortUrl) -> ShortUrlORM:
        """Convert a transient domain entity to a new ORM model."""
        return ShortUrlORM(
            code=domain_entity.code,
            url=domain_entity.url,
            owner_id=domain_entity.owner_id,
        )
