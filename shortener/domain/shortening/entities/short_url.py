"""ShortUrl entity."""

from dataclasses import dataclass
from datetime import datetime

from shortener.domain.common.entity import Entity
from shortener.domain.shortening.exceptions import InvalidCodeError
from shortener.domain.shortening.value_objects.valid_url import ValidUrl


@dataclass(eq=False)
class ShortUrl(Entity):
    """
    A short code mapped to a target URL.

    Business Rules:
    - Code is never empty
    - Code is unique (enforced by the store on write)
    - Written once, read-only afterwards
    """

    code: str
    url: str
    owner_id: str | None = None
    id: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.code or not self.code.strip():
            raise InvalidCodeError(self.code)

    @property
    def is_anonymous(self) -> bool:
        return self.owner_id is None

    @classmethod
    def create(cls, code: str, url: ValidUrl, owner_id: str | None = None) -> "ShortUrl":
        """Create a transient short URL for a validated target."""
        return cls(code=code, url=url.value, owner_id=owner_id)
