from .redis_short_url_repository import RedisShortUrlRepository
from .short_url_repository import ShortUrlRepository

__all__ = ["RedisShortUrlRepository", "ShortUrlRepository"]
