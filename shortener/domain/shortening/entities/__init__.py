from .short_url import ShortUrl

__all__ = ["ShortUrl"]
