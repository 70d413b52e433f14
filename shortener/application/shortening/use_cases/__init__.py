from .resolve_url_use_case import ResolveUrlUseCase
from .shorten_url_use_case import ShortenUrlUseCase

__all__ = ["ResolveUrlUseCase", "ShortenUrlUseCase"]
