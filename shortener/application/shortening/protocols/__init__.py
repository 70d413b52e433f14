from .code_generator import CodeGeneratorProtocol
from .short_url_repository import ShortUrlRepositoryProtocol

__all__ = ["CodeGeneratorProtocol", "ShortUrlRepositoryProtocol"]
