from .code_generator import ALPHABET, DEFAULT_CODE_LENGTH, RandomCodeGenerator

__all__ = ["ALPHABET", "DEFAULT_CODE_LENGTH", "RandomCodeGenerator"]
