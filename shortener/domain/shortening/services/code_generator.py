"""Short code generation."""

import secrets
import string

ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase
DEFAULT_CODE_LENGTH = 7


class RandomCodeGenerator:
    """
    Draws codes uniformly from the base62 alphabet.

    Uses the ``secrets`` CSPRNG so codes are not guessable from earlier ones.
    """

    def __init__(self, length: int = DEFAULT_CODE_LENGTH, alphabet: str = ALPHABET) -> None:
        if length < 1:
            raise ValueError("length must be positive")
        self.length = length
        self.alphabet = alphabet

    def generate(self) -> str:
        return "".join(secrets.choice(self.alphabet) for _ in range(self.length))
