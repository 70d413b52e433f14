"""Tests for RandomCodeGenerator."""

import pytest

from shortener.domain.shortening.services.code_generator import (
    ALPHABET,
    DEFAULT_CODE_LENGTH,
    RandomCodeGenerator,
)


def test_alphabet_is_base62() -> None:
    assert len(ALPHABET) == 62
    assert len(set(ALPHABET)) == 62
    assert ALPHABET.isalnum()


def test_default_codes_are_seven_alphanumeric_chars() -> None:
    generator = RandomCodeGenerator()
    for _ in range(200):
        code = generator.generate()
        assert len(code) == DEFAULT_CODE_LENGTH == 7
        assert all(char in ALPHABET for char in code)


def test_custom_length() -> None:
    assert len(RandomCodeGenerator(length=8).generate()) == 8


def test_codes_vary() -> None:
    generator = RandomCodeGenerator()
    codes = {generator.generate() for _ in range(100)}
    assert len(codes) > 95


def test_non_positive_length_rejected() -> None:
    with pytest.raises(ValueError):
        RandomCodeGenerator(length=0)
