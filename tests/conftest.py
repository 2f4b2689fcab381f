"""Shared fixtures: deterministic tokenizers so splitting can be checked by hand."""

import re

import pytest

from app.services.chunking.tokenizer import get_encoder_cache


class CharTokenizer:
    """One token per character."""

    def count(self, text: str) -> int:
        return len(text)

    def token_spans(self, text: str) -> list[tuple[int, int]]:
        return [(i, i + 1) for i in range(len(text))]


class WordTokenizer:
    """One token per word, with leading whitespace attached; trailing whitespace is its own token."""

    _TOKEN = re.compile(r"\s*\S+|\s+")

    def count(self, text: str) -> int:
        return len(self.token_spans(text))

    def token_spans(self, text: str) -> list[tuple[int, int]]:
        return [m.span() for m in self._TOKEN.finditer(text)]


@pytest.fixture()
def char_tokenizer() -> CharTokenizer:
    return CharTokenizer()


@pytest.fixture()
def word_tokenizer() -> WordTokenizer:
    return WordTokenizer()


@pytest.fixture()
def char_factory():
    """Tokenizer factory for chunk_text() that ignores the model name."""
    return lambda setting: CharTokenizer()


@pytest.fixture()
def word_factory():
    return lambda setting: WordTokenizer()


@pytest.fixture()
def tiktoken_available() -> None:
    """Skip when the cl100k_base encoding files cannot be loaded (e.g. offline without a cache)."""
    try:
        get_encoder_cache().get("gpt-3.5-turbo")
    except Exception as e:  # noqa: BLE001
        pytest.skip(f"tiktoken encoding unavailable: {e}")
