"""
Tokenizer and token counting for chunking, backed by tiktoken.

Encoders are expensive to build, so they are kept in a process-wide EncoderCache keyed
by model name: built at most once per name, shared by concurrent requests, never evicted.
"""

import threading
from functools import lru_cache
from typing import Any, Callable, Protocol

import tiktoken

from app.config.chunking.models import Setting
from app.config.logging import get_logger
from app.services.errors import InvalidConfigurationError, UnsupportedModelError

logger = get_logger(__name__)


class TokenCounter(Protocol):
    """What the splitters need from a tokenizer."""

    def count(self, text: str) -> int:
        """Number of tokens in text."""
        ...

    def token_spans(self, text: str) -> list[tuple[int, int]]:
        """(start, end) character offsets of each token, in order, covering text."""
        ...


def load_encoding(model_name: str) -> tiktoken.Encoding:
    """Build the tiktoken encoding for a model name, or for an encoding name such as 'cl100k_base'."""
    try:
        return tiktoken.encoding_for_model(model_name)
    except KeyError as model_error:
        try:
            return tiktoken.get_encoding(model_name)
        except ValueError:
            raise UnsupportedModelError(model_name, cause=model_error) from model_error


class EncoderCache:
    """Lazily populated, thread-safe map from model name to encoder."""

    def __init__(self, loader: Callable[[str], Any] = load_encoding):
        self._loader = loader
        self._encoders: dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, model_name: str) -> Any:
        """Return the encoder for model_name, building it on first use."""
        encoder = self._encoders.get(model_name)
        if encoder is not None:
            return encoder
        with self._lock:
            encoder = self._encoders.get(model_name)
            if encoder is None:
                encoder = self._loader(model_name)
                self._encoders[model_name] = encoder
                logger.info("Tokenizer encoder loaded", extra={"model_name": model_name})
        return encoder

    def __contains__(self, model_name: object) -> bool:
        return model_name in self._encoders

    def __len__(self) -> int:
        return len(self._encoders)


@lru_cache
def get_encoder_cache() -> EncoderCache:
    """Return the process-wide encoder cache."""
    return EncoderCache()


def _special_arg(values: list[str] | None) -> str | set[str]:
    """tiktoken takes either the literal 'all' or a set of special token strings."""
    values = values or []
    if "all" in values:
        return "all"
    return set(values)


class TiktokenTokenizer:
    """TokenCounter over a tiktoken encoding, with the special-token policy of one request."""

    def __init__(
        self,
        encoding: Any,
        allowed_special: list[str] | None = None,
        disallowed_special: list[str] | None = None,
    ):
        self._enc = encoding
        self._allowed = _special_arg(allowed_special)
        self._disallowed = _special_arg(disallowed_special)

    def encode(self, text: str) -> list[int]:
        try:
            return self._enc.encode(
                text,
                allowed_special=self._allowed,
                disallowed_special=self._disallowed,
            )
        except ValueError as e:
            # Raised when text contains a special token that is not allowed
            raise InvalidConfigurationError(
                f"Text contains a disallowed special token; adjust AllowedSpecial/DisallowedSpecial: {e}"
            ) from e

    def count(self, text: str) -> int:
        if not text:
            return 0
        return len(self.encode(text))

    def token_spans(self, text: str) -> list[tuple[int, int]]:
        """
        Character span of each token. A token that starts inside a multi-byte character
        is attributed to that character's start, so spans may be empty but never overlap.
        """
        if not text:
            return []
        tokens = self.encode(text)
        _, offsets = self._enc.decode_with_offsets(tokens)
        ends = offsets[1:] + [len(text)]
        return list(zip(offsets, ends))


def get_tokenizer(setting: Setting, cache: EncoderCache | None = None) -> TiktokenTokenizer:
    """Tokenizer for a resolved setting. Raises UnsupportedModelError for unknown model names."""
    if cache is None:
        cache = get_encoder_cache()
    return TiktokenTokenizer(
        cache.get(setting.model_name),
        allowed_special=setting.allowed_special,
        disallowed_special=setting.disallowed_special,
    )


TokenizerFactory = Callable[[Setting], TokenCounter]
