"""Errors raised by the chunking and cleansing services. All are request-fatal and not retryable."""


class ChunkingError(ValueError):
    """Base class for errors caused by the request itself."""


class InvalidConfigurationError(ChunkingError):
    """Resolved settings violate an invariant, e.g. overlap >= size for the Token method."""


class UnsupportedModelError(ChunkingError):
    """No tokenizer encoding is known for the requested model name."""

    def __init__(self, model_name: str, cause: Exception | None = None):
        super().__init__(f"Unsupported model: {model_name!r} has no known encoding")
        self.model_name = model_name
        self.cause = cause
