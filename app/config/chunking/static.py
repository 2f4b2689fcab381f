"""Static chunking defaults and setting resolution. No I/O."""

from app.config.chunking.models import ChunkMethod, Setting
from app.services.errors import InvalidConfigurationError

DEFAULT_CHUNK_SIZE = 512
DEFAULT_CHUNK_OVERLAP = 100
DEFAULT_MODEL_NAME = "gpt-3.5-turbo"
DEFAULT_ALLOWED_SPECIAL: tuple[str, ...] = ()
DEFAULT_DISALLOWED_SPECIAL: tuple[str, ...] = ("all",)
# Paragraph, line, word, character
DEFAULT_SEPARATORS: tuple[str, ...] = ("\n\n", "\n", " ", "")


def resolve_setting(setting: Setting) -> Setting:
    """
    Return a copy of setting with every unset field replaced by its default.
    Each rule applies independently. An explicit overlap of 0 is indistinguishable
    from "unset" and therefore becomes DEFAULT_CHUNK_OVERLAP.
    """
    updates: dict = {}
    if setting.chunk_size == 0:
        updates["chunk_size"] = DEFAULT_CHUNK_SIZE
    if setting.chunk_overlap == 0:
        updates["chunk_overlap"] = DEFAULT_CHUNK_OVERLAP
    if setting.model_name == "":
        updates["model_name"] = DEFAULT_MODEL_NAME
    if setting.allowed_special is None:
        updates["allowed_special"] = list(DEFAULT_ALLOWED_SPECIAL)
    if setting.disallowed_special is None:
        updates["disallowed_special"] = list(DEFAULT_DISALLOWED_SPECIAL)
    if setting.separators is None:
        updates["separators"] = list(DEFAULT_SEPARATORS)
    return setting.model_copy(update=updates, deep=True)


def validate_setting(setting: Setting) -> None:
    """Raise InvalidConfigurationError if a resolved setting cannot be used for chunking."""
    if setting.chunk_method is None:
        raise InvalidConfigurationError("ChunkMethod is required: one of Token, Recursive, Markdown")
    if setting.chunk_size <= 0:
        raise InvalidConfigurationError("ChunkSize must be positive")
    if setting.chunk_method == ChunkMethod.TOKEN:
        validate_token_window(setting)


def validate_token_window(setting: Setting) -> None:
    """The Token method needs a positive stride between windows."""
    if setting.chunk_overlap >= setting.chunk_size:
        raise InvalidConfigurationError("ChunkOverlap must be less than ChunkSize when using Token method")
