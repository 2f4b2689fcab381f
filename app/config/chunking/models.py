"""Chunking configuration models. Read-only; no business logic."""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ChunkMethod(str, Enum):
    """Splitting algorithm selected per request."""

    TOKEN = "Token"
    RECURSIVE = "Recursive"
    MARKDOWN = "Markdown"


class Setting(BaseModel):
    """
    Chunking parameters for one request. Zero values (0, "", None) mean "unset" and
    are filled in by resolve_setting(). Kebab-case keys are accepted on input.
    """

    # model_name would otherwise clash with pydantic's reserved model_ prefix
    model_config = ConfigDict(protected_namespaces=())

    chunk_method: ChunkMethod | None = Field(
        default=None,
        validation_alias=AliasChoices("chunk_method", "chunk-method"),
        description="Token|Recursive|Markdown",
    )
    chunk_size: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("chunk_size", "chunk-size"),
        description="Max tokens per chunk",
    )
    chunk_overlap: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("chunk_overlap", "chunk-overlap"),
        description="Tokens repeated between consecutive chunks",
    )
    model_name: str = Field(
        default="",
        validation_alias=AliasChoices("model_name", "model-name"),
        description="Model whose tokenizer measures chunk size",
    )
    allowed_special: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("allowed_special", "allowed-special"),
        description="Special tokens encoded as such; ['all'] allows every special token",
    )
    disallowed_special: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("disallowed_special", "disallowed-special"),
        description="Special tokens rejected in the input; ['all'] rejects every one not allowed",
    )
    separators: list[str] | None = Field(
        default=None,
        description="Separator hierarchy, highest priority first; '' splits into characters",
    )
    keep_separator: bool = Field(
        default=False,
        validation_alias=AliasChoices("keep_separator", "keep-separator"),
        description="Keep each separator at the start of the piece that follows it",
    )


class Strategy(BaseModel):
    """Per-request chunking strategy."""

    setting: Setting = Field(default_factory=Setting)
