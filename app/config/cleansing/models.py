"""Data cleansing configuration models. Read-only; no business logic."""

from pydantic import AliasChoices, BaseModel, Field


class CleaningSetting(BaseModel):
    """Which texts to keep: drop any matching an exclude rule, then require an include match if any are given."""

    clean_method: str = Field(
        default="",
        validation_alias=AliasChoices("clean_method", "clean-method"),
        description="Regex|Substring; anything else keeps every text",
    )
    exclude_patterns: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("exclude_patterns", "exclude-patterns")
    )
    include_patterns: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("include_patterns", "include-patterns")
    )
    exclude_substrings: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("exclude_substrings", "exclude-substrings")
    )
    include_substrings: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("include_substrings", "include-substrings")
    )
    case_sensitive: bool = Field(
        default=False, validation_alias=AliasChoices("case_sensitive", "case-sensitive")
    )


class CleanDataInput(BaseModel):
    texts: list[str] = Field(default_factory=list, description="Texts to filter")
    setting: CleaningSetting = Field(default_factory=CleaningSetting)


class CleanDataOutput(BaseModel):
    texts: list[str] = Field(default_factory=list, description="Texts that passed the filter, in input order")
