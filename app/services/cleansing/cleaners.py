"""Text cleansing: keep or drop whole texts by regex or substring rules."""

import re

from app.config.cleansing.models import CleanDataInput, CleanDataOutput, CleaningSetting
from app.services.errors import InvalidConfigurationError


def _compile(patterns: list[str]) -> list[re.Pattern[str]]:
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise InvalidConfigurationError(f"Invalid regular expression {pattern!r}: {e}") from e
    return compiled


def clean_with_regex(texts: list[str], setting: CleaningSetting) -> list[str]:
    """Keep texts that match no exclude pattern and, when include patterns exist, match one of them."""
    excludes = _compile(setting.exclude_patterns)
    includes = _compile(setting.include_patterns)
    kept = []
    for text in texts:
        if any(p.search(text) for p in excludes):
            continue
        if includes and not any(p.search(text) for p in includes):
            continue
        kept.append(text)
    return kept


def clean_with_substrings(texts: list[str], setting: CleaningSetting) -> list[str]:
    """Same rules as clean_with_regex, with plain containment. Case-insensitive unless configured."""

    def fold(s: str) -> str:
        return s if setting.case_sensitive else s.lower()

    excludes = [fold(s) for s in setting.exclude_substrings]
    includes = [fold(s) for s in setting.include_substrings]
    kept = []
    for text in texts:
        compare = fold(text)
        if any(s in compare for s in excludes):
            continue
        if includes and not any(s in compare for s in includes):
            continue
        kept.append(text)
    return kept


def clean_data(payload: CleanDataInput) -> CleanDataOutput:
    """Apply the configured clean method. An unknown or unset method returns the texts unchanged."""
    method = payload.setting.clean_method
    if method == "Regex":
        texts = clean_with_regex(payload.texts, payload.setting)
    elif method == "Substring":
        texts = clean_with_substrings(payload.texts, payload.setting)
    else:
        texts = list(payload.texts)
    return CleanDataOutput(texts=texts)
