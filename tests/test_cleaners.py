"""Tests for text cleansing."""

import pytest

from app.config.cleansing.models import CleanDataInput, CleaningSetting
from app.services.cleansing.cleaners import clean_data
from app.services.errors import InvalidConfigurationError

TEXTS = ["Invoice #123 paid", "Meeting notes", "ERROR: disk full", "invoice draft"]


def _clean(**setting) -> list[str]:
    return clean_data(CleanDataInput(texts=TEXTS, setting=CleaningSetting(**setting))).texts


def test_regex_exclude():
    assert _clean(clean_method="Regex", exclude_patterns=[r"^ERROR"]) == [
        "Invoice #123 paid",
        "Meeting notes",
        "invoice draft",
    ]


def test_regex_include_after_exclude():
    kept = _clean(clean_method="Regex", exclude_patterns=[r"draft"], include_patterns=[r"(?i)invoice", r"notes$"])
    assert kept == ["Invoice #123 paid", "Meeting notes"]


def test_substring_is_case_insensitive_by_default():
    assert _clean(clean_method="Substring", include_substrings=["INVOICE"]) == ["Invoice #123 paid", "invoice draft"]


def test_substring_case_sensitive():
    kept = _clean(clean_method="Substring", include_substrings=["invoice"], case_sensitive=True)
    assert kept == ["invoice draft"]


def test_substring_exclude_wins_over_include():
    kept = _clean(clean_method="Substring", exclude_substrings=["paid"], include_substrings=["invoice"])
    assert kept == ["invoice draft"]


def test_unknown_method_keeps_everything():
    assert _clean(clean_method="Fuzzy", exclude_substrings=["invoice"]) == TEXTS
    assert _clean() == TEXTS


def test_invalid_regex_is_a_configuration_error():
    with pytest.raises(InvalidConfigurationError, match="Invalid regular expression"):
        _clean(clean_method="Regex", exclude_patterns=["(unclosed"])


def test_kebab_case_setting_keys():
    payload = CleanDataInput.model_validate(
        {"texts": TEXTS, "setting": {"clean-method": "Substring", "exclude-substrings": ["error"]}}
    )
    assert "ERROR: disk full" not in clean_data(payload).texts
