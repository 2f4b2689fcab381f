"""FastAPI dependencies shared by routes. Override these in tests via app.dependency_overrides."""

from app.config.settings import Settings, get_settings
from app.services.chunking.tokenizer import TokenizerFactory, get_tokenizer


def get_tokenizer_factory() -> TokenizerFactory:
    """Factory building a tokenizer from a resolved setting, backed by the shared encoder cache."""
    return get_tokenizer


def get_app_settings() -> Settings:
    return get_settings()
