"""Chunking strategy implementations, keyed by chunk method."""

from typing import Callable

from app.config.chunking.models import ChunkMethod, Setting
from app.services.chunking.strategies.fixed_tokens import fixed_token_chunks, fixed_token_windows
from app.services.chunking.strategies.markdown_structure import markdown_chunks
from app.services.chunking.strategies.recursive import recursive_chunks
from app.services.chunking.tokenizer import TokenCounter

StrategyFn = Callable[[str, Setting, TokenCounter], list[str]]
WindowFn = Callable[[str, Setting, TokenCounter], list[tuple[int, int]]]

STRATEGY_REGISTRY: dict[ChunkMethod, StrategyFn] = {
    ChunkMethod.TOKEN: fixed_token_chunks,
    ChunkMethod.RECURSIVE: recursive_chunks,
    ChunkMethod.MARKDOWN: markdown_chunks,
}

# Methods whose chunks are exact slices with known offsets
WINDOW_REGISTRY: dict[ChunkMethod, WindowFn] = {
    ChunkMethod.TOKEN: fixed_token_windows,
}


def get_strategy_fn(chunk_method: ChunkMethod | None) -> StrategyFn | None:
    """Return the chunking function for the given method, or None."""
    if chunk_method is None:
        return None
    return STRATEGY_REGISTRY.get(chunk_method)


def get_window_fn(chunk_method: ChunkMethod | None) -> WindowFn | None:
    if chunk_method is None:
        return None
    return WINDOW_REGISTRY.get(chunk_method)
