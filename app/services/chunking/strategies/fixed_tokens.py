"""Fixed-size token chunking. Slides a window of chunk_size tokens over the text."""

from app.config.chunking.models import Setting
from app.config.chunking.static import validate_token_window
from app.services.chunking.tokenizer import TokenCounter


def fixed_token_windows(text: str, setting: Setting, tokenizer: TokenCounter) -> list[tuple[int, int]]:
    """
    Character spans of windows of chunk_size tokens, stepping (chunk_size - chunk_overlap)
    tokens forward each time. The last window holds whatever tokens remain. End is exclusive.
    """
    validate_token_window(setting)
    size = setting.chunk_size
    step = size - setting.chunk_overlap
    spans = tokenizer.token_spans(text)
    windows: list[tuple[int, int]] = []
    i = 0
    while i < len(spans):
        window = spans[i : i + size]
        windows.append((window[0][0], window[-1][1]))
        if i + size >= len(spans):
            break
        i += step
    return windows


def fixed_token_chunks(text: str, setting: Setting, tokenizer: TokenCounter) -> list[str]:
    """Each chunk is the exact slice of text covered by its window, so no whitespace is altered."""
    return [text[start:end] for start, end in fixed_token_windows(text, setting, tokenizer)]
