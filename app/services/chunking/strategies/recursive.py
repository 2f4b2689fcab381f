"""
Recursive separator chunking. Splits on the highest-priority separator present in the
text, recurses into pieces that are still too large with the remaining separators, and
merges small neighbouring pieces back together up to chunk_size tokens with overlap.
"""

from collections import deque

from app.config.chunking.models import Setting
from app.services.chunking.tokenizer import TokenCounter


def _split_on_separator(text: str, separator: str, keep_separator: bool) -> list[str]:
    """Split text on separator; '' splits into characters. Empty pieces are dropped."""
    if separator == "":
        return list(text)
    parts = text.split(separator)
    if keep_separator:
        parts = parts[:1] + [separator + p for p in parts[1:]]
    return [p for p in parts if p != ""]


class RecursiveSplitter:
    """Token-bounded splitter over a priority-ordered separator list."""

    def __init__(self, setting: Setting, tokenizer: TokenCounter):
        self.chunk_size = setting.chunk_size
        self.chunk_overlap = setting.chunk_overlap
        self.separators = list(setting.separators or [])
        self.keep_separator = setting.keep_separator
        self.tokenizer = tokenizer

    def split_text(self, text: str) -> list[str]:
        """Return chunks in document order. Merged chunks are stripped of outer whitespace."""
        return self._split(text, self.separators)

    def _pick_separator(self, text: str, separators: list[str]) -> tuple[str, list[str]]:
        """First separator that occurs in text, and the finer ones left for recursion."""
        separator = separators[-1] if separators else ""
        remaining: list[str] = []
        for i, candidate in enumerate(separators):
            if candidate == "":
                separator = ""
                break
            if candidate in text:
                separator = candidate
                remaining = separators[i + 1 :]
                break
        return separator, remaining

    def _split(self, text: str, separators: list[str]) -> list[str]:
        separator, remaining = self._pick_separator(text, separators)
        joiner = "" if self.keep_separator else separator
        chunks: list[str] = []
        pending: list[tuple[str, int]] = []
        for piece in _split_on_separator(text, separator, self.keep_separator):
            n_tokens = self.tokenizer.count(piece)
            if n_tokens <= self.chunk_size:
                pending.append((piece, n_tokens))
                continue
            if pending:
                chunks.extend(self._merge(pending, joiner))
                pending = []
            if remaining:
                chunks.extend(self._split(piece, remaining))
            else:
                # Cannot split any finer; emitted oversized
                chunks.append(piece)
        if pending:
            chunks.extend(self._merge(pending, joiner))
        return chunks

    def _merge(self, pieces: list[tuple[str, int]], joiner: str) -> list[str]:
        """
        Greedily pack pieces into chunks of at most chunk_size tokens. When a chunk is
        closed, its trailing pieces worth at most chunk_overlap tokens (and leaving room
        for the next piece) open the following chunk.
        """
        joiner_tokens = self.tokenizer.count(joiner) if joiner else 0
        chunks: list[str] = []
        current: deque[tuple[str, int]] = deque()
        total = 0
        for piece, n_tokens in pieces:
            join_cost = joiner_tokens if current else 0
            if current and total + n_tokens + join_cost > self.chunk_size:
                chunk = self._join(current, joiner)
                if chunk is not None:
                    chunks.append(chunk)
                while current and (
                    total > self.chunk_overlap
                    or total + n_tokens + joiner_tokens > self.chunk_size
                ):
                    total -= current[0][1] + (joiner_tokens if len(current) > 1 else 0)
                    current.popleft()
            current.append((piece, n_tokens))
            total += n_tokens + (joiner_tokens if len(current) > 1 else 0)
        chunk = self._join(current, joiner)
        if chunk is not None:
            chunks.append(chunk)
        return chunks

    @staticmethod
    def _join(pieces: deque[tuple[str, int]], joiner: str) -> str | None:
        text = joiner.join(piece for piece, _ in pieces).strip()
        return text or None


def recursive_chunks(text: str, setting: Setting, tokenizer: TokenCounter) -> list[str]:
    """Chunk text with the recursive separator hierarchy of setting."""
    return RecursiveSplitter(setting, tokenizer).split_text(text)
