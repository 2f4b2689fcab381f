"""
Recover each chunk's character span in the original text.

Most splitters trim or rejoin whitespace and do not report offsets, so chunks are located
by exact substring search from a cursor that only moves forward. Python strings index by
code point, so offsets are code-point (rune) offsets, never byte offsets.
"""

from typing import NamedTuple


class ChunkSpan(NamedTuple):
    start: int
    end: int
    found: bool


NOT_FOUND = ChunkSpan(0, 0, False)


def get_chunk_positions(raw_text: str, chunk_text: str, cursor: int) -> ChunkSpan:
    """
    Find the first exact occurrence of chunk_text in raw_text at or after cursor.
    End is exclusive, so raw_text[start:end] == chunk_text. Returns NOT_FOUND, whose
    offsets are (0, 0), when the chunk does not occur verbatim.
    """
    index = raw_text.find(chunk_text, cursor)
    if index < 0:
        return NOT_FOUND
    return ChunkSpan(index, index + len(chunk_text), True)


class PositionCalculator:
    """Locates successive chunks of one document, threading the search cursor between calls."""

    def __init__(self, raw_text: str):
        self.raw_text = raw_text
        self.cursor = 0

    def locate(self, chunk_text: str, start: int | None = None) -> ChunkSpan:
        """
        Locate the next chunk in document order. The cursor moves to the chunk's start,
        not its end, because the next chunk may overlap this one.

        A known start offset (from splitters that slice the text directly) is searched
        from instead of the cursor, so repeated identical chunks keep their own offsets.
        """
        cursor = self.cursor if start is None else start
        span = get_chunk_positions(self.raw_text, chunk_text, cursor)
        if span.found:
            self.cursor = span.start
        return span
