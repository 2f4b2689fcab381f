"""Markdown-structure chunking. Uses ATX headings as section boundaries, then chunks each section."""

import re

from app.config.chunking.models import Setting
from app.services.chunking.strategies.recursive import RecursiveSplitter
from app.services.chunking.tokenizer import TokenCounter

# Up to three spaces of indentation, 1-6 '#', then whitespace or end of line
_HEADING = re.compile(r"^ {0,3}#{1,6}(?:[ \t]|$)")
_FENCE = re.compile(r"^ {0,3}(?:```|~~~)")
PARAGRAPH_SEPARATOR = "\n\n"


def split_sections(text: str) -> list[str]:
    """
    Split markdown into sections, each starting at a heading line and running up to the
    next one. Text before the first heading is its own section. Lines inside fenced code
    blocks are never treated as headings. Sections are exact, contiguous slices of text.
    """
    sections: list[str] = []
    start = 0
    offset = 0
    in_fence = False
    for line in text.splitlines(keepends=True):
        if _FENCE.match(line):
            in_fence = not in_fence
        elif not in_fence and _HEADING.match(line) and offset > start:
            sections.append(text[start:offset])
            start = offset
        offset += len(line)
    if start < len(text):
        sections.append(text[start:])
    return sections


def _paragraph_first(separators: list[str] | None) -> list[str]:
    """Blank lines are always the coarsest boundary inside a section."""
    rest = [s for s in (separators or []) if s != PARAGRAPH_SEPARATOR]
    return [PARAGRAPH_SEPARATOR] + rest


def markdown_chunks(text: str, setting: Setting, tokenizer: TokenCounter) -> list[str]:
    """
    Chunk each markdown section independently with the recursive splitter, so chunk
    size and overlap apply per section, and concatenate in document order.
    Empty text yields a single empty chunk.
    """
    if not text:
        return [""]
    section_setting = setting.model_copy(update={"separators": _paragraph_first(setting.separators)})
    splitter = RecursiveSplitter(section_setting, tokenizer)
    chunks: list[str] = []
    for section in split_sections(text):
        chunks.extend(splitter.split_text(section))
    return chunks
