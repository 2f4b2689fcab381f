"""End-to-end chunking with the real cl100k_base encoding used by gpt-3.5-turbo."""

import pytest

from app.config.chunking.models import ChunkMethod, Setting, Strategy
from app.config.chunking.static import resolve_setting
from app.services.chunking.chunker import chunk_text
from app.services.chunking.tokenizer import get_tokenizer

pytestmark = pytest.mark.usefixtures("tiktoken_available")

LONG_TEXT = "\n\n".join(
    " ".join(f"Sentence {p}.{s} talks about topic {p * 7 + s} in some detail." for s in range(6))
    for p in range(5)
)


def test_hello_world_token_method():
    strategy = Strategy(setting=Setting(chunk_method=ChunkMethod.TOKEN, chunk_size=512, model_name="gpt-3.5-turbo"))
    output = chunk_text("Hello world.", strategy)
    assert output.chunk_num == 1
    chunk = output.text_chunks[0]
    assert chunk.text == "Hello world."
    assert (chunk.start_position, chunk.end_position) == (0, 12)
    assert chunk.token_count == 3
    assert output.token_count == 3
    assert output.chunks_token_count == 3


def test_markdown_section_that_fits_is_one_chunk():
    text = "## Heading\n\nThis is a test paragraph. It has multiple sentences."
    strategy = Strategy(setting=Setting(chunk_method=ChunkMethod.MARKDOWN, chunk_size=50, chunk_overlap=5))
    output = chunk_text(text, strategy)
    assert [c.text for c in output.text_chunks] == [text]
    assert (output.text_chunks[0].start_position, output.text_chunks[0].end_position) == (0, len(text))
    assert output.token_count == output.chunks_token_count


@pytest.mark.parametrize("method", [ChunkMethod.RECURSIVE, ChunkMethod.MARKDOWN])
def test_structured_chunks_respect_size(method):
    strategy = Strategy(setting=Setting(chunk_method=method, chunk_size=20, chunk_overlap=5))
    output = chunk_text(LONG_TEXT, strategy)
    assert output.chunk_num > 5
    for chunk in output.text_chunks:
        assert chunk.token_count <= 20
        assert LONG_TEXT[chunk.start_position : chunk.end_position] == chunk.text


def test_token_windows_rebuild_the_token_sequence():
    setting = Setting(chunk_method=ChunkMethod.TOKEN, chunk_size=16, chunk_overlap=4)
    output = chunk_text(LONG_TEXT, Strategy(setting=setting))
    spans = get_tokenizer(resolve_setting(setting)).token_spans(LONG_TEXT)
    covered: list[tuple[int, int]] = []
    for i, chunk in enumerate(output.text_chunks):
        window = [s for s in spans if chunk.start_position <= s[0] and s[1] <= chunk.end_position]
        assert len(window) <= 16
        covered.extend(window if i == 0 else window[4:])
    assert covered == spans
    assert output.text_chunks[0].start_position == 0
    assert output.text_chunks[-1].end_position == len(LONG_TEXT)
