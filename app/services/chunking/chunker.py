"""
Chunker: takes a document + strategy and returns its chunks with positions and token counts.
Deterministic: the same text and strategy always give the same output.
Orchestration: resolve setting → validate → split → count tokens → locate chunks.
"""

from app.config.chunking.models import Strategy
from app.config.chunking.static import resolve_setting, validate_setting
from app.config.logging import get_logger
from app.services.chunking.positions import PositionCalculator
from app.services.chunking.schemas import ChunkTextInput, ChunkTextOutput, TextChunk
from app.services.chunking.strategies import get_strategy_fn, get_window_fn
from app.services.chunking.tokenizer import TokenizerFactory, get_tokenizer
from app.services.errors import InvalidConfigurationError

logger = get_logger(__name__)


def chunk_text(
    text: str,
    strategy: Strategy,
    tokenizer_factory: TokenizerFactory = get_tokenizer,
) -> ChunkTextOutput:
    """
    Chunk text with the given strategy. Raises InvalidConfigurationError for unusable
    settings and UnsupportedModelError for unknown model names. Chunks that cannot be
    located in text keep (0, 0) positions and do not fail the request.
    """
    setting = resolve_setting(strategy.setting)
    validate_setting(setting)
    strategy_fn = get_strategy_fn(setting.chunk_method)
    if strategy_fn is None:
        raise InvalidConfigurationError(f"Unsupported chunk method: {setting.chunk_method!r}")
    tokenizer = tokenizer_factory(setting)

    window_fn = get_window_fn(setting.chunk_method)
    if window_fn is not None:
        windows = window_fn(text, setting, tokenizer)
        pieces = [text[start:end] for start, end in windows]
        starts: list[int | None] = [start for start, _ in windows]
    else:
        pieces = strategy_fn(text, setting, tokenizer)
        starts = [None] * len(pieces)

    calculator = PositionCalculator(text)
    chunks: list[TextChunk] = []
    for i, (piece, start) in enumerate(zip(pieces, starts)):
        span = calculator.locate(piece, start=start)
        if not span.found:
            logger.warning(
                "Chunk position not found in original text",
                extra={"chunk_index": i, "chunk_method": setting.chunk_method.value},
            )
        # Recount per chunk; splitter-internal counts are per piece, not per joined chunk
        chunks.append(
            TextChunk(
                text=piece,
                start_position=span.start,
                end_position=span.end,
                token_count=tokenizer.count(piece),
            )
        )

    output = ChunkTextOutput(
        text_chunks=chunks,
        chunk_num=len(chunks),
        token_count=tokenizer.count(text),
        chunks_token_count=sum(c.token_count for c in chunks),
    )
    logger.debug(
        "Text chunked",
        extra={
            "chunk_method": setting.chunk_method.value,
            "chunk_num": output.chunk_num,
            "token_count": output.token_count,
        },
    )
    return output


def chunk_document(
    payload: ChunkTextInput,
    tokenizer_factory: TokenizerFactory = get_tokenizer,
) -> ChunkTextOutput:
    """Chunk a validated {text, strategy} input."""
    return chunk_text(payload.text, payload.strategy, tokenizer_factory=tokenizer_factory)
