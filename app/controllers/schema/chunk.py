"""Request/response schemas for POST /chunk."""

from app.services.chunking.schemas import ChunkTextInput, ChunkTextOutput


class ChunkRequest(ChunkTextInput):
    """POST /chunk request body: {text, strategy: {setting}}. Unset setting fields take defaults."""


class ChunkResponse(ChunkTextOutput):
    """POST /chunk response body: text_chunks, chunk_num, token_count, chunks_token_count."""
