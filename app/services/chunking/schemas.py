"""Pydantic schemas for chunking input and output."""

from pydantic import BaseModel, Field

from app.config.chunking.models import Strategy


class ChunkTextInput(BaseModel):
    """One document and the strategy to chunk it with."""

    text: str = Field(..., description="Document text")
    strategy: Strategy = Field(default_factory=Strategy, description="Chunking strategy")


class TextChunk(BaseModel):
    """A single fragment of the original text."""

    text: str = Field(..., description="Chunk text")
    start_position: int = Field(..., ge=0, description="Start offset (code points) in the original text")
    end_position: int = Field(
        ...,
        ge=0,
        description="Exclusive end offset; (0, 0) with non-empty text means the chunk could not be located",
    )
    token_count: int = Field(..., ge=0, description="Tokens in this chunk alone")


class ChunkTextOutput(BaseModel):
    """Chunks of one document in document order, with token totals."""

    text_chunks: list[TextChunk] = Field(default_factory=list, description="Ordered chunks")
    chunk_num: int = Field(..., ge=0, description="Number of chunks")
    token_count: int = Field(..., ge=0, description="Tokens in the whole original text")
    chunks_token_count: int = Field(
        ..., ge=0, description="Sum of per-chunk token counts; counts overlap once per chunk"
    )
