"""POST /chunk: chunk one document with the strategy given in the request."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from app.config.settings import Settings
from app.controllers.dependencies import get_app_settings, get_tokenizer_factory
from app.controllers.schema.chunk import ChunkRequest, ChunkResponse
from app.services.chunking.chunker import chunk_document
from app.services.chunking.tokenizer import TokenizerFactory

router = APIRouter(prefix="/chunk", tags=["chunking"])


@router.post("", response_model=ChunkResponse)
async def chunk_text_route(
    body: ChunkRequest,
    tokenizer_factory: TokenizerFactory = Depends(get_tokenizer_factory),
    settings: Settings = Depends(get_app_settings),
) -> ChunkResponse:
    """
    Split `text` into chunks per `strategy.setting`. Configuration errors (e.g. overlap not
    smaller than size for the Token method, unknown model) return 400 with the reason.
    Chunking is CPU-bound and runs in the worker thread pool.
    """
    if len(body.text) > settings.max_text_length:
        raise HTTPException(
            status_code=413,
            detail=f"Text exceeds {settings.max_text_length} characters",
        )
    try:
        output = await run_in_threadpool(chunk_document, body, tokenizer_factory)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return ChunkResponse(**output.model_dump())
