"""FastAPI app entry: config, logging, health, and encoder warm-up."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config.logging import configure_logging, get_logger
from app.config.settings import get_settings
from app.controllers.routes.chunk import router as chunk_router
from app.controllers.routes.cleanse import router as cleanse_router
from app.controllers.routes.execute import router as execute_router
from app.services.chunking.tokenizer import get_encoder_cache

logger = get_logger(__name__)


def warm_encoders(model_names: list[str]) -> list[str]:
    """Build encoders for model_names ahead of the first request. Returns the names that loaded."""
    cache = get_encoder_cache()
    loaded = []
    for name in model_names:
        try:
            cache.get(name)
        except Exception as e:
            # Requests for this model will fail on their own; startup continues
            logger.warning("Failed to preload tokenizer encoder", extra={"model_name": name, "error": str(e)})
            continue
        loaded.append(name)
    return loaded


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config, logging, and encoder warm-up. Shutdown: log only; nothing to close."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    warm_encoders(settings.preload_models)
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Text Chunking Service",
    description="Split documents into token-bounded chunks for embedding pipelines",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(chunk_router)
app.include_router(cleanse_router)
app.include_router(execute_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: do not leak stack traces or internal details to the client."""
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )


def run() -> None:
    """Console entry point: serve the app with uvicorn on settings.host:settings.port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
