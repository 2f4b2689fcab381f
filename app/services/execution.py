"""
Job execution for the host contract: one task, many inputs, one result per input.
A failing job records its error and the remaining jobs still run.
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from app.config.cleansing.models import CleanDataInput
from app.config.logging import get_logger
from app.services.chunking.chunker import chunk_document
from app.services.chunking.schemas import ChunkTextInput
from app.services.chunking.tokenizer import TokenizerFactory, get_tokenizer
from app.services.cleansing.cleaners import clean_data

logger = get_logger(__name__)

TASK_CHUNK_TEXT = "TASK_CHUNK_TEXT"
TASK_DATA_CLEANSING = "TASK_DATA_CLEANSING"
SUPPORTED_TASKS = (TASK_CHUNK_TEXT, TASK_DATA_CLEANSING)


class JobResult(BaseModel):
    """Outcome of one job: exactly one of output or error is set."""

    index: int = Field(..., ge=0, description="Position of the job in the request")
    output: dict[str, Any] | None = Field(default=None)
    error: str | None = Field(default=None)


def run_job(
    task: str,
    job_input: dict[str, Any],
    tokenizer_factory: TokenizerFactory = get_tokenizer,
) -> dict[str, Any]:
    """Run one job and return its output as a plain dict. Raises ValueError for bad input or config."""
    if task == TASK_CHUNK_TEXT:
        payload = ChunkTextInput.model_validate(job_input)
        return chunk_document(payload, tokenizer_factory=tokenizer_factory).model_dump(mode="json")
    if task == TASK_DATA_CLEANSING:
        payload = CleanDataInput.model_validate(job_input)
        return clean_data(payload).model_dump(mode="json")
    raise ValueError(f"not supported task: {task}")


def execute_job(
    index: int,
    task: str,
    job_input: dict[str, Any],
    tokenizer_factory: TokenizerFactory = get_tokenizer,
) -> JobResult:
    """Run one job, converting any error into a per-job error result. Never raises."""
    try:
        output = run_job(task, job_input, tokenizer_factory=tokenizer_factory)
    except ValidationError as e:
        # ValidationError is a ValueError; report only the first problem
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        logger.warning("Job input invalid", extra={"task": task, "job_index": index})
        return JobResult(index=index, error=f"invalid input at {location or '<root>'}: {first['msg']}")
    except ValueError as e:
        logger.warning("Job failed", extra={"task": task, "job_index": index, "error": str(e)})
        return JobResult(index=index, error=str(e))
    except Exception:
        # Details stay in the log; the job reports a generic error and the batch goes on
        logger.exception("Job raised an unexpected error", extra={"task": task, "job_index": index})
        return JobResult(index=index, error="internal error")
    return JobResult(index=index, output=output)

