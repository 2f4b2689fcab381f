"""Request/response schemas for POST /execute."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from app.services.execution import JobResult


class ExecuteRequest(BaseModel):
    """POST /execute request body. One task applied to each input; inputs are validated per job."""

    task: str = Field(..., min_length=1, description="TASK_CHUNK_TEXT|TASK_DATA_CLEANSING")
    inputs: list[dict[str, Any]] = Field(..., description="One input object per job")


class ExecuteResponse(BaseModel):
    """POST /execute response body. Results are in input order."""

    results: list[JobResult] = Field(default_factory=list)
    jobs_succeeded: int = Field(..., ge=0)
    jobs_failed: int = Field(default=0, ge=0)
    status: Literal["success", "partial", "failed"] = Field(..., description="success|partial|failed")
