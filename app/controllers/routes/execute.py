"""POST /execute: run one task over a batch of inputs, reporting success or error per job."""

import asyncio

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from app.config.settings import Settings
from app.controllers.dependencies import get_app_settings, get_tokenizer_factory
from app.controllers.schema.execute import ExecuteRequest, ExecuteResponse
from app.services.chunking.tokenizer import TokenizerFactory
from app.services.execution import execute_job

router = APIRouter(prefix="/execute", tags=["execution"])


@router.post("", response_model=ExecuteResponse)
async def execute_task(
    body: ExecuteRequest,
    tokenizer_factory: TokenizerFactory = Depends(get_tokenizer_factory),
    settings: Settings = Depends(get_app_settings),
) -> ExecuteResponse:
    """
    Run `task` on every input. Jobs are independent: a failing job does not stop the others.
    Jobs run in parallel in the worker thread pool; results keep input order.
    """
    if len(body.inputs) > settings.max_batch_jobs:
        raise HTTPException(
            status_code=400,
            detail=f"At most {settings.max_batch_jobs} jobs per request",
        )

    tasks = [
        run_in_threadpool(execute_job, i, body.task, job_input, tokenizer_factory)
        for i, job_input in enumerate(body.inputs)
    ]
    results = await asyncio.gather(*tasks)

    succeeded = sum(1 for r in results if r.error is None)
    failed = len(results) - succeeded
    status = "success" if not failed else "failed"
    if failed and succeeded:
        status = "partial"
    return ExecuteResponse(
        results=list(results),
        jobs_succeeded=succeeded,
        jobs_failed=failed,
        status=status,
    )
