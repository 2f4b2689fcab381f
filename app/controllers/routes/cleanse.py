"""POST /cleanse: filter a list of texts by regex or substring rules."""

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool

from app.config.cleansing.models import CleanDataInput, CleanDataOutput
from app.services.cleansing.cleaners import clean_data

router = APIRouter(prefix="/cleanse", tags=["cleansing"])


@router.post("", response_model=CleanDataOutput)
async def cleanse_texts(body: CleanDataInput) -> CleanDataOutput:
    """Return the texts that pass the filter, in input order. Invalid regexes return 400."""
    try:
        # User patterns can be slow; keep them off the event loop
        return await run_in_threadpool(clean_data, body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
