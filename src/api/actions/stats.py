from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool

from persistence.errors import LedgerError
from schemas.responses import StatsResponse
from services.analysis import get_stats

router = APIRouter()


@router.get("/stats", response_model=StatsResponse, tags=["Detection"])
async def stats():
    """Aggregate counts of every distinct DNA ever analyzed."""
    try:
        return await run_in_threadpool(get_stats)
    except LedgerError as exc:
        status_code = 503 if exc.retryable else 500
        raise HTTPException(status_code=status_code, detail=str(exc))
