from typing import Any

from fastapi import APIRouter, Body, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from persistence.errors import LedgerError
from schemas.requests import DnaValidationError
from schemas.responses import ClassificationResult
from services.analysis import classify_and_record

router = APIRouter()


@router.post(
    "/mutant",
    response_model=ClassificationResult,
    responses={403: {"model": ClassificationResult, "description": "Human DNA"}},
    tags=["Detection"],
)
async def detect_mutant(payload: dict[str, Any] = Body(...)):
    """
    Classify a DNA matrix and record it.

    Returns 200 for mutant DNA and 403 for human DNA.
    """
    try:
        # Ledger access may block on the store, so keep it off the event loop.
        result = await run_in_threadpool(classify_and_record, payload)
    except DnaValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except LedgerError as exc:
        status_code = 503 if exc.retryable else 500
        raise HTTPException(status_code=status_code, detail=str(exc))

    if not result.is_mutant:
        return JSONResponse(status_code=403, content=result.model_dump())
    return result
