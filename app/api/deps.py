"""
API dependencies - shared FastAPI helpers for route handlers.

Provides:
- get_store: the TranscriptStore owned by the running application
- raise_for_result: turn a failed StoreResult into an HTTPException
- validation_error_handler: 422 body without the rejected input values
"""

import logging

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.results import StoreError, StoreResult
from app.services.transcript_store import TranscriptStore

logger = logging.getLogger(__name__)

# Failure kind -> HTTP status
ERROR_STATUS = {
    StoreError.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    StoreError.GRADE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    StoreError.DUPLICATE_GRADE: status.HTTP_400_BAD_REQUEST,
}


def get_store(request: Request) -> TranscriptStore:
    """
    FastAPI dependency - the store created for this application.

    Usage:
        @router.get("/transcripts")
        def list_transcripts(store: TranscriptStore = Depends(get_store)):
            ...
    """
    return request.app.state.store


def raise_for_result(result: StoreResult) -> None:
    """Raise the HTTPException matching a failed result; no-op on success."""
    if result.success:
        return
    status_code = ERROR_STATUS[result.error]
    logger.info("Store rejected request: %s (%s)", result.detail, result.error.value)
    raise HTTPException(status_code=status_code, detail=result.detail)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return 422 with loc/msg/type only.

    Rejected inputs are not echoed back: a body like {"grade": 1e400} parses
    to inf, which cannot be rendered as JSON.
    """
    errors = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.info("Rejected %s %s: %d validation error(s)", request.method, request.url.path, len(errors))
    return JSONResponse(status_code=422, content={"detail": errors})
