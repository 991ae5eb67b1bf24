"""
Submission API endpoint.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from core import db

from . import dependencies, repository, schemas

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "Saved!"

router = APIRouter()


@router.post("/submit", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
async def submit(
    payload: schemas.SubmitRequest,
    database: db.Database = Depends(dependencies.get_database),
) -> PlainTextResponse:
    """
    Append one answer row. Storage failures become a 500 carrying the driver message.
    """
    try:
        await repository.store_answer(
            database,
            encrypted=payload.encrypted,
            captcha=payload.captcha,
        )
    except db.StorageError as exc:
        logger.warning("submission_failed error=%s", exc)
        return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return PlainTextResponse(SAVED_MESSAGE, status_code=status.HTTP_201_CREATED)
