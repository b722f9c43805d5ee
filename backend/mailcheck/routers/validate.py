import logging
from typing import List

from fastapi import APIRouter, HTTPException

from ..config import settings
from ..models.batch import BatchResult, BatchValidateRequest, ValidateRequest
from ..services.summary import validate_many
from ..verifier import CheckItem, ValidationReport, initial_checks, validate_email_format

logger = logging.getLogger("mailcheck.api")

router = APIRouter()


@router.get("/checks", response_model=List[CheckItem])
async def list_checks():
    # all not-evaluated, for rendering before the first run
    return list(initial_checks())


@router.post("/validate", response_model=ValidationReport)
async def validate_email(body: ValidateRequest):
    return validate_email_format(body.email)


@router.post("/validate/batch", response_model=BatchResult)
async def validate_batch(body: BatchValidateRequest):
    if len(body.emails) > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"At most {settings.MAX_BATCH_SIZE} emails per batch",
        )

    result = validate_many(body.emails)
    logger.info("batch validated: total=%d valid=%d", result.total, result.valid)
    return result
