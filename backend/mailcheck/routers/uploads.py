import logging

from fastapi import (
    APIRouter,
    UploadFile,
    File,
    HTTPException,
)

from ..config import settings
from ..models.batch import BatchResult
from ..services.summary import validate_many
from ..utils.parser import ParseError, UnsupportedFileType, parse_upload

logger = logging.getLogger("mailcheck.uploads")

router = APIRouter()


# ---------------------------------------------------
# Upload route: parse, dedupe, validate inline
# ---------------------------------------------------
@router.post("/validate", response_model=BatchResult)
async def validate_upload(file: UploadFile = File(...)):
    fname = file.filename or ""

    content = await file.read()
    if len(content) > settings.max_upload_bytes:
        logger.warning("upload %s rejected: %d bytes", fname, len(content))
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds {settings.MAX_UPLOAD_SIZE_MB} MB",
        )

    try:
        emails = parse_upload(fname, content)
    except UnsupportedFileType:
        logger.warning("upload %s rejected: unsupported type", fname)
        raise HTTPException(status_code=400, detail="Only CSV, TXT, XLSX, XLS allowed")
    except ParseError as e:
        logger.warning("upload %s rejected: %s", fname, e)
        raise HTTPException(status_code=400, detail="Could not parse uploaded file")

    # Dedupe, keep first occurrence
    emails = list(dict.fromkeys(emails))

    if len(emails) > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"At most {settings.MAX_BATCH_SIZE} emails per upload",
        )

    result = validate_many(emails)
    logger.info(
        "upload %s validated: total=%d valid=%d", fname, result.total, result.valid
    )
    return result
