# backend/mailcheck/models/batch.py
from typing import Dict, List

from pydantic import BaseModel

from ..verifier import ValidationReport


class ValidateRequest(BaseModel):
    email: str


class BatchValidateRequest(BaseModel):
    emails: List[str]


class EmailReport(BaseModel):
    email: str
    report: ValidationReport


class BatchResult(BaseModel):
    total: int
    valid: int
    invalid: int
    # check id -> number of reports where that check failed
    failures: Dict[str, int]
    results: List[EmailReport]
