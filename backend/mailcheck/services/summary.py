# backend/mailcheck/services/summary.py
# Aggregate per-address reports into batch counters.
from typing import Dict, Iterable, List, Tuple

from ..models.batch import BatchResult, EmailReport
from ..verifier import CHECK_TEMPLATE, CheckOutcome, ValidationReport, validate_email_format


def count_failures(reports: Iterable[ValidationReport]) -> Dict[str, int]:
    # keys in display order, zero counts included
    failures = {cid.value: 0 for cid, _ in CHECK_TEMPLATE}
    for report in reports:
        for c in report.checks:
            if c.outcome == CheckOutcome.failed:
                failures[c.id.value] += 1
    return failures


def summarize(entries: List[Tuple[str, ValidationReport]]) -> BatchResult:
    valid = sum(1 for _, r in entries if r.is_valid)
    return BatchResult(
        total=len(entries),
        valid=valid,
        invalid=len(entries) - valid,
        failures=count_failures(r for _, r in entries),
        results=[EmailReport(email=e, report=r) for e, r in entries],
    )


def validate_many(emails: Iterable[str]) -> BatchResult:
    return summarize([(e, validate_email_format(e)) for e in emails])
