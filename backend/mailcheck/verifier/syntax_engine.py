# backend/mailcheck/verifier/syntax_engine.py
import re
from typing import Dict, List

from .checks import (
    CHECK_TEMPLATE,
    CheckId,
    CheckItem,
    CheckOutcome,
    ValidationReport,
)

# Practical overall pattern, looser than the per-part checks below
EMAIL_REGEX = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
LOCAL_PART_REGEX = re.compile(r"[a-zA-Z0-9!#$%&'*+/=?^_`{|}~.-]+")
TLD_REGEX = re.compile(r"[a-zA-Z]{2,}")

# Space separators, line terminators and BOM; ASCII 0x1c-0x1f are not trimmed
TRIM_CHARS = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
TRIM_REGEX = re.compile(rf"\A[{TRIM_CHARS}]+|[{TRIM_CHARS}]+\Z")

EMPTY_MESSAGE = "Email address cannot be empty."


class _CheckRun:
    """Per-call working state. Never shared between runs."""

    def __init__(self):
        self.outcomes: Dict[CheckId, CheckOutcome] = {
            cid: CheckOutcome.not_evaluated for cid, _ in CHECK_TEMPLATE
        }
        self.messages: List[str] = []

    def check(self, check_id: CheckId, condition: bool, message: str) -> bool:
        self.outcomes[check_id] = CheckOutcome.passed if condition else CheckOutcome.failed
        if not condition:
            self.messages.append(message)
        return condition

    def report(self) -> ValidationReport:
        return ValidationReport(
            checks=tuple(
                CheckItem(id=cid, description=desc, outcome=self.outcomes[cid])
                for cid, desc in CHECK_TEMPLATE
            ),
            error_messages=tuple(self.messages),
        )


def is_local_part_valid(local: str) -> bool:
    return (
        len(local) > 0
        and LOCAL_PART_REGEX.fullmatch(local) is not None
        and not local.startswith(".")
        and not local.endswith(".")
        and ".." not in local
    )


def is_domain_part_valid(domain: str) -> bool:
    return len(domain) > 0 and "." in domain


def is_tld_valid(domain: str) -> bool:
    tld = domain.split(".")[-1]
    return TLD_REGEX.fullmatch(tld) is not None


def trim(value: str) -> str:
    return TRIM_REGEX.sub("", value)


def validate_email_format(email: str) -> ValidationReport:
    """
    Run the six structural checks against a raw candidate address.

    Never raises: every problem is reported as a failed check plus a message.
    Messages are appended in evaluation order, which differs from display
    order (format is evaluated last).
    """
    run = _CheckRun()

    if not email:
        for cid, _ in CHECK_TEMPLATE:
            run.outcomes[cid] = CheckOutcome.failed
        run.messages.append(EMPTY_MESSAGE)
        return run.report()

    trimmed = trim(email)
    run.check(
        CheckId.no_spaces,
        trimmed == email,
        "Email should not have leading or trailing spaces.",
    )

    at_count = trimmed.count("@")
    if at_count == 0:
        run.check(CheckId.at_symbol, False, "A valid email must contain an '@' symbol.")
    else:
        run.check(CheckId.at_symbol, at_count == 1, "Email must contain exactly one '@' symbol.")

    if at_count:
        # with extra '@' only the first two fragments are considered
        parts = trimmed.split("@")
        local, domain = parts[0], parts[1]

        run.check(
            CheckId.local_part,
            is_local_part_valid(local),
            "The username part of the email (before @) is invalid.",
        )
        domain_ok = run.check(
            CheckId.domain_part,
            is_domain_part_valid(domain),
            "The domain part of the email (after @) is invalid or missing a dot.",
        )
        if domain_ok:
            run.check(
                CheckId.tld,
                is_tld_valid(domain),
                "The Top-Level-Domain (e.g., .com) is invalid or too short.",
            )
        else:
            run.check(CheckId.tld, False, "Cannot check TLD because the domain part is invalid.")
    else:
        run.check(CheckId.local_part, False, "Cannot check username part without an @ symbol.")
        run.check(CheckId.domain_part, False, "Cannot check domain part without an @ symbol.")
        run.check(CheckId.tld, False, "Cannot check TLD without an @ symbol.")

    run.check(
        CheckId.format,
        EMAIL_REGEX.fullmatch(trimmed) is not None,
        "The email format does not match the standard pattern.",
    )

    return run.report()
