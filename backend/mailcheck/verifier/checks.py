# backend/mailcheck/verifier/checks.py
import enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel


class CheckId(str, enum.Enum):
    format = "format"
    no_spaces = "noSpaces"
    at_symbol = "atSymbol"
    local_part = "localPart"
    domain_part = "domainPart"
    tld = "tld"


class CheckOutcome(str, enum.Enum):
    passed = "pass"
    failed = "fail"
    not_evaluated = "not-evaluated"


# Display order is part of the contract
CHECK_TEMPLATE: Tuple[Tuple[CheckId, str], ...] = (
    (CheckId.format, "Overall email format is valid (e.g. user@domain.com)"),
    (CheckId.no_spaces, "No leading/trailing spaces"),
    (CheckId.at_symbol, "'@' symbol is present"),
    (CheckId.local_part, "Has a valid username part (before @)"),
    (CheckId.domain_part, "Has a valid domain name part (after @)"),
    (CheckId.tld, "Domain has a valid Top-Level-Domain (e.g. .com, .org)"),
)


class CheckItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: CheckId
    description: str
    outcome: CheckOutcome = CheckOutcome.not_evaluated


class ValidationReport(BaseModel):
    """
    Result of one validation run.
    is_valid is derived from the check outcomes and serialized as "isValid".
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    checks: Tuple[CheckItem, ...]
    error_messages: Tuple[str, ...] = ()

    @computed_field(alias="isValid")
    @property
    def is_valid(self) -> bool:
        return all(c.outcome == CheckOutcome.passed for c in self.checks)

    def get(self, check_id: CheckId) -> CheckItem:
        for c in self.checks:
            if c.id == check_id:
                return c
        raise KeyError(check_id)


def initial_checks() -> Tuple[CheckItem, ...]:
    return tuple(CheckItem(id=cid, description=desc) for cid, desc in CHECK_TEMPLATE)
