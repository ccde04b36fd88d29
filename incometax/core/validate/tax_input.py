from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..models import TaxInput

REQUIRED_KEYS = ("sex", "gross_income", "age")

_SEX_VALUES = {"m", "f"}
_AGE_PATTERN = re.compile(r"^\d+$")
_INCOME_PATTERN = re.compile(r"^\d+(\.\d+)?$")

logger = logging.getLogger("incometax.validate")


@dataclass(frozen=True)
class IssueTemplate:
    code: str
    message: str


ISSUE_MISSING_INPUT = IssueTemplate("missing_input", "Missing input parameters.")
ISSUE_NOT_A_MAPPING = IssueTemplate("not_a_mapping", "Input param has to be a mapping.")
ISSUE_MISSING_SEX = IssueTemplate("missing_key_sex", "Missing key sex.")
ISSUE_MISSING_GROSS_INCOME = IssueTemplate("missing_key_gross_income", "Missing key gross_income.")
ISSUE_MISSING_AGE = IssueTemplate("missing_key_age", "Missing key age.")
ISSUE_KEY_COUNT = IssueTemplate("invalid_key_count", "Invalid number of keys found in the input hash.")
ISSUE_INVALID_SEX = IssueTemplate("invalid_sex", "Invalid value for key sex.")
ISSUE_INVALID_AGE = IssueTemplate("invalid_age", "Invalid value for key age.")
ISSUE_INVALID_GROSS_INCOME = IssueTemplate("invalid_gross_income", "Invalid value for key gross_income.")

_MISSING_KEY_ISSUES = {
    "sex": ISSUE_MISSING_SEX,
    "gross_income": ISSUE_MISSING_GROSS_INCOME,
    "age": ISSUE_MISSING_AGE,
}


class ValidationError(ValueError):
    """Raised when a tax input record is rejected."""

    def __init__(self, issue: IssueTemplate) -> None:
        super().__init__(issue.message)
        self.code = issue.code
        self.message = issue.message


@dataclass(frozen=True)
class ValidationOutcome:
    value: Optional[TaxInput] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> TaxInput:
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise ValidationError(ISSUE_MISSING_INPUT)
        return self.value


def _valid_sex(value: Any) -> bool:
    return isinstance(value, str) and value.lower() in _SEX_VALUES


def _parse_age(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str) and _AGE_PATTERN.match(value):
        return int(value)
    return None


def _parse_income(value: Any) -> Optional[Decimal]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        if not _INCOME_PATTERN.match(value):
            return None
        return Decimal(value)
    if isinstance(value, (int, float, Decimal)):
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            return None
        if not amount.is_finite() or amount < 0:
            return None
        return amount
    return None


def _reject(issue: IssueTemplate) -> ValidationOutcome:
    logger.info("Rejected tax input: %s", issue.code)
    return ValidationOutcome(error=ValidationError(issue))


def validate_tax_input(record: Any) -> ValidationOutcome:
    """Check a raw ``{sex, age, gross_income}`` record.

    The first failing check wins, in the order: presence of the record, its
    shape, each required key, the key count, then each value.
    """
    if record is None:
        return _reject(ISSUE_MISSING_INPUT)
    if not isinstance(record, Mapping):
        return _reject(ISSUE_NOT_A_MAPPING)
    for key in REQUIRED_KEYS:
        if key not in record:
            return _reject(_MISSING_KEY_ISSUES[key])
    if len(record) != len(REQUIRED_KEYS):
        return _reject(ISSUE_KEY_COUNT)

    if not _valid_sex(record["sex"]):
        return _reject(ISSUE_INVALID_SEX)
    age = _parse_age(record["age"])
    if age is None:
        return _reject(ISSUE_INVALID_AGE)
    gross_income = _parse_income(record["gross_income"])
    if gross_income is None:
        return _reject(ISSUE_INVALID_GROSS_INCOME)

    return ValidationOutcome(value=TaxInput(sex=record["sex"], age=age, gross_income=gross_income))


__all__ = [
    "IssueTemplate",
    "ValidationError",
    "ValidationOutcome",
    "validate_tax_input",
    "REQUIRED_KEYS",
]
