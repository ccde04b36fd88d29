from __future__ import annotations

import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from incometax.core.models import BracketRow, Category, Sex, TaxInput

D = Decimal

ASSESSMENT_YEAR = "2010-11"

EDUCATION_CESS_RATE = D("0.03")
SENIOR_CITIZEN_AGE = 60

MALE_2010 = (
    BracketRow(D("0"),      D("160000"), D("0.00")),
    BracketRow(D("160000"), D("500000"), D("0.10")),
    BracketRow(D("500000"), D("800000"), D("0.20")),
    BracketRow(D("800000"), None,        D("0.30")),
)

FEMALE_2010 = (
    BracketRow(D("0"),      D("190000"), D("0.00")),
    BracketRow(D("190000"), D("500000"), D("0.10")),
    BracketRow(D("500000"), D("800000"), D("0.20")),
    BracketRow(D("800000"), None,        D("0.30")),
)

SENIOR_2010 = (
    BracketRow(D("0"),      D("240000"), D("0.00")),
    BracketRow(D("240000"), D("500000"), D("0.10")),
    BracketRow(D("500000"), D("800000"), D("0.20")),
    BracketRow(D("800000"), None,        D("0.30")),
)

SLABS_2010: Mapping[Category, tuple[BracketRow, ...]] = MappingProxyType(
    {
        Category.MALE: MALE_2010,
        Category.FEMALE: FEMALE_2010,
        Category.SENIOR: SENIOR_2010,
    }
)

logger = logging.getLogger("incometax.slabs")


def select_category(tax_input: TaxInput) -> Category:
    if tax_input.age >= SENIOR_CITIZEN_AGE:
        category = Category.SENIOR
    elif tax_input.sex is Sex.FEMALE:
        category = Category.FEMALE
    else:
        category = Category.MALE
    logger.debug("Selected %s slabs for age=%s sex=%s", category.value, tax_input.age, tax_input.sex.value)
    return category


def slabs_for(category: Category) -> tuple[BracketRow, ...]:
    return SLABS_2010[category]


__all__ = [
    "ASSESSMENT_YEAR",
    "EDUCATION_CESS_RATE",
    "SENIOR_CITIZEN_AGE",
    "SLABS_2010",
    "select_category",
    "slabs_for",
]
