"""Income tax of India for assessment year 2010-11.

Usage::

    calc = TaxCalculator({"sex": "m", "age": 35, "gross_income": 800000})
    calc.compute_tax()        # "96820.00"
    print(calc.format_breakdown())

An instance is validated on construction and computed on demand. The
breakdown is only available once ``compute_tax()`` has run; before that
``format_breakdown()`` returns an empty string.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Mapping, Optional, TextIO

from incometax.core.models import Category, TaxInput, TaxResult
from incometax.core.progressive import (
    round_to_cents,
    slab_breakdown,
    surcharge,
    total_from_breakdown,
)
from incometax.core.tax_years.y2010.slabs import (
    EDUCATION_CESS_RATE,
    select_category,
    slabs_for,
)
from incometax.core.validate.tax_input import validate_tax_input

logger = logging.getLogger("incometax.calculator")


class TaxCalculator:
    def __init__(self, record: Optional[Mapping[str, Any]]) -> None:
        self._input: TaxInput = validate_tax_input(record).unwrap()
        self._result: TaxResult | None = None

    @property
    def tax_input(self) -> TaxInput:
        return self._input

    @property
    def category(self) -> Category:
        return select_category(self._input)

    @property
    def result(self) -> TaxResult | None:
        return self._result

    def compute_tax(self) -> str:
        """Compute the net tax payable and keep the breakdown for printing."""
        rows = slab_breakdown(slabs_for(self.category), self._input.gross_income)
        total_tax = total_from_breakdown(rows)
        education_cess = surcharge(total_tax, EDUCATION_CESS_RATE)
        net_tax = round_to_cents(total_tax + education_cess)
        self._result = TaxResult(
            breakdown=tuple(rows),
            total_tax=total_tax,
            education_cess=education_cess,
            net_tax=net_tax,
        )
        logger.debug(
            "Computed tax gross_income=%s total_tax=%s cess=%s net_tax=%s",
            self._input.gross_income,
            total_tax,
            education_cess,
            net_tax,
        )
        return f"{net_tax:.2f}"

    def format_breakdown(self) -> str:
        if self._result is None:
            logger.debug("Breakdown requested before compute_tax(); returning empty report")
            return ""
        return self._result.format()

    def show_breakdown(self, stream: TextIO | None = None) -> None:
        (stream or sys.stdout).write(self.format_breakdown())

    def __str__(self) -> str:
        return self.format_breakdown()

    def __repr__(self) -> str:
        return (
            f"TaxCalculator(sex={self._input.sex.value!r}, age={self._input.age}, "
            f"gross_income={self._input.gross_income})"
        )


__all__ = ["TaxCalculator"]
