from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from incometax.core.models import BracketRow, BreakdownRow

D = Decimal


def slab_breakdown(
    brackets: Iterable[BracketRow | tuple[D, D | None, D]],
    gross_income: D,
) -> list[BreakdownRow]:
    """Walk the slabs in ascending order and return one row per slab reached.

    A slab is reached once the income is at or above its lower bound and is
    then charged over its full width. Only the open-ended top slab is closed
    at the income itself. The table rows are never modified.
    """
    income = max(D("0"), gross_income)
    rows: list[BreakdownRow] = []
    for bracket in brackets:
        lower, upper, rate = bracket
        if income < lower:
            break
        hi = upper if upper is not None else income
        rows.append(BreakdownRow(min=lower, max=hi, rate=rate, tax=(hi - lower) * rate))
    return rows


def total_from_breakdown(rows: Iterable[BreakdownRow]) -> D:
    return sum((row.tax for row in rows), D("0"))


def surcharge(amount: D, rate: D) -> D:
    return amount * rate


def round_to_cents(amount: D) -> D:
    return amount.quantize(D("0.01"), rounding=ROUND_HALF_UP)


__all__ = [
    "slab_breakdown",
    "total_from_breakdown",
    "surcharge",
    "round_to_cents",
]
