from __future__ import annotations

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Iterable

from incometax.core.tax_years.y2010.slabs import EDUCATION_CESS_RATE

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from incometax.core.models import BreakdownRow, TaxResult


_CENT = Decimal("0.01")
_HUNDRED = Decimal("100")


def _money(value: Decimal) -> str:
    return str(value.quantize(_CENT, rounding=ROUND_HALF_UP))


def _rupees(value: Decimal) -> str:
    return str(value.to_integral_value(rounding=ROUND_DOWN))


def _percent(rate: Decimal) -> str:
    return _money(rate * _HUNDRED)


def _visible_rows(rows: Iterable["BreakdownRow"]) -> Iterable["BreakdownRow"]:
    # zero-rate bottom slab always shows; other untaxed slabs are dropped
    for row in rows:
        if row.min != 0 and row.tax == 0:
            continue
        yield row


def render_breakdown(result: "TaxResult") -> str:
    lines = [
        f"Tax on Income between {_rupees(row.min)} - {_rupees(row.max)} @ {_percent(row.rate)}% : {_money(row.tax)}"
        for row in _visible_rows(result.breakdown)
    ]
    lines.append(f"Total Tax: {_money(result.total_tax)}")
    lines.append(
        f"Education Cess @ {_percent(EDUCATION_CESS_RATE)}% of Total Tax: {_money(result.education_cess)}"
    )
    lines.append(f"Net Tax Payable: {_money(result.net_tax)}")
    return "".join(f"{line}\n" for line in lines)


__all__ = ["render_breakdown"]
