from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


_CENT = Decimal("0.01")


class Sex(str, Enum):
    MALE = "m"
    FEMALE = "f"


class Category(str, Enum):
    MALE = "male"
    FEMALE = "female"
    SENIOR = "senior"


@dataclass(frozen=True)
class BracketRow:
    min: Decimal
    max: Decimal | None
    rate: Decimal

    def __iter__(self):
        return iter((self.min, self.max, self.rate))


@dataclass(frozen=True)
class BreakdownRow:
    min: Decimal
    max: Decimal
    rate: Decimal
    tax: Decimal


class TaxInput(BaseModel):
    sex: Sex
    age: int = Field(ge=0)
    gross_income: Decimal = Field(ge=0)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("sex", mode="before")
    @classmethod
    def _normalize_sex(cls, value):
        if isinstance(value, str):
            return value.lower()
        return value


class TaxResult(BaseModel):
    breakdown: tuple[BreakdownRow, ...]
    total_tax: Decimal
    education_cess: Decimal
    net_tax: Decimal

    model_config = ConfigDict(frozen=True)

    @field_validator("net_tax", mode="after")
    @classmethod
    def _quantize_net_tax(cls, value: Decimal) -> Decimal:
        return value.quantize(_CENT, rounding=ROUND_HALF_UP)

    def format(self) -> str:
        from incometax.printout.breakdown import render_breakdown

        return render_breakdown(self)


__all__ = [
    "Sex",
    "Category",
    "BracketRow",
    "BreakdownRow",
    "TaxInput",
    "TaxResult",
]
