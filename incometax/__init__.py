"""Interface to income tax of India, assessment year 2010-11."""
from __future__ import annotations

from incometax.core.calculator import TaxCalculator
from incometax.core.models import TaxInput, TaxResult
from incometax.core.tax_years.y2010.slabs import ASSESSMENT_YEAR
from incometax.core.validate.tax_input import ValidationError, ValidationOutcome, validate_tax_input

__version__ = "0.1.0"

__all__ = [
    "ASSESSMENT_YEAR",
    "TaxCalculator",
    "TaxInput",
    "TaxResult",
    "ValidationError",
    "ValidationOutcome",
    "validate_tax_input",
    "__version__",
]
