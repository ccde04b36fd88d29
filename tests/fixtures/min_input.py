from decimal import Decimal

REFERENCE_CASES = {
  "male_35_800k": (
    {"sex": "m", "age": 35, "gross_income": 800000},
    "96820.00",
  ),
  "female_35_1200k": (
    {"sex": "f", "age": 35, "gross_income": 1200000},
    "217330.00",
  ),
  "senior_female_67_800k": (
    {"sex": "f", "age": 67, "gross_income": 800000},
    "88580.00",
  ),
}


def make_record(**overrides) -> dict:
  record = {"sex": "m", "age": 35, "gross_income": Decimal("800000")}
  record.update(overrides)
  return record
