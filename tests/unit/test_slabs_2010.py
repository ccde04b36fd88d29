from decimal import Decimal as D

import pytest

from incometax.core.models import Category, TaxInput
from incometax.core.progressive import slab_breakdown
from incometax.core.tax_years.y2010.slabs import (
    EDUCATION_CESS_RATE,
    SENIOR_CITIZEN_AGE,
    SLABS_2010,
    select_category,
)


@pytest.mark.parametrize("category", list(Category))
def test_slabs_are_contiguous_with_one_open_top(category):
    rows = SLABS_2010[category]
    assert rows[0].min == 0
    for previous, current in zip(rows, rows[1:]):
        assert previous.max == current.min
    assert [row.max is None for row in rows] == [False, False, False, True]
    assert all(D("0") <= row.rate < D("1") for row in rows)


def test_exempt_limits_2010():
    assert SLABS_2010[Category.MALE][0].max == D("160000")
    assert SLABS_2010[Category.FEMALE][0].max == D("190000")
    assert SLABS_2010[Category.SENIOR][0].max == D("240000")
    assert EDUCATION_CESS_RATE == D("0.03")
    assert SENIOR_CITIZEN_AGE == 60


def test_select_category_boundary():
    assert select_category(TaxInput(sex="f", age=59, gross_income=D("1"))) is Category.FEMALE
    assert select_category(TaxInput(sex="m", age=59, gross_income=D("1"))) is Category.MALE
    assert select_category(TaxInput(sex="m", age=60, gross_income=D("1"))) is Category.SENIOR


def test_slab_breakdown_edges():
    male = SLABS_2010[Category.MALE]
    assert [row.tax for row in slab_breakdown(male, D("500000"))] == [D("0"), D("34000"), D("60000")]
    assert [row.max for row in slab_breakdown(male, D("160000"))] == [D("160000"), D("500000")]
    assert len(slab_breakdown(male, D("499999"))) == 2
    assert slab_breakdown(male, D("800001"))[-1].tax == D("0.30")


def test_slab_breakdown_accepts_plain_tuples():
    rows = slab_breakdown([(D("0"), D("100"), D("0")), (D("100"), None, D("0.5"))], D("300"))
    assert [(row.max, row.tax) for row in rows] == [(D("100"), D("0")), (D("300"), D("100"))]


def test_tax_input_is_frozen():
    tax_input = TaxInput(sex="M", age=30, gross_income=D("10"))
    with pytest.raises(Exception):
        tax_input.age = 31
