from __future__ import annotations

from models.dates import LIDate
from services.dates import stringify_date


def test_stringify_year_only():
    assert stringify_date({"year": 2020}) == "2020"


def test_stringify_year_and_month():
    assert stringify_date({"year": 2020, "month": 5}) == "2020-5"
    assert stringify_date(LIDate(year=2021, month=11)) == "2021-11"


def test_stringify_absent():
    assert stringify_date({}) is None
    assert stringify_date(None) is None
    assert stringify_date(LIDate(month=3)) is None


def test_month_zero_is_treated_as_missing():
    assert stringify_date({"year": 2020, "month": 0}) == "2020"
