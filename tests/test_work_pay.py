from decimal import Decimal

import pytest

from workforce_api.agent.formatting import format_currency, month_name
from workforce_api.services.work_pay import compute_work_pay


def test_amounts_follow_rates():
    out = compute_work_pay(Decimal("100.50"), 150, 2, 1)
    assert out["weekend_amount"] == Decimal("201.00")
    assert out["holiday_amount"] == Decimal("150")
    assert out["total_amount"] == Decimal("351.00")


def test_float_rates_do_not_drift():
    out = compute_work_pay(0.1, 0.2, 3, 3)
    assert out["weekend_amount"] == Decimal("0.3")
    assert out["total_amount"] == Decimal("0.9")


def test_missing_rates_count_as_zero():
    out = compute_work_pay(None, None, 4, 2)
    assert out == {"weekend_amount": 0, "holiday_amount": 0, "total_amount": 0}


@pytest.mark.parametrize("amount,expected", [
    (1234.5, "R$ 1.234,50"),
    (0, "R$ 0,00"),
    (None, "R$ 0,00"),
    (Decimal("1000000"), "R$ 1.000.000,00"),
    (-10, "-R$ 10,00"),
    (0.005, "R$ 0,01"),
])
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_month_name():
    assert month_name(3) == "Março"
    assert month_name("12") == "Dezembro"
    assert month_name(0) == "0"
    assert month_name(None) == "None"
