from __future__ import annotations
from decimal import Decimal


def _dec(v) -> Decimal:
    if v is None:
        return Decimal(0)
    if isinstance(v, float):
        return Decimal(str(v))
    return Decimal(v)


def compute_work_pay(weekend_rate, holiday_rate, weekends_worked: int, holidays_worked: int) -> dict:
    """
    Derived pay for a monthly work record.

    weekend_amount = weekend_rate * weekends_worked
    holiday_amount = holiday_rate * holidays_worked
    total_amount   = weekend_amount + holiday_amount

    Rates are the owning employee's *current* rates; callers pass them in at
    write time. No rounding is applied here beyond Decimal arithmetic.
    """
    weekend_amount = _dec(weekend_rate) * weekends_worked
    holiday_amount = _dec(holiday_rate) * holidays_worked
    return {
        "weekend_amount": weekend_amount,
        "holiday_amount": holiday_amount,
        "total_amount": weekend_amount + holiday_amount,
    }
