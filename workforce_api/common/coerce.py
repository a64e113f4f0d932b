# workforce_api/common/coerce.py
"""
Field coercion shared by the dispatch handlers, the REST blueprints and the
tool palette.

Values arrive from JSON bodies, query strings or model-extracted tool
arguments, so numbers frequently show up as text ("2", " 150.00 ").
Every helper either returns a value of the target type or raises
FieldError naming the field; nothing is silently defaulted to zero.
"""
from __future__ import annotations

import re
from datetime import datetime, date
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable


class FieldError(ValueError):
    """A single input field failed validation or coercion."""
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def snake(name: str) -> str:
    """weekendRate -> weekend_rate"""
    return _CAMEL_RE.sub("_", name).lower()


def is_blank(val) -> bool:
    return val is None or (isinstance(val, str) and not val.strip())


def _number(val, field: str) -> Decimal:
    if isinstance(val, bool):
        raise FieldError(field, f"{field} must be a valid number")
    if isinstance(val, (int, Decimal)):
        num = Decimal(val)
    elif isinstance(val, float):
        num = Decimal(str(val))
    elif isinstance(val, str):
        try:
            num = Decimal(val.strip())
        except InvalidOperation:
            raise FieldError(field, f"{field} must be a valid number")
    else:
        raise FieldError(field, f"{field} must be a valid number")
    if not num.is_finite():
        raise FieldError(field, f"{field} must be a valid number")
    return num


def as_int(val, field: str, *, minimum: int | None = None, maximum: int | None = None) -> int | None:
    if is_blank(val):
        return None
    num = _number(val, field)
    if num != num.to_integral_value():
        raise FieldError(field, f"{field} must be an integer")
    out = int(num)
    if minimum is not None and out < minimum:
        raise FieldError(field, f"{field} must be >= {minimum}")
    if maximum is not None and out > maximum:
        raise FieldError(field, f"{field} must be <= {maximum}")
    return out


def as_decimal(val, field: str) -> Decimal | None:
    if is_blank(val):
        return None
    return _number(val, field)


def as_bool(val, field: str) -> bool | None:
    if val is None:
        return None
    if isinstance(val, bool):
        return val
    if isinstance(val, (int, float)) and val in (0, 1):
        return bool(val)
    s = str(val).strip().lower()
    if s in ("true", "1", "yes"):  return True
    if s in ("false", "0", "no"):  return False
    raise FieldError(field, f"{field} must be true/false")


def as_date(val, field: str) -> date | None:
    if is_blank(val):
        return None
    if isinstance(val, datetime):
        return val.date()
    if isinstance(val, date):
        return val
    s = str(val).strip()
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in ("%Y-%m-%d", "%d-%m-%Y", "%Y/%m/%d"):
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            pass
    raise FieldError(field, f"{field} must be a date (YYYY-MM-DD)")


def as_text(val, field: str) -> str | None:
    if val is None:
        return None
    if not isinstance(val, (str, int, float, Decimal)) or isinstance(val, bool):
        raise FieldError(field, f"{field} must be text")
    return str(val).strip() or None


def as_email(val, field: str) -> str | None:
    s = as_text(val, field)
    return s.lower() if s else None


def reject_unknown(d: dict, known: Iterable[str]):
    unknown = sorted(k for k in d if k not in set(known))
    if unknown:
        raise FieldError(unknown[0], "Unknown field(s): " + ", ".join(unknown))


def jsonable(val: Any):
    """Render a column value for the wire envelope."""
    if isinstance(val, Decimal):
        return float(val)
    if isinstance(val, (datetime, date)):
        return val.isoformat()
    return val
