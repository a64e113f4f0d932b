# workforce_api/mcp/monthly_records.py
"""
Monthly work record actions.

Two rules hold for every write:
  * at most one record per (employee, year, month)
  * weekend/holiday/total amounts are derived from the worked-day counts and
    the owning employee's rates *at the time of the write*; callers never
    supply them.
"""
from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError

from workforce_api import store
from workforce_api.common.coerce import FieldError, as_int, as_text, is_blank, jsonable, reject_unknown
from workforce_api.mcp.employees import summary
from workforce_api.mcp.types import Action, Kind, MCPResponse, QueryOptions
from workforce_api.models.employee import Employee
from workforce_api.models.monthly_work_record import MonthlyWorkRecord
from workforce_api.services.work_pay import compute_work_pay

log = logging.getLogger(__name__)

DUPLICATE_MSG = "A record already exists for this employee, year, and month"
UNIQUE_PERIOD = "uq_mwr_employee_period"

REQUIRED = ("employeeId", "weekendsWorked", "holidaysWorked")
DERIVED = ("weekendAmount", "holidayAmount", "totalAmount")

# wire name -> (column, coercer)
FIELDS = {
    "employeeId":     ("employee_id",     lambda v, f: as_int(v, f, minimum=1)),
    "year":           ("year",            lambda v, f: as_int(v, f, minimum=1)),
    "month":          ("month",           lambda v, f: as_int(v, f, minimum=1, maximum=12)),
    "weekendsWorked": ("weekends_worked", lambda v, f: as_int(v, f, minimum=0)),
    "holidaysWorked": ("holidays_worked", lambda v, f: as_int(v, f, minimum=0)),
    "notes":          ("notes",           as_text),
}
_ALIASES = {**{k: k for k in FIELDS}, **{col: k for k, (col, _) in FIELDS.items()}}
_DERIVED_ALIASES = set(DERIVED) | {"weekend_amount", "holiday_amount", "total_amount"}

FILTERABLE = {k: FIELDS[k][1] for k in ("employeeId", "year", "month")}
SORTABLE = {"id": "id", "year": "year", "month": "month", "totalAmount": "total_amount", "createdAt": "created_at"}
DEFAULT_ORDER = [("year", False), ("month", False)]


def _today():
    return datetime.now()


def row(x: MonthlyWorkRecord) -> dict:
    return {
        "id": x.id,
        "employeeId": x.employee_id,
        "year": x.year,
        "month": x.month,
        "weekendsWorked": x.weekends_worked,
        "holidaysWorked": x.holidays_worked,
        "weekendAmount": jsonable(x.weekend_amount),
        "holidayAmount": jsonable(x.holiday_amount),
        "totalAmount": jsonable(x.total_amount),
        "notes": x.notes,
        "createdAt": jsonable(x.created_at),
        "updatedAt": jsonable(x.updated_at),
        "employee": summary(x.employee) if x.employee else None,
    }


def _values(data: dict) -> dict:
    """Wire payload -> {wire_name: coerced}. Derived and unknown keys are rejected."""
    for key in data:
        if key in _DERIVED_ALIASES:
            raise FieldError(key, f"{key} is derived and cannot be set")
    reject_unknown(data, _ALIASES)
    out = {}
    for key, raw in data.items():
        wire = _ALIASES[key]
        out[wire] = FIELDS[wire][1](raw, wire)
    return out


def _columns(values: dict) -> dict:
    return {FIELDS[k][0]: v for k, v in values.items()}


def _find_period(employee_id: int, year: int, month: int):
    return store.find_first(MonthlyWorkRecord, employee_id=employee_id, year=year, month=month)


def _is_period_violation(ex: IntegrityError) -> bool:
    msg = str(getattr(ex, "orig", None) or ex)
    # postgres names the constraint; sqlite lists the columns
    return UNIQUE_PERIOD in msg or "monthly_work_records.employee_id, monthly_work_records.year" in msg


def _period_winner(ex: IntegrityError, employee_id: int, year: int, month: int, exclude_id=None):
    """The record holding the period after a write lost the race for it, else None."""
    if not _is_period_violation(ex):
        return None
    winner = _find_period(employee_id, year, month)
    if winner is None or winner.id == exclude_id:
        return None
    log.warning("period conflict on write employee=%s %s-%02d", employee_id, year, month)
    return winner


def _list(where: dict, order: list[tuple[str, bool]], limit=None, offset=None) -> list[dict]:
    items = store.find_many(
        MonthlyWorkRecord, where=where,
        order_by=[(SORTABLE[k], asc) for k, asc in order],
        limit=limit, offset=offset,
    )
    return [row(x) for x in items]


# ---------- actions ----------

def list_records(params: dict, data: dict | None) -> MCPResponse:
    opts = QueryOptions.from_params(params, FILTERABLE, set(SORTABLE))
    where = {FIELDS[k][0]: v for k, v in opts.where.items()}
    return MCPResponse.ok(_list(where, opts.order_by or DEFAULT_ORDER, opts.limit, opts.offset))


def records_by_employee(params: dict, data: dict | None) -> MCPResponse:
    if is_blank(params.get("employeeId")):
        return MCPResponse.fail("Employee ID is required")
    where = {"employee_id": FIELDS["employeeId"][1](params.get("employeeId"), "employeeId")}
    for key in ("year", "month"):
        if not is_blank(params.get(key)):
            where[key] = FIELDS[key][1](params.get(key), key)
    return MCPResponse.ok(_list(where, DEFAULT_ORDER))


def get_record(params: dict, data: dict | None) -> MCPResponse:
    if is_blank(params.get("id")):
        return MCPResponse.fail("Record ID is required")
    x = store.find_one(MonthlyWorkRecord, as_int(params.get("id"), "id", minimum=1))
    if x is None:
        return MCPResponse.fail("Monthly work record not found", Kind.NOT_FOUND)
    return MCPResponse.ok(row(x))


def create_record(params: dict, data: dict | None) -> MCPResponse:
    if not data:
        return MCPResponse.fail("Record data is required")

    missing = [k for k in REQUIRED if is_blank(data.get(k, data.get(FIELDS[k][0])))]
    if missing:
        return MCPResponse.fail("Required fields missing: " + ", ".join(missing))

    values = _values(data)
    now = _today()
    if values.get("year") is None:
        values["year"] = now.year
    if values.get("month") is None:
        values["month"] = now.month

    existing = _find_period(values["employeeId"], values["year"], values["month"])
    if existing is not None:
        return MCPResponse.conflict(DUPLICATE_MSG, row(existing))

    emp = store.find_one(Employee, values["employeeId"])
    if emp is None:
        return MCPResponse.fail("Employee not found", Kind.NOT_FOUND)

    cols = _columns(values)
    cols.update(compute_work_pay(emp.weekend_rate, emp.holiday_rate,
                                 values["weekendsWorked"], values["holidaysWorked"]))
    try:
        x = store.create(MonthlyWorkRecord, cols)
    except IntegrityError as ex:
        # a concurrent request won the period between our check and insert
        winner = _period_winner(ex, values["employeeId"], values["year"], values["month"])
        if winner is None:
            raise
        return MCPResponse.conflict(DUPLICATE_MSG, row(winner))

    log.info("monthly record created id=%s employee=%s %s-%02d",
             x.id, x.employee_id, x.year, x.month)
    return MCPResponse.ok(row(x))


def update_record(params: dict, data: dict | None) -> MCPResponse:
    if is_blank(params.get("id")):
        return MCPResponse.fail("Record ID is required")
    if not data:
        return MCPResponse.fail("Update data is required")
    rid = as_int(params.get("id"), "id", minimum=1)

    current = store.find_one(MonthlyWorkRecord, rid)
    if current is None:
        return MCPResponse.fail("Monthly work record not found", Kind.NOT_FOUND)

    values = _values(data)
    for key in ("employeeId", "year", "month", "weekendsWorked", "holidaysWorked"):
        if key in values and values[key] is None:
            return MCPResponse.fail(f"{key} cannot be empty")

    employee_id = values.get("employeeId", current.employee_id)
    emp = store.find_one(Employee, employee_id)
    if emp is None:
        return MCPResponse.fail("Employee not found", Kind.NOT_FOUND)

    period = (employee_id, values.get("year", current.year), values.get("month", current.month))
    if period != (current.employee_id, current.year, current.month):
        clash = _find_period(*period)
        if clash is not None and clash.id != current.id:
            return MCPResponse.conflict(DUPLICATE_MSG, row(clash))

    cols = _columns(values)
    if {"weekendsWorked", "holidaysWorked", "employeeId"} & set(values):
        cols.update(compute_work_pay(
            emp.weekend_rate, emp.holiday_rate,
            values.get("weekendsWorked", current.weekends_worked),
            values.get("holidaysWorked", current.holidays_worked),
        ))

    try:
        x = store.update(MonthlyWorkRecord, rid, cols)
    except IntegrityError as ex:
        winner = _period_winner(ex, *period, exclude_id=rid)
        if winner is None:
            raise
        return MCPResponse.conflict(DUPLICATE_MSG, row(winner))
    return MCPResponse.ok(row(x))


def delete_record(params: dict, data: dict | None) -> MCPResponse:
    if is_blank(params.get("id")):
        return MCPResponse.fail("Record ID is required")
    store.delete(MonthlyWorkRecord, as_int(params.get("id"), "id", minimum=1))
    return MCPResponse.ok()


ACTIONS = {
    Action.LIST: list_records,
    Action.GET_BY_EMPLOYEE: records_by_employee,
    Action.GET: get_record,
    Action.CREATE: create_record,
    Action.ADD_QUICK_RECORD: create_record,
    Action.UPDATE: update_record,
    Action.DELETE: delete_record,
}


def handle(action: str, params: dict | None, data: dict | None) -> MCPResponse:
    fn = ACTIONS.get(Action.resolve(action))
    if fn is None:
        return MCPResponse.fail(f"Unknown action: {action}", Kind.ROUTING)
    try:
        return fn(params or {}, data)
    except FieldError as ex:
        return MCPResponse.fail(str(ex))
