# workforce_api/mcp/employees.py
from __future__ import annotations

import logging

from workforce_api import store
from workforce_api.common.coerce import (
    FieldError, as_bool, as_date, as_decimal, as_email, as_int, as_text, is_blank, jsonable,
    reject_unknown, snake,
)
from workforce_api.mcp.types import Action, Kind, MCPResponse, QueryOptions
from workforce_api.models.employee import Employee

log = logging.getLogger(__name__)

# wire name -> coercer; the column is snake(wire name) except where noted
FIELDS = {
    "name": as_text,
    "email": as_email,
    "telephone": as_text,
    "cpf": as_text,
    "rg": as_text,
    "hireDate": as_date,
    "isActive": as_bool,
    "salary": as_decimal,
    "weekendRate": as_decimal,
    "holidayRate": as_decimal,
    "hasInsurance": as_bool,
    "insuranceAmount": as_decimal,
    "hasTransportFee": as_bool,
    "transportFeeDaily": as_decimal,
    "hasFoodSupport": as_bool,
    "foodSupportAmount": as_decimal,
    "bankName": as_text,
    "bankBranch": as_text,
    "bankAccount": as_text,
    "bankPix": as_text,
}

# accept both camelCase and snake_case keys
_ALIASES = {**{k: k for k in FIELDS}, **{snake(k): k for k in FIELDS}}

# columns that are NOT NULL; a blank value is rejected instead of written or defaulted
NOT_BLANK = {
    "name", "email", "telephone", "isActive", "salary", "weekendRate", "holidayRate",
    "hasInsurance", "insuranceAmount", "hasTransportFee", "transportFeeDaily",
    "hasFoodSupport", "foodSupportAmount",
}

FILTERABLE = {k: FIELDS[k] for k in (
    "name", "email", "telephone", "isActive", "hasInsurance", "hasTransportFee", "hasFoodSupport",
)}
SORTABLE = {"id", "name", "email", "hireDate", "createdAt", "salary"}
DEFAULT_ORDER = [("name", True)]


def row(x: Employee) -> dict:
    out = {"id": x.id}
    for key in FIELDS:
        out[key] = jsonable(getattr(x, snake(key)))
    out["createdAt"] = jsonable(x.created_at)
    out["updatedAt"] = jsonable(x.updated_at)
    return out


def summary(x: Employee) -> dict:
    return {
        "id": x.id,
        "name": x.name,
        "email": x.email,
        "weekendRate": jsonable(x.weekend_rate),
        "holidayRate": jsonable(x.holiday_rate),
        "isActive": x.is_active,
    }


def column_values(data: dict) -> dict:
    """Coerce a wire payload into {column: value}. Unknown keys are rejected."""
    reject_unknown(data, _ALIASES)
    out = {}
    for key, raw in data.items():
        wire = _ALIASES[key]
        val = FIELDS[wire](raw, wire)
        if val is None and wire in NOT_BLANK:
            raise FieldError(wire, f"{wire} cannot be empty")
        out[snake(wire)] = val
    return out


def _columns(options: QueryOptions):
    where = {snake(k): v for k, v in options.where.items()}
    order = [(snake(k), asc) for k, asc in (options.order_by or DEFAULT_ORDER)]
    return where, order


def _require_id(params: dict):
    if is_blank(params.get("id")):
        return None
    return as_int(params.get("id"), "id", minimum=1)


# ---------- actions ----------

def list_employees(params: dict, data: dict | None) -> MCPResponse:
    opts = QueryOptions.from_params(params, FILTERABLE, SORTABLE)
    where, order = _columns(opts)
    items = store.find_many(Employee, where=where, order_by=order, limit=opts.limit, offset=opts.offset)
    return MCPResponse.ok([row(x) for x in items])


def get_employee(params: dict, data: dict | None) -> MCPResponse:
    eid = _require_id(params)
    if eid is None:
        return MCPResponse.fail("Employee ID is required")
    x = store.find_one(Employee, eid)
    if x is None:
        return MCPResponse.fail("Employee not found", Kind.NOT_FOUND)
    return MCPResponse.ok(row(x))


def create_employee(params: dict, data: dict | None) -> MCPResponse:
    if not data:
        return MCPResponse.fail("Employee data is required")
    # omitted columns fall back to their defaults; missing required ones are enforced by the store
    values = {k: v for k, v in column_values(data).items() if v is not None}
    x = store.create(Employee, values)
    log.info("employee created id=%s", x.id)
    return MCPResponse.ok(row(x))


def update_employee(params: dict, data: dict | None) -> MCPResponse:
    eid = _require_id(params)
    if eid is None:
        return MCPResponse.fail("Employee ID is required")
    if not data:
        return MCPResponse.fail("Update data is required")
    # a missing id surfaces as store.RecordNotFound at the router boundary
    x = store.update(Employee, eid, column_values(data))
    return MCPResponse.ok(row(x))


def delete_employee(params: dict, data: dict | None) -> MCPResponse:
    eid = _require_id(params)
    if eid is None:
        return MCPResponse.fail("Employee ID is required")
    store.delete(Employee, eid)
    log.info("employee deleted id=%s", eid)
    return MCPResponse.ok()


ACTIONS = {
    Action.LIST: list_employees,
    Action.GET: get_employee,
    Action.CREATE: create_employee,
    Action.UPDATE: update_employee,
    Action.DELETE: delete_employee,
}


def handle(action: str, params: dict | None, data: dict | None) -> MCPResponse:
    fn = ACTIONS.get(Action.resolve(action))
    if fn is None:
        return MCPResponse.fail(f"Unknown action: {action}", Kind.ROUTING)
    try:
        return fn(params or {}, data)
    except FieldError as ex:
        return MCPResponse.fail(str(ex))
