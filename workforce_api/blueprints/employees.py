# workforce_api/blueprints/employees.py
from __future__ import annotations

from flask import Blueprint, request

from workforce_api.common.errors import APIError
from workforce_api.common.http import respond
from workforce_api.mcp import employees as employee_handler
from workforce_api.mcp.handler import handle_mcp_request
from workforce_api.mcp.types import MCPRequest

bp = Blueprint("employees", __name__, url_prefix="/api/v1/employees")


def json_body() -> dict:
    body = request.get_json(silent=True, force=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise APIError("VALIDATION", "Request body must be a JSON object", 422)
    return body


def list_params(filterable) -> dict:
    """?isActive=true&sort=name,-createdAt&limit=20&offset=0 -> dispatch list params"""
    params = {}
    where = {k: v for k, v in request.args.items() if k in filterable}
    if where:
        params["where"] = where
    sort = (request.args.get("sort") or "").strip()
    if sort:
        params["orderBy"] = sort
    for key in ("limit", "offset"):
        if request.args.get(key):
            params[key] = request.args.get(key)
    return params


def _dispatch(action, params=None, data=None):
    return handle_mcp_request(MCPRequest(action=action, entity="employee", params=params or {}, data=data))


# ---------- routes ----------

@bp.get("")
def list_employees():
    return respond(_dispatch("list", list_params(employee_handler.FILTERABLE)))

@bp.post("")
def create_employee():
    return respond(_dispatch("create", data=json_body()), status=201)

@bp.get("/<int:eid>")
def get_employee(eid: int):
    return respond(_dispatch("get", {"id": eid}))

@bp.put("/<int:eid>")
def update_employee(eid: int):
    return respond(_dispatch("update", {"id": eid}, json_body()))

@bp.delete("/<int:eid>")
def delete_employee(eid: int):
    resp = _dispatch("delete", {"id": eid})
    if resp.success:
        resp.data = {"id": eid, "deleted": True}
    return respond(resp)

@bp.get("/<int:eid>/monthly-records")
def employee_monthly_records(eid: int):
    found = _dispatch("get", {"id": eid})
    if not found.success:
        return respond(found)
    params = {"employeeId": eid}
    for key in ("year", "month"):
        if request.args.get(key):
            params[key] = request.args.get(key)
    resp = handle_mcp_request(MCPRequest(action="getByEmployee", entity="monthlyWorkRecord", params=params))
    return respond(resp)
