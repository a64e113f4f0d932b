# workforce_api/blueprints/monthly_records.py
from __future__ import annotations

from flask import Blueprint

from workforce_api.blueprints.employees import json_body, list_params
from workforce_api.common.http import respond
from workforce_api.mcp import monthly_records as record_handler
from workforce_api.mcp.handler import handle_mcp_request
from workforce_api.mcp.types import MCPRequest

bp = Blueprint("monthly_records", __name__, url_prefix="/api/v1/monthly-records")


def _dispatch(action, params=None, data=None):
    return handle_mcp_request(MCPRequest(action=action, entity="monthlyWorkRecord", params=params or {}, data=data))


@bp.get("")
def list_records():
    return respond(_dispatch("list", list_params(record_handler.FILTERABLE)))

@bp.post("")
def create_record():
    return respond(_dispatch("create", data=json_body()), status=201)

@bp.get("/<int:rid>")
def get_record(rid: int):
    return respond(_dispatch("get", {"id": rid}))

@bp.put("/<int:rid>")
def update_record(rid: int):
    return respond(_dispatch("update", {"id": rid}, json_body()))

@bp.delete("/<int:rid>")
def delete_record(rid: int):
    resp = _dispatch("delete", {"id": rid})
    if resp.success:
        resp.data = {"id": rid, "deleted": True}
    return respond(resp)
