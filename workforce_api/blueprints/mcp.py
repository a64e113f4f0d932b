# workforce_api/blueprints/mcp.py
from flask import Blueprint, request, jsonify

from workforce_api.common.http import fail
from workforce_api.mcp.handler import handle_mcp_request
from workforce_api.mcp.schema import get_database_metadata, get_mcp_schema

bp = Blueprint("mcp", __name__, url_prefix="/api/v1/mcp")


@bp.post("")
def dispatch():
    body = request.get_json(silent=True)
    if body is None:
        return fail("Request body must be JSON", 400)
    # the dispatch envelope is the response body, failures included
    return jsonify(handle_mcp_request(body).to_dict())


@bp.get("")
def usage():
    return jsonify({
        "message": "Model Context Protocol (MCP) endpoint",
        "usage": "Send POST requests with action, entity, and optional params/data",
        "examples": [
            {"action": "list", "entity": "employees"},
            {"action": "get", "entity": "employee", "params": {"id": 1}},
            {
                "action": "create",
                "entity": "employee",
                "data": {"name": "John Doe", "email": "john@example.com", "telephone": "123-456-7890"},
            },
            {
                "action": "addQuickRecord",
                "entity": "monthlyWorkRecord",
                "data": {"employeeId": 1, "weekendsWorked": 2, "holidaysWorked": 1},
            },
        ],
    })


@bp.get("/schema")
def schema():
    return jsonify({"schema": get_mcp_schema(), "metadata": get_database_metadata()})
