from flask import Blueprint, current_app, request

from workforce_api.agent.tools import tools_by_name
from workforce_api.common.errors import APIError
from workforce_api.common.http import ok
from workforce_api.mcp.client import MCPClient

bp = Blueprint("agent_tools", __name__, url_prefix="/api/v1/agent/tools")


def _tools():
    return tools_by_name(MCPClient(current_app.config.get("MCP_BASE_URL") or None))


@bp.get("")
def list_tools():
    return ok([t.spec() for t in _tools().values()])


@bp.post("/<name>")
def invoke_tool(name: str):
    tool = _tools().get(name)
    if tool is None:
        raise APIError("UNKNOWN_TOOL", f"Unknown tool: {name}", 404)
    args = request.get_json(silent=True, force=True) or {}
    if not isinstance(args, dict):
        raise APIError("VALIDATION", "Tool arguments must be a JSON object", 422)
    return ok({"tool": name, "output": tool.invoke(args)})
