from workforce_api.mcp.handler import handle_mcp_request
from workforce_api.mcp.types import Action, Entity, Kind, MCPRequest, MCPResponse, QueryOptions

__all__ = [
    "handle_mcp_request",
    "Action",
    "Entity",
    "Kind",
    "MCPRequest",
    "MCPResponse",
    "QueryOptions",
]
