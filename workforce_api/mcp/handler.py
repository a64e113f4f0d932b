# workforce_api/mcp/handler.py
"""
Single entry point for {action, entity, params, data} commands.

handle_mcp_request never raises: expected conditions come back from the
entity handlers as failed responses, and anything unexpected (store
faults, constraint violations, connectivity) is caught here, logged, and
turned into {success: false, error: <message>}.
"""
from __future__ import annotations

import logging

from workforce_api.common.coerce import FieldError
from workforce_api.extensions import db
from workforce_api.mcp import employees, monthly_records
from workforce_api.mcp.types import Entity, Kind, MCPRequest, MCPResponse
from workforce_api.store import RecordNotFound

log = logging.getLogger(__name__)

FALLBACK_ERROR = "Unknown error occurred"

HANDLERS = {
    Entity.EMPLOYEE: employees.handle,
    Entity.MONTHLY_WORK_RECORD: monthly_records.handle,
}


def _message(ex: Exception) -> str:
    # DBAPI errors wrap the driver error in .orig; its text is the useful part
    orig = getattr(ex, "orig", None)
    return str(orig or ex).strip() or FALLBACK_ERROR


def handle_mcp_request(request) -> MCPResponse:
    """Accepts an MCPRequest or a plain dict body."""
    try:
        req = request if isinstance(request, MCPRequest) else MCPRequest.from_dict(request)

        if not req.action or not req.entity:
            return MCPResponse.fail("Invalid request: action and entity are required")

        entity = Entity.resolve(req.entity)
        if entity is None:
            return MCPResponse.fail(f"Unknown entity: {req.entity}", Kind.ROUTING)

        return HANDLERS[entity](req.action, req.params, req.data)

    except FieldError as ex:
        return MCPResponse.fail(str(ex))
    except RecordNotFound as ex:
        return MCPResponse.fail(str(ex), Kind.NOT_FOUND)
    except Exception as ex:
        db.session.rollback()
        log.exception("MCP handler error")
        return MCPResponse.fail(_message(ex), Kind.FAULT)
