# workforce_api/common/http.py
from flask import jsonify

def ok(data=None, status=200, **meta):
    payload = {"success": True, "data": data}
    if meta:
        payload["meta"] = meta
    return jsonify(payload), status

def fail(message="Bad Request", status=400, code=None, detail=None, errors=None):
    err = {"message": message}
    if code: err["code"] = code
    if detail is not None: err["detail"] = detail
    if errors: err["errors"] = errors
    return jsonify({"success": False, "error": err}), status

# dispatch failure kind -> HTTP status
_KIND_STATUS = {
    "validation": 422,
    "not_found": 404,
    "conflict": 409,
    "routing": 400,
    "fault": 500,
}

def respond(resp, status=200):
    """Render an MCPResponse with the uniform REST envelope."""
    if resp.success:
        return ok(resp.data, status=status)
    kind = resp.kind.value if resp.kind else "fault"
    return fail(resp.error or "Request failed", status=_KIND_STATUS.get(kind, 400),
                code=kind.upper(), detail=resp.data)
