import pytest

from workforce_api.mcp import handler
from workforce_api.mcp.handler import handle_mcp_request
from workforce_api.mcp.types import Entity, Kind, MCPRequest
from workforce_api.models.employee import Employee


@pytest.mark.parametrize("body", [
    {"entity": "employee"},
    {"action": "list"},
    {"action": "", "entity": "employee"},
    {"action": "list", "entity": ""},
])
def test_missing_action_or_entity_is_rejected(app, body):
    resp = handle_mcp_request(body)
    assert resp.success is False
    assert resp.error == "Invalid request: action and entity are required"
    assert resp.kind is Kind.VALIDATION


def test_non_object_body_is_rejected(app):
    resp = handle_mcp_request(["list", "employee"])
    assert resp.success is False
    assert "must be an object" in resp.error


@pytest.mark.parametrize("name,expected", [
    ("employee", Entity.EMPLOYEE),
    ("Employees", Entity.EMPLOYEE),
    ("monthlyWorkRecord", Entity.MONTHLY_WORK_RECORD),
    ("MONTHLYWORKRECORDS", Entity.MONTHLY_WORK_RECORD),
    ("invoice", None),
])
def test_entity_aliases(name, expected):
    assert Entity.resolve(name) is expected


def test_entity_alias_routes_to_same_handler(app, dispatch, ana):
    singular = dispatch("list", "employee")
    plural = dispatch("getAll", "EMPLOYEES")
    assert singular.success and plural.success
    assert singular.data == plural.data == [ana]


def test_unknown_entity_names_it(app, dispatch):
    resp = dispatch("list", "invoice")
    assert resp.success is False
    assert resp.error == "Unknown entity: invoice"
    assert resp.kind is Kind.ROUTING


def test_unknown_action_causes_no_mutation(app, dispatch):
    resp = dispatch("archive", "employee", data={"name": "X", "email": "x@x.com", "telephone": "1"})
    assert resp.success is False
    assert resp.error == "Unknown action: archive"
    assert Employee.query.count() == 0


def test_record_only_actions_are_unknown_for_employees(app, dispatch):
    for action in ("getByEmployee", "addQuickRecord"):
        resp = dispatch(action, "employee", params={"employeeId": 1})
        assert resp.success is False
        assert resp.error == f"Unknown action: {action}"


def test_handler_exception_is_contained(app, monkeypatch):
    def boom(action, params, data):
        raise RuntimeError("connection reset")

    monkeypatch.setitem(handler.HANDLERS, Entity.EMPLOYEE, boom)
    resp = handle_mcp_request(MCPRequest(action="list", entity="employee"))
    assert resp.success is False
    assert resp.error == "connection reset"
    assert resp.kind is Kind.FAULT


def test_exception_without_message_gets_fallback(app, monkeypatch):
    def boom(action, params, data):
        raise RuntimeError()

    monkeypatch.setitem(handler.HANDLERS, Entity.EMPLOYEE, boom)
    resp = handle_mcp_request({"action": "list", "entity": "employee"})
    assert resp.error == handler.FALLBACK_ERROR


def test_envelope_serialisation(app, dispatch, ana):
    deleted = dispatch("delete", "employee", params={"id": ana["id"]})
    assert deleted.to_dict() == {"success": True}

    missing = dispatch("get", "employee", params={"id": ana["id"]})
    assert missing.to_dict() == {"success": False, "error": "Employee not found"}
