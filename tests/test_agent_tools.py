import json

import pytest
import requests

from workforce_api.agent.tools import NoArgs, Tool, describe_tools, tools_by_name
from workforce_api.mcp.client import MCPClient
from workforce_api.mcp.types import MCPRequest


@pytest.fixture
def tools(app):
    return tools_by_name(MCPClient())


def test_palette(tools):
    assert set(tools) == {
        "list_employees", "get_employee", "create_employee", "update_employee", "delete_employee",
        "add_monthly_record", "get_employee_monthly_records", "get_mcp_schema",
    }


def test_specs_are_function_calling_shaped(app):
    specs = {s["function"]["name"]: s for s in describe_tools(MCPClient())}
    add = specs["add_monthly_record"]
    assert add["type"] == "function"
    params = add["function"]["parameters"]
    assert set(params["required"]) == {"employeeId", "weekendsWorked", "holidaysWorked"}
    assert "month" in params["properties"]


def test_add_monthly_record_renders_summary(tools, ana):
    out = tools["add_monthly_record"].invoke({
        "employeeId": ana["id"], "weekendsWorked": "2", "holidaysWorked": 1, "year": 2024, "month": 3,
    })
    assert out.splitlines() == [
        "Monthly record added successfully for Ana:",
        "- Period: Março 2024",
        "- Weekends Worked: 2 (Rate: R$ 100,00)",
        "- Holidays Worked: 1 (Rate: R$ 150,00)",
        "- Weekend Amount: R$ 200,00",
        "- Holiday Amount: R$ 150,00",
        "- Total Amount: R$ 350,00",
    ]


def test_add_monthly_record_conflict_shows_existing(tools, ana):
    args = {"employeeId": ana["id"], "weekendsWorked": 2, "holidaysWorked": 1, "year": 2024, "month": 3,
            "notes": "plantão"}
    tools["add_monthly_record"].invoke(args)
    out = tools["add_monthly_record"].invoke({**args, "weekendsWorked": 4})
    lines = out.splitlines()
    assert lines[0] == "Error: A record already exists for this employee, year, and month"
    assert lines[1:4] == ["", "Existing record details:", "- Period: Março 2024"]
    assert "- Weekends Worked: 2" in lines
    assert "- Total Amount: R$ 350,00" in lines
    assert lines[-1] == "- Notes: plantão"


@pytest.mark.parametrize("override,message", [
    ({"employeeId": "abc"}, "Error: Employee ID must be a valid number"),
    ({"weekendsWorked": "two"}, "Error: Weekends worked must be a valid number"),
    ({"month": 13}, "Error: Month must be <= 12"),
    ({"employeeId": 999}, "Error: Employee not found"),
])
def test_add_monthly_record_rejects_bad_input(tools, ana, override, message):
    args = {"employeeId": ana["id"], "weekendsWorked": 1, "holidaysWorked": 0, "year": 2024, "month": 3}
    args.update(override)
    assert tools["add_monthly_record"].invoke(args) == message


def test_employee_tools_round(tools):
    created = tools["create_employee"].invoke({"name": "Bia", "email": "bia@x.com", "telephone": "2"})
    assert created.startswith("Employee created successfully with ID: ")
    eid = int(created.rsplit(" ", 1)[1])

    assert tools["update_employee"].invoke({"id": eid, "data": '{"telephone": "9"}'}) == "Employee updated successfully"
    fetched = json.loads(tools["get_employee"].invoke({"id": eid}))
    assert fetched["telephone"] == "9"

    listed = json.loads(tools["list_employees"].invoke({"filters": '{"email": "bia@x.com"}'}))
    assert [e["id"] for e in listed] == [eid]

    assert tools["delete_employee"].invoke({"id": eid}) == "Employee deleted successfully"
    assert tools["delete_employee"].invoke({"id": eid}) == "Error: Employee not found"


def test_bad_json_arguments(tools):
    out = tools["list_employees"].invoke({"filters": "{"})
    assert out.startswith("Error parsing filters JSON:")
    out = tools["update_employee"].invoke({"id": 1, "data": "not json"})
    assert out.startswith("Error parsing employee data JSON:")


def test_missing_arguments(tools):
    out = tools["get_employee"].invoke({})
    assert out.startswith("Error: invalid arguments: id:")


def test_monthly_records_listing(tools, ana):
    tool = tools["get_employee_monthly_records"]
    assert tool.invoke({"employeeId": ana["id"]}) == "No monthly records found for this employee"
    tools["add_monthly_record"].invoke({"employeeId": ana["id"], "weekendsWorked": 1, "holidaysWorked": 0,
                                        "year": 2024, "month": 1})
    tools["add_monthly_record"].invoke({"employeeId": ana["id"], "weekendsWorked": 0, "holidaysWorked": 2,
                                        "year": 2024, "month": 2})
    out = tool.invoke({"employeeId": ana["id"], "year": 2024})
    blocks = out.split("\n\n")
    assert blocks[0].startswith("- Period: Fevereiro 2024")
    assert blocks[1].startswith("- Period: Janeiro 2024")


def test_schema_tool(tools):
    out = json.loads(tools["get_mcp_schema"].invoke({}))
    assert out["schema"]["version"] == "1.0"
    assert set(out["schema"]["entities"]) == {"employee", "monthlyWorkRecord"}
    assert out["metadata"]["counts"] == {"employees": 0, "monthlyWorkRecords": 0}


def test_tool_never_raises():
    def broken(args):
        raise RuntimeError("socket closed")

    assert Tool("broken", "", NoArgs, broken).invoke() == "Error: socket closed"


# ---------- client ----------

@pytest.mark.parametrize("args,message", [
    ((0, 1, 1), "Invalid employee ID: 0. Must be a positive number."),
    ((1, -1, 1), "Invalid weekends worked: -1. Must be a non-negative number."),
    ((1, 1, -2), "Invalid holidays worked: -2. Must be a non-negative number."),
    ((1, 1, 1, 1999, 1), "Invalid year: 1999. Must be between 2000 and 2100."),
    ((1, 1, 1, 2024, 13), "Invalid month: 13. Must be between 1 and 12."),
])
def test_quick_record_client_validation(app, args, message):
    resp = MCPClient().add_quick_monthly_record(*args)
    assert resp.success is False
    assert resp.error == message


def test_quick_record_client_defaults_period(app, ana):
    resp = MCPClient().add_quick_monthly_record(str(ana["id"]), "1", "0")
    assert resp.success, resp.error
    assert resp.data["totalAmount"] == 100


class _FakeResponse:
    def __init__(self, status, body=None):
        self.status_code = status
        self.ok = status < 400
        self._body = body

    def json(self):
        return self._body

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Server Error")


class _FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.sent = []

    def post(self, url, json=None, timeout=None):
        self.sent.append((url, json))
        if self.error:
            raise self.error
        return self.response

    def get(self, url, timeout=None):
        self.sent.append((url, None))
        if self.error:
            raise self.error
        return self.response


def test_http_transport_posts_envelope():
    session = _FakeSession(_FakeResponse(200, {"success": True, "data": [{"id": 1}]}))
    client = MCPClient("http://hr.local/api/v1/mcp/", session=session)
    resp = client.list_employees()
    assert resp.success and resp.data == [{"id": 1}]
    assert session.sent == [("http://hr.local/api/v1/mcp", {"action": "list", "entity": "employees"})]


def test_http_transport_status_error():
    client = MCPClient("http://hr.local/api/v1/mcp", session=_FakeSession(_FakeResponse(502)))
    resp = client.send_request(MCPRequest(action="list", entity="employee"))
    assert resp.success is False
    assert resp.error == "HTTP error! Status: 502"


def test_http_transport_connection_error():
    session = _FakeSession(error=requests.ConnectionError("connection refused"))
    resp = MCPClient("http://hr.local/api/v1/mcp", session=session).get_employee(1)
    assert resp.success is False
    assert resp.error == "connection refused"


def test_http_schema_fetch():
    body = {"schema": {"version": "1.0"}, "metadata": {"counts": {}}}
    session = _FakeSession(_FakeResponse(200, body))
    assert MCPClient("http://hr.local/api/v1/mcp", session=session).get_schema() == body
    assert session.sent == [("http://hr.local/api/v1/mcp/schema", None)]


def test_http_schema_failure_raises_and_tool_reports_it():
    client = MCPClient("http://hr.local/api/v1/mcp", session=_FakeSession(_FakeResponse(503)))
    with pytest.raises(requests.HTTPError):
        client.get_schema()
    assert tools_by_name(client)["get_mcp_schema"].invoke({}) == "Error: 503 Server Error"
