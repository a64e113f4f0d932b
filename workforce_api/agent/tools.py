# workforce_api/agent/tools.py
"""
Tool palette for a chat agent.

Each tool wraps one dispatch call: arguments are validated against a
pydantic model, turned into an MCPClient call, and the response rendered
back into plain text. A tool never raises; every failure is rendered as
"Error: ...".
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Type, Union

from pydantic import BaseModel, Field, ValidationError

from workforce_api.agent.formatting import format_currency, month_name
from workforce_api.common.coerce import FieldError, as_int
from workforce_api.mcp.client import MCPClient
from workforce_api.mcp.types import MCPResponse

log = logging.getLogger(__name__)

Number = Union[int, float, str]


# ---------- argument schemas ----------

class ListEmployeesArgs(BaseModel):
    filters: Optional[str] = Field(None, description="Optional JSON string with filter conditions")
    orderBy: Optional[str] = Field(None, description="Optional JSON string with ordering options")


class EmployeeIdArgs(BaseModel):
    id: int = Field(..., description="The ID of the employee")


class CreateEmployeeArgs(BaseModel):
    name: str = Field(..., description="The full name of the employee")
    email: str = Field(..., description="The email address of the employee")
    telephone: str = Field(..., description="The telephone number of the employee")


class UpdateEmployeeArgs(BaseModel):
    id: int = Field(..., description="The ID of the employee to update")
    data: str = Field(..., description="JSON string with the employee data to update")


class AddMonthlyRecordArgs(BaseModel):
    employeeId: Number = Field(..., description="The ID of the employee to add the record for")
    weekendsWorked: Number = Field(..., description="Number of weekends worked in the month")
    holidaysWorked: Number = Field(..., description="Number of holidays worked in the month")
    year: Optional[Number] = Field(None, description="Year of the record (defaults to current year if not provided)")
    month: Optional[Number] = Field(None, description="Month of the record (1-12, defaults to current month if not provided)")
    notes: Optional[str] = Field(None, description="Optional notes about the record")


class EmployeeRecordsArgs(BaseModel):
    employeeId: Number = Field(..., description="The ID of the employee")
    year: Optional[Number] = Field(None, description="Optional year filter")
    month: Optional[Number] = Field(None, description="Optional month filter (1-12)")


class NoArgs(BaseModel):
    pass


# ---------- tool plumbing ----------

@dataclass
class Tool:
    name: str
    description: str
    args_schema: Type[BaseModel]
    func: Callable[[BaseModel], str]

    def invoke(self, args: dict | None = None) -> str:
        try:
            parsed = self.args_schema.model_validate(args or {})
        except ValidationError as ex:
            return "Error: invalid arguments: " + "; ".join(
                f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in ex.errors()
            )
        try:
            return self.func(parsed)
        except Exception as ex:
            log.exception("tool %s failed", self.name)
            return "Error: " + (str(ex) or "Unknown error")

    def spec(self) -> dict:
        """Function-calling description of this tool."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.args_schema.model_json_schema(),
            },
        }


def _error(resp: MCPResponse) -> str:
    return "Error: " + (resp.error or "Unknown error")


def _dump(data) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _parse_json(raw: str, what: str):
    try:
        return json.loads(raw), None
    except ValueError as ex:
        return None, f"Error parsing {what} JSON: {ex}"


def _record_lines(record: dict, employee: dict | None = None) -> list[str]:
    lines = [f"- Period: {month_name(record['month'])} {record['year']}"]
    if employee:
        lines.append(f"- Weekends Worked: {record['weekendsWorked']} (Rate: {format_currency(employee['weekendRate'])})")
        lines.append(f"- Holidays Worked: {record['holidaysWorked']} (Rate: {format_currency(employee['holidayRate'])})")
    else:
        lines.append(f"- Weekends Worked: {record['weekendsWorked']}")
        lines.append(f"- Holidays Worked: {record['holidaysWorked']}")
    lines += [
        f"- Weekend Amount: {format_currency(record['weekendAmount'])}",
        f"- Holiday Amount: {format_currency(record['holidayAmount'])}",
        f"- Total Amount: {format_currency(record['totalAmount'])}",
    ]
    if record.get("notes"):
        lines.append(f"- Notes: {record['notes']}")
    return lines


# ---------- palette ----------

def build_tools(client: MCPClient | None = None) -> list[Tool]:
    client = client or MCPClient()

    def list_employees(a: ListEmployeesArgs) -> str:
        params = {}
        if a.filters:
            params["where"], err = _parse_json(a.filters, "filters")
            if err: return err
        if a.orderBy:
            params["orderBy"], err = _parse_json(a.orderBy, "orderBy")
            if err: return err
        resp = client.list_employees(params)
        return _dump(resp.data) if resp.success else _error(resp)

    def get_employee(a: EmployeeIdArgs) -> str:
        resp = client.get_employee(a.id)
        return _dump(resp.data) if resp.success else _error(resp)

    def create_employee(a: CreateEmployeeArgs) -> str:
        resp = client.create_employee(a.model_dump())
        if not resp.success:
            return _error(resp)
        return f"Employee created successfully with ID: {resp.data['id']}"

    def update_employee(a: UpdateEmployeeArgs) -> str:
        data, err = _parse_json(a.data, "employee data")
        if err: return err
        resp = client.update_employee(a.id, data)
        return "Employee updated successfully" if resp.success else _error(resp)

    def delete_employee(a: EmployeeIdArgs) -> str:
        resp = client.delete_employee(a.id)
        return "Employee deleted successfully" if resp.success else _error(resp)

    def add_monthly_record(a: AddMonthlyRecordArgs) -> str:
        try:
            eid = as_int(a.employeeId, "Employee ID")
            weekends = as_int(a.weekendsWorked, "Weekends worked")
            holidays = as_int(a.holidaysWorked, "Holidays worked")
            year = as_int(a.year, "Year")
            month = as_int(a.month, "Month", minimum=1, maximum=12)
        except FieldError as ex:
            return f"Error: {ex}"

        emp_resp = client.get_employee(eid)
        if not emp_resp.success:
            return _error(emp_resp)
        employee = emp_resp.data

        resp = client.add_quick_monthly_record(
            eid, weekends, holidays, year=year, month=month, notes=a.notes or None,
        )
        if resp.success:
            lines = [f"Monthly record added successfully for {employee['name']}:"]
            return "\n".join(lines + _record_lines(resp.data, employee))
        if resp.is_conflict:
            lines = [f"Error: {resp.error}", "", "Existing record details:"]
            return "\n".join(lines + _record_lines(resp.data))
        return _error(resp)

    def get_employee_monthly_records(a: EmployeeRecordsArgs) -> str:
        resp = client.get_employee_monthly_records(a.employeeId, a.year, a.month)
        if not resp.success:
            return _error(resp)
        if not resp.data:
            return "No monthly records found for this employee"
        blocks = ["\n".join(_record_lines(r)) for r in resp.data]
        return "\n\n".join(blocks)

    def get_mcp_schema(a: NoArgs) -> str:
        return _dump(client.get_schema())

    return [
        Tool("list_employees", "Lists all employees in the system", ListEmployeesArgs, list_employees),
        Tool("get_employee", "Gets an employee by their ID", EmployeeIdArgs, get_employee),
        Tool("create_employee", "Creates a new employee", CreateEmployeeArgs, create_employee),
        Tool("update_employee", "Updates an existing employee", UpdateEmployeeArgs, update_employee),
        Tool("delete_employee", "Deletes an employee", EmployeeIdArgs, delete_employee),
        Tool("add_monthly_record",
             "Quickly adds a monthly work record for an employee with weekends and holidays worked",
             AddMonthlyRecordArgs, add_monthly_record),
        Tool("get_employee_monthly_records",
             "Lists the monthly work records of an employee, optionally for one year and/or month",
             EmployeeRecordsArgs, get_employee_monthly_records),
        Tool("get_mcp_schema",
             "Gets the MCP schema with information about available entities and operations",
             NoArgs, get_mcp_schema),
    ]


def tools_by_name(client: MCPClient | None = None) -> dict[str, Tool]:
    return {t.name: t for t in build_tools(client)}


def describe_tools(client: MCPClient | None = None) -> list[dict]:
    return [t.spec() for t in build_tools(client)]
