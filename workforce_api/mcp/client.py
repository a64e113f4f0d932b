# workforce_api/mcp/client.py
"""
Small client for the dispatch endpoint.

With a base_url the client POSTs to a running server (requests); without one
it calls handle_mcp_request in-process, which needs an active app context.
Dispatch calls turn transport failures into failed MCPResponse values.
get_schema returns a plain dict and lets requests errors propagate.
"""
from __future__ import annotations

import logging
from datetime import datetime

import requests

from workforce_api.common.coerce import FieldError, as_int
from workforce_api.mcp.handler import handle_mcp_request
from workforce_api.mcp.types import MCPRequest, MCPResponse

log = logging.getLogger(__name__)

MIN_YEAR, MAX_YEAR = 2000, 2100


class MCPClient:
    def __init__(self, base_url: str | None = None, session: requests.Session | None = None, timeout: float = 30):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.session = session or (requests.Session() if base_url else None)
        self.timeout = timeout

    # ---------- transport ----------

    def send_request(self, request: MCPRequest) -> MCPResponse:
        if self.base_url is None:
            return handle_mcp_request(request)
        try:
            resp = self.session.post(self.base_url, json=request.to_dict(), timeout=self.timeout)
            if not resp.ok:
                raise RuntimeError(f"HTTP error! Status: {resp.status_code}")
            return MCPResponse.from_dict(resp.json())
        except (requests.RequestException, RuntimeError, ValueError) as ex:
            log.error("Error sending MCP request: %s", ex)
            return MCPResponse.fail(str(ex) or "Unknown error occurred")

    def get_schema(self) -> dict:
        if self.base_url is None:
            from workforce_api.mcp.schema import get_database_metadata, get_mcp_schema
            return {"schema": get_mcp_schema(), "metadata": get_database_metadata()}
        resp = self.session.get(f"{self.base_url}/schema", timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def _send(self, action, entity, params=None, data=None) -> MCPResponse:
        return self.send_request(MCPRequest(action=action, entity=entity, params=params or {}, data=data))

    # ---------- employees ----------

    def list_employees(self, params: dict | None = None) -> MCPResponse:
        return self._send("list", "employees", params)

    def get_employee(self, employee_id) -> MCPResponse:
        return self._send("get", "employee", {"id": employee_id})

    def create_employee(self, data: dict) -> MCPResponse:
        return self._send("create", "employee", data=data)

    def update_employee(self, employee_id, data: dict) -> MCPResponse:
        return self._send("update", "employee", {"id": employee_id}, data)

    def delete_employee(self, employee_id) -> MCPResponse:
        return self._send("delete", "employee", {"id": employee_id})

    # ---------- monthly work records ----------

    def list_monthly_records(self, params: dict | None = None) -> MCPResponse:
        return self._send("list", "monthlyWorkRecords", params)

    def get_employee_monthly_records(self, employee_id, year=None, month=None) -> MCPResponse:
        params = {"employeeId": employee_id}
        if year is not None: params["year"] = year
        if month is not None: params["month"] = month
        return self._send("getByEmployee", "monthlyWorkRecord", params)

    def get_monthly_record(self, record_id) -> MCPResponse:
        return self._send("get", "monthlyWorkRecord", {"id": record_id})

    def create_monthly_record(self, data: dict) -> MCPResponse:
        return self._send("create", "monthlyWorkRecord", data=data)

    def add_quick_monthly_record(self, employee_id, weekends_worked, holidays_worked,
                                 year=None, month=None, notes: str | None = None) -> MCPResponse:
        """Validate locally, default the period to the current month, then dispatch addQuickRecord."""
        try:
            eid = as_int(employee_id, "employeeId")
            if eid is None or eid <= 0:
                return MCPResponse.fail(f"Invalid employee ID: {employee_id}. Must be a positive number.")
            weekends = as_int(weekends_worked, "weekendsWorked")
            if weekends is None or weekends < 0:
                return MCPResponse.fail(f"Invalid weekends worked: {weekends_worked}. Must be a non-negative number.")
            holidays = as_int(holidays_worked, "holidaysWorked")
            if holidays is None or holidays < 0:
                return MCPResponse.fail(f"Invalid holidays worked: {holidays_worked}. Must be a non-negative number.")
            now = datetime.now()
            y = as_int(year, "year")
            m = as_int(month, "month")
        except FieldError as ex:
            return MCPResponse.fail(str(ex))

        y = now.year if y is None else y
        m = now.month if m is None else m
        if not MIN_YEAR <= y <= MAX_YEAR:
            return MCPResponse.fail(f"Invalid year: {y}. Must be between {MIN_YEAR} and {MAX_YEAR}.")
        if not 1 <= m <= 12:
            return MCPResponse.fail(f"Invalid month: {m}. Must be between 1 and 12.")

        data = {"employeeId": eid, "weekendsWorked": weekends, "holidaysWorked": holidays, "year": y, "month": m}
        if notes:
            data["notes"] = notes
        log.debug("addQuickRecord %s", data)
        return self._send("addQuickRecord", "monthlyWorkRecord", data=data)

    def update_monthly_record(self, record_id, data: dict) -> MCPResponse:
        return self._send("update", "monthlyWorkRecord", {"id": record_id}, data)

    def delete_monthly_record(self, record_id) -> MCPResponse:
        return self._send("delete", "monthlyWorkRecord", {"id": record_id})
