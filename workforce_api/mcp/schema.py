# workforce_api/mcp/schema.py
from __future__ import annotations

from datetime import datetime, timezone

from workforce_api import store
from workforce_api.models.employee import Employee
from workforce_api.models.monthly_work_record import MonthlyWorkRecord

SCHEMA_VERSION = "1.0"


def _prop(type_, description, required=False, **extra):
    return {"type": type_, "description": description, "required": required, **extra}


def _id_param(what):
    return {"id": _prop("integer", f"{what} ID", True)}


_LIST_PARAMS = {
    "where": _prop("object", "Equality filters on whitelisted fields"),
    "orderBy": _prop("object", 'Ordering, e.g. {"name": "asc"} or "name,-createdAt"'),
    "limit": _prop("integer", "Maximum rows to return (1-500)"),
    "offset": _prop("integer", "Rows to skip"),
}

EMPLOYEE_SCHEMA = {
    "name": "Employee",
    "description": "Represents an employee in the system",
    "properties": {
        "id": _prop("integer", "Unique identifier for the employee (store-assigned)"),
        "name": _prop("string", "Full name of the employee", True),
        "email": _prop("string", "Email address of the employee (must be unique)", True),
        "telephone": _prop("string", "Contact telephone number of the employee", True),
        "cpf": _prop("string", "CPF identity document"),
        "rg": _prop("string", "RG identity document"),
        "hireDate": _prop("string", "Hire date (YYYY-MM-DD)"),
        "isActive": _prop("boolean", "Whether the employee is active"),
        "salary": _prop("number", "Base monthly salary"),
        "weekendRate": _prop("number", "Amount paid per weekend day worked"),
        "holidayRate": _prop("number", "Amount paid per holiday worked"),
        "hasInsurance": _prop("boolean", "Insurance benefit flag"),
        "insuranceAmount": _prop("number", "Insurance benefit amount"),
        "hasTransportFee": _prop("boolean", "Transport benefit flag"),
        "transportFeeDaily": _prop("number", "Daily transport fee"),
        "hasFoodSupport": _prop("boolean", "Food support benefit flag"),
        "foodSupportAmount": _prop("number", "Food support amount"),
        "bankName": _prop("string", "Bank name"),
        "bankBranch": _prop("string", "Bank branch"),
        "bankAccount": _prop("string", "Bank account"),
        "bankPix": _prop("string", "PIX key"),
    },
    "actions": {
        "list": {"description": "Get a list of all employees (ordered by name)", "params": _LIST_PARAMS},
        "get": {"description": "Get a single employee by ID", "params": _id_param("Employee")},
        "create": {
            "description": "Create a new employee",
            "data": {"type": "object", "description": "Employee data", "required": True},
        },
        "update": {
            "description": "Update an existing employee (partial)",
            "params": _id_param("Employee"),
            "data": {"type": "object", "description": "Employee fields to change", "required": True},
        },
        "delete": {
            "description": "Delete an employee and its monthly work records",
            "params": _id_param("Employee"),
        },
    },
}

_RECORD_DATA = {
    "type": "object",
    "description": "Monthly work record data",
    "required": True,
    "properties": {
        "employeeId": {"type": "integer", "required": True},
        "year": {"type": "integer", "required": False, "description": "Defaults to the current year"},
        "month": {"type": "integer", "required": False, "description": "1-12, defaults to the current month"},
        "weekendsWorked": {"type": "integer", "required": True},
        "holidaysWorked": {"type": "integer", "required": True},
        "notes": {"type": "string", "required": False},
    },
}

MONTHLY_WORK_RECORD_SCHEMA = {
    "name": "MonthlyWorkRecord",
    "description": "Represents a monthly work record for an employee",
    "properties": {
        "id": _prop("integer", "Unique identifier for the record"),
        "employeeId": _prop("integer", "ID of the employee this record belongs to", True),
        "year": _prop("integer", "Year of the record"),
        "month": _prop("integer", "Month of the record (1-12)"),
        "weekendsWorked": _prop("integer", "Number of weekend days worked in the month", True),
        "holidaysWorked": _prop("integer", "Number of holidays worked in the month", True),
        "weekendAmount": _prop("number", "weekendRate x weekendsWorked (derived)"),
        "holidayAmount": _prop("number", "holidayRate x holidaysWorked (derived)"),
        "totalAmount": _prop("number", "weekendAmount + holidayAmount (derived)"),
        "notes": _prop("string", "Optional notes about the record"),
    },
    "actions": {
        "list": {"description": "Get a list of all monthly work records", "params": _LIST_PARAMS},
        "getByEmployee": {
            "description": "Get monthly work records for a specific employee",
            "params": {
                "employeeId": _prop("integer", "Employee ID", True),
                "year": _prop("integer", "Filter by year"),
                "month": _prop("integer", "Filter by month"),
            },
        },
        "get": {"description": "Get a single monthly work record by ID", "params": _id_param("Record")},
        "create": {"description": "Create a new monthly work record", "data": _RECORD_DATA},
        "addQuickRecord": {"description": "Quickly add a monthly work record for an employee", "data": _RECORD_DATA},
        "update": {
            "description": "Update an existing monthly work record",
            "params": _id_param("Record"),
            "data": {"type": "object", "description": "Monthly work record data to update", "required": True},
        },
        "delete": {"description": "Delete a monthly work record", "params": _id_param("Record")},
    },
}


def get_mcp_schema() -> dict:
    return {
        "version": SCHEMA_VERSION,
        "description": "Workforce API Schema",
        "entities": {
            "employee": EMPLOYEE_SCHEMA,
            "monthlyWorkRecord": MONTHLY_WORK_RECORD_SCHEMA,
        },
    }


def get_database_metadata() -> dict:
    return {
        "counts": {
            "employees": store.count(Employee),
            "monthlyWorkRecords": store.count(MonthlyWorkRecord),
        },
        "lastUpdated": datetime.now(timezone.utc).isoformat(),
    }
