# workforce_api/mcp/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from workforce_api.common.coerce import FieldError, as_int


# ---------- routing vocabulary ----------

class Entity(Enum):
    EMPLOYEE = "employee"
    MONTHLY_WORK_RECORD = "monthlyworkrecord"

    @classmethod
    def resolve(cls, name: str | None) -> "Entity | None":
        return _ENTITY_ALIASES.get((name or "").strip().lower())


_ENTITY_ALIASES = {
    "employee": Entity.EMPLOYEE,
    "employees": Entity.EMPLOYEE,
    "monthlyworkrecord": Entity.MONTHLY_WORK_RECORD,
    "monthlyworkrecords": Entity.MONTHLY_WORK_RECORD,
}


class Action(Enum):
    LIST = "list"
    GET = "get"
    CREATE = "create"
    ADD_QUICK_RECORD = "addquickrecord"
    UPDATE = "update"
    DELETE = "delete"
    GET_BY_EMPLOYEE = "getbyemployee"

    @classmethod
    def resolve(cls, name: str | None) -> "Action | None":
        return _ACTION_ALIASES.get((name or "").strip().lower())


_ACTION_ALIASES = {
    "list": Action.LIST,
    "getall": Action.LIST,
    "get": Action.GET,
    "getbyid": Action.GET,
    "create": Action.CREATE,
    "addquickrecord": Action.ADD_QUICK_RECORD,
    "update": Action.UPDATE,
    "delete": Action.DELETE,
    "getbyemployee": Action.GET_BY_EMPLOYEE,
}


# ---------- envelopes ----------

class Kind(str, Enum):
    """Why a response failed. Not part of the wire envelope."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    ROUTING = "routing"
    FAULT = "fault"


@dataclass
class MCPRequest:
    action: str | None = None
    entity: str | None = None
    params: dict = field(default_factory=dict)
    data: dict | None = None

    @classmethod
    def from_dict(cls, body) -> "MCPRequest":
        if not isinstance(body, dict):
            raise FieldError("request", "Invalid request: body must be an object")
        params = body.get("params") or {}
        data = body.get("data")
        if not isinstance(params, dict):
            raise FieldError("params", "Invalid request: params must be an object")
        if data is not None and not isinstance(data, dict):
            raise FieldError("data", "Invalid request: data must be an object")
        action, entity = body.get("action"), body.get("entity")
        return cls(
            action=action if isinstance(action, str) else None,
            entity=entity if isinstance(entity, str) else None,
            params=params,
            data=data,
        )

    def to_dict(self) -> dict:
        out = {"action": self.action, "entity": self.entity}
        if self.params:
            out["params"] = self.params
        if self.data is not None:
            out["data"] = self.data
        return out


@dataclass
class MCPResponse:
    """
    Three observable states share one envelope:
      ok        -> success=True,  data=<payload or None>
      conflict  -> success=False, error=..., data=<the existing record>
      failure   -> success=False, error=...
    """
    success: bool
    data: Any = None
    error: str | None = None
    kind: Kind | None = None

    @classmethod
    def ok(cls, data=None) -> "MCPResponse":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, kind: Kind = Kind.VALIDATION) -> "MCPResponse":
        return cls(success=False, error=error, kind=kind)

    @classmethod
    def conflict(cls, error: str, existing) -> "MCPResponse":
        return cls(success=False, error=error, data=existing, kind=Kind.CONFLICT)

    @property
    def is_conflict(self) -> bool:
        return not self.success and self.data is not None

    @classmethod
    def from_dict(cls, body: dict) -> "MCPResponse":
        return cls(success=bool(body.get("success")), data=body.get("data"), error=body.get("error"))

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"success": self.success}
        if self.data is not None:
            out["data"] = self.data
        if self.error is not None:
            out["error"] = self.error
        return out


# ---------- query options ----------

MAX_LIMIT = 500


@dataclass
class QueryOptions:
    """
    Whitelisted list options. Field names are the wire (camelCase) names;
    `where` values are already coerced.
    """
    where: dict[str, Any] = field(default_factory=dict)
    order_by: list[tuple[str, bool]] = field(default_factory=list)
    limit: int | None = None
    offset: int | None = None

    @classmethod
    def from_params(cls, params: dict | None,
                    filterable: dict[str, Callable[[Any, str], Any]],
                    sortable: set[str]) -> "QueryOptions":
        params = params or {}
        known = {"where", "orderBy", "order_by", "limit", "offset"}
        unknown = sorted(k for k in params if k not in known)
        if unknown:
            raise FieldError(unknown[0], "Unknown query option(s): " + ", ".join(unknown))

        where = params.get("where") or {}
        if not isinstance(where, dict):
            raise FieldError("where", "where must be an object")
        filters = {}
        for key, raw in where.items():
            coerce = filterable.get(key)
            if coerce is None:
                raise FieldError(key, f"Unknown filter field: {key}")
            filters[key] = coerce(raw, key)

        raw_order = params.get("orderBy", params.get("order_by"))
        order = _parse_order(raw_order, sortable)

        limit = as_int(params.get("limit"), "limit", minimum=1, maximum=MAX_LIMIT)
        offset = as_int(params.get("offset"), "offset", minimum=0)
        return cls(where=filters, order_by=order, limit=limit, offset=offset)


def _direction(val, key: str) -> bool:
    s = str(val or "asc").strip().lower()
    if s not in ("asc", "desc"):
        raise FieldError(key, f"Invalid order direction for {key}: {val}")
    return s == "asc"


def _parse_order(raw, sortable: set[str]) -> list[tuple[str, bool]]:
    """
    Accepts {"name": "asc"}, [{"year": "desc"}, {"month": "desc"}] or "name,-createdAt".
    """
    if raw in (None, "", [], {}):
        return []
    items: list[tuple[str, bool]] = []
    if isinstance(raw, str):
        for part in [p.strip() for p in raw.split(",") if p.strip()]:
            asc_order = not part.startswith("-")
            items.append((part.lstrip("-"), asc_order))
    else:
        entries = raw if isinstance(raw, list) else [raw]
        for entry in entries:
            if not isinstance(entry, dict):
                raise FieldError("orderBy", "orderBy entries must be objects")
            for key, direction in entry.items():
                items.append((key, _direction(direction, key)))
    for key, _ in items:
        if key not in sortable:
            raise FieldError(key, f"Unknown sort field: {key}")
    return items
