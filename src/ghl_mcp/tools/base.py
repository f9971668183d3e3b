"""Shared shape of every GoHighLevel tool area.

Each area module declares a static ``OPERATIONS`` table. :class:`ToolModule`
turns that table into MCP tool descriptors and into exactly one upstream call
per invocation.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from ..client import GHLClient, _build_path, _path_params

WRITE_METHODS = ("POST", "PUT", "PATCH")


class Operation(NamedTuple):
    method: str
    path: str
    description: str
    properties: dict[str, Any] | None = None
    required: tuple[str, ...] = ()
    # argument name that defaults to the configured location ("altId" also sets altType)
    location: str | None = None
    # arguments always sent in the query string, whatever the method
    query: tuple[str, ...] = ()
    # "query", "body" or "form"; derived from the method when unset
    payload: str | None = None
    # fields merged over the payload
    fixed: dict[str, Any] | None = None
    # argument whose value is sent as the whole request body
    body_arg: str | None = None


# ── JSON schema helpers ─────────────────────────────────────────────────


def string(description: str, enum: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "string", "description": description}
    if enum:
        schema["enum"] = enum
    return schema


def integer(description: str) -> dict[str, Any]:
    return {"type": "integer", "description": description}


def number(description: str) -> dict[str, Any]:
    return {"type": "number", "description": description}


def boolean(description: str) -> dict[str, Any]:
    return {"type": "boolean", "description": description}


def array(description: str, items: dict[str, Any] | None = None) -> dict[str, Any]:
    return {"type": "array", "description": description, "items": items or {"type": "string"}}


def obj(description: str) -> dict[str, Any]:
    return {"type": "object", "description": description}


def paging(offset: str = "offset") -> dict[str, Any]:
    """``limit`` plus an offset-style argument named *offset* (``offset`` or ``skip``)."""
    return {"limit": integer("Maximum number of results"), offset: integer("Number of results to skip")}


_LOCATION_HELP = {
    "locationId": "Location ID (defaults to the configured location)",
    "location_id": "Location ID (defaults to the configured location)",
    "altId": "Location ID used as altId (defaults to the configured location)",
}


class ToolModule:
    """One functional area of the API: its descriptors plus the call that backs each."""

    def __init__(self, area: str, operations: dict[str, Operation], client: GHLClient) -> None:
        self.area = area
        self.operations = operations
        self.client = client
        self._descriptors = [self._describe(name, op) for name, op in operations.items()]

    def __repr__(self) -> str:
        return f"ToolModule({self.area!r}, {len(self.operations)} tools)"

    @staticmethod
    def _describe(name: str, op: Operation) -> dict[str, Any]:
        properties = dict(op.properties or {})
        if op.location and op.location not in properties:
            properties[op.location] = string(_LOCATION_HELP.get(op.location, "Location ID"))
        schema: dict[str, Any] = {"type": "object", "properties": properties}
        if op.required:
            schema["required"] = list(op.required)
        return {"name": name, "description": op.description, "inputSchema": schema}

    def descriptors(self) -> list[dict[str, Any]]:
        return list(self._descriptors)

    def names(self) -> list[str]:
        return list(self.operations)

    async def execute(self, name: str, arguments: dict[str, Any] | None = None) -> Any:
        op = self.operations[name]
        args = dict(arguments or {})

        if op.location:
            if args.get(op.location) in (None, ""):
                args[op.location] = self.client.location_id
            if op.location == "altId" and args.get("altType") in (None, ""):
                args["altType"] = "location"

        try:
            path = _build_path(op.path, args)
        except ValueError as exc:
            raise ValueError(f"Missing required path parameter: {exc}") from None
        for ph in _path_params(op.path):
            args.pop(ph, None)

        if op.fixed:
            args.update(op.fixed)

        query = {k: args.pop(k) for k in op.query if k in args}
        body: Any = None
        form: dict[str, Any] | None = None

        if op.body_arg is not None:
            body = args.pop(op.body_arg, None)
            query.update(args)
        else:
            payload = op.payload or ("body" if op.method in WRITE_METHODS else "query")
            if payload == "query":
                query.update(args)
            elif payload == "form":
                form = args
            else:
                body = args

        return await self.client.request(op.method, path, query=query, body=body, form=form)
