"""JSON-RPC handling for ``POST /sse``.

Each message is answered directly in the HTTP response body. Notifications
that need no answer return ``None``.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from . import __version__
from .registry import ToolRegistry

log = logging.getLogger("ghl_mcp")

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "ghl-mcp-server"

INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603
PARSE_ERROR = -32700


def server_info() -> dict[str, str]:
    return {"name": SERVER_NAME, "version": __version__}


def dump_result(result: Any) -> str:
    """Serialize a tool result the way every transport returns it: indented JSON text."""
    return json.dumps(result, indent=2, ensure_ascii=False)


def error_response(msg_id: Any, code: int, message: str, data: Any = None) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": msg_id, "error": error}


def _result(msg_id: Any, result: dict[str, Any]) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": msg_id, "result": result}


async def handle_message(registry: ToolRegistry, message: dict[str, Any]) -> dict[str, Any] | None:
    msg_id = message.get("id")
    method = message.get("method")
    params = message.get("params") or {}

    if message.get("jsonrpc") != "2.0":
        log.warning("Invalid JSON-RPC version: %r", message.get("jsonrpc"))
        return error_response(msg_id, INVALID_REQUEST, "Invalid Request")

    log.info("JSON-RPC request: %s (id=%s)", method, msg_id)

    if method == "initialize":
        log.info("Client info: %s", params.get("clientInfo") if isinstance(params, dict) else None)
        return _result(msg_id, {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {
                "tools": {"listChanged": True},
                "resources": {"subscribe": False, "listChanged": False},
            },
            "serverInfo": server_info(),
        })

    if method == "notifications/initialized":
        return None

    if method == "notifications/cancelled":
        # Acknowledged only; the upstream call in flight runs to completion.
        log.info("Cancellation notice received: %s", params)
        return {"jsonrpc": "2.0", "id": None}

    if method == "tools/list":
        return _result(msg_id, {"tools": registry.list_tools()})

    if method == "tools/call":
        name = params.get("name")
        try:
            result = await registry.invoke(name, params.get("arguments") or {})
        except Exception as exc:
            log.error("Tool %s failed: %s", name, exc)
            return error_response(msg_id, INTERNAL_ERROR, f"Tool execution failed: {exc}")
        return _result(msg_id, {"content": [{"type": "text", "text": dump_result(result)}]})

    if method == "resources/list":
        return _result(msg_id, {"resources": []})

    if method == "resources/templates":
        return _result(msg_id, {
            "resourceTemplates": [
                {
                    "uri": f"tool://ghl/{tool['name']}",
                    "name": tool["name"],
                    "description": tool["description"],
                    "mimeType": "application/json",
                }
                for tool in registry.list_tools()
            ]
        })

    log.warning("Unknown method %r", method)
    return error_response(msg_id, METHOD_NOT_FOUND, f"Method not found: {method}")
