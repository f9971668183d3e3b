from __future__ import annotations

import httpx
import pytest
import respx

from ghl_mcp.rpc import (
    INTERNAL_ERROR,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PROTOCOL_VERSION,
    dump_result,
    error_response,
    handle_message,
)

BASE_URL = "https://services.leadconnectorhq.com"


def _request(method, params=None, msg_id=1):
    message = {"jsonrpc": "2.0", "id": msg_id, "method": method}
    if params is not None:
        message["params"] = params
    return message


# ── lifecycle ───────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "params",
    [
        None,
        {"protocolVersion": "2024-11-05", "clientInfo": {"name": "test", "version": "1"}},
        {"protocolVersion": "2025-06-18", "capabilities": {}},
    ],
)
async def test_initialize_returns_fixed_protocol(registry, params):
    response = await handle_message(registry, _request("initialize", params))
    result = response["result"]
    assert response["id"] == 1
    assert result["protocolVersion"] == PROTOCOL_VERSION == "2024-11-05"
    assert result["capabilities"]["tools"] == {"listChanged": True}
    assert result["serverInfo"]["name"] == "ghl-mcp-server"


async def test_initialized_notification_has_no_response(registry):
    message = {"jsonrpc": "2.0", "method": "notifications/initialized"}
    assert await handle_message(registry, message) is None


async def test_cancelled_notification_is_acknowledged(registry):
    message = {"jsonrpc": "2.0", "method": "notifications/cancelled", "params": {"requestId": 3}}
    assert await handle_message(registry, message) == {"jsonrpc": "2.0", "id": None}


async def test_wrong_version_is_invalid_request(registry):
    response = await handle_message(registry, {"jsonrpc": "1.0", "id": 7, "method": "tools/list"})
    assert response["id"] == 7
    assert response["error"]["code"] == INVALID_REQUEST


async def test_unknown_method(registry):
    response = await handle_message(registry, _request("prompts/list", msg_id=9))
    assert response == {
        "jsonrpc": "2.0",
        "id": 9,
        "error": {"code": METHOD_NOT_FOUND, "message": "Method not found: prompts/list"},
    }


# ── tools ───────────────────────────────────────────────────────────────


async def test_tools_list(registry):
    response = await handle_message(registry, _request("tools/list"))
    tools = response["result"]["tools"]
    assert len(tools) == len(registry) == 253
    assert [t["name"] for t in tools] == registry.names()
    assert all(t["inputSchema"]["type"] == "object" for t in tools)


@respx.mock
async def test_tools_call_create_contact(registry):
    respx.post(f"{BASE_URL}/contacts/").mock(return_value=httpx.Response(201, json={"contact": {"id": "c1"}}))
    response = await handle_message(
        registry,
        _request("tools/call", {"name": "create_contact", "arguments": {"firstName": "A"}}, msg_id=2),
    )
    assert response == {
        "jsonrpc": "2.0",
        "id": 2,
        "result": {"content": [{"type": "text", "text": '{\n  "contact": {\n    "id": "c1"\n  }\n}'}]},
    }


async def test_tools_call_unknown_tool(registry):
    response = await handle_message(registry, _request("tools/call", {"name": "nope", "arguments": {}}))
    assert response["error"]["code"] == INTERNAL_ERROR
    assert response["error"]["message"] == "Tool execution failed: Unknown tool: nope"


@respx.mock
async def test_tools_call_upstream_error(registry):
    respx.post(f"{BASE_URL}/contacts/").mock(
        return_value=httpx.Response(422, json={"message": "email must be an email"})
    )
    response = await handle_message(
        registry, _request("tools/call", {"name": "create_contact", "arguments": {"email": "x"}})
    )
    assert response["error"]["code"] == INTERNAL_ERROR
    assert response["error"]["message"] == "Tool execution failed: GHL API Error (422): email must be an email"


async def test_tools_call_missing_path_argument(registry):
    response = await handle_message(registry, _request("tools/call", {"name": "get_contact"}))
    assert response["error"]["message"] == "Tool execution failed: Missing required path parameter: contactId"


# ── resources ───────────────────────────────────────────────────────────


async def test_resources_list_is_empty(registry):
    response = await handle_message(registry, _request("resources/list"))
    assert response["result"] == {"resources": []}


async def test_resource_templates_mirror_tools(registry):
    response = await handle_message(registry, _request("resources/templates"))
    templates = response["result"]["resourceTemplates"]
    assert len(templates) == len(registry)
    assert templates[0]["uri"] == "tool://ghl/create_contact"
    assert templates[0]["mimeType"] == "application/json"


# ── helpers ─────────────────────────────────────────────────────────────


def test_dump_result_keeps_unicode():
    assert dump_result({"name": "Zoë"}) == '{\n  "name": "Zoë"\n}'


def test_error_response_data_is_optional():
    assert "data" not in error_response(1, INTERNAL_ERROR, "boom")["error"]
    assert error_response(1, INTERNAL_ERROR, "boom", "detail")["error"]["data"] == "detail"
