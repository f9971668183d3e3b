from __future__ import annotations

import importlib
import json

import httpx
import pytest
import respx

from ghl_mcp.client import GHLAPIError, _path_params
from ghl_mcp.tools import AREAS
from ghl_mcp.tools.base import Operation, ToolModule

BASE_URL = "https://services.leadconnectorhq.com"

ALL_MODULES = [importlib.import_module(f"ghl_mcp.tools.{area}") for area in AREAS]

EXPECTED_COUNTS = {
    "contacts": 31,
    "conversations": 20,
    "blogs": 7,
    "opportunities": 10,
    "calendars": 39,
    "email": 5,
    "locations": 24,
    "email_isv": 1,
    "social_media": 17,
    "media": 3,
    "objects": 9,
    "associations": 10,
    "custom_fields_v2": 8,
    "workflows": 1,
    "surveys": 2,
    "store": 18,
    "products": 10,
    "payments": 20,
    "invoices": 18,
}

VALID_METHODS = {"GET", "POST", "PUT", "PATCH", "DELETE"}
LOCATION_ARGS = {None, "locationId", "location_id", "altId"}
PAYLOADS = {None, "query", "body", "form"}


def _operations():
    for module in ALL_MODULES:
        for name, op in module.OPERATIONS.items():
            yield pytest.param(name, op, id=name)


# ── operation tables ────────────────────────────────────────────────────


@pytest.mark.parametrize("module", ALL_MODULES, ids=lambda m: m.__name__.split(".")[-1])
def test_module_has_operations(module):
    assert isinstance(module.OPERATIONS, dict)
    assert all(isinstance(op, Operation) for op in module.OPERATIONS.values())
    assert len(module.OPERATIONS) == EXPECTED_COUNTS[module.__name__.split(".")[-1]]


@pytest.mark.parametrize(("name", "op"), list(_operations()))
def test_operation_format(name, op):
    assert op.method in VALID_METHODS
    assert op.path.startswith("/")
    assert op.description
    assert op.location in LOCATION_ARGS
    assert op.payload in PAYLOADS


@pytest.mark.parametrize(("name", "op"), list(_operations()))
def test_path_placeholders_are_supplied(name, op):
    supplied = set(op.required) | {op.location}
    for ph in _path_params(op.path):
        assert ph in supplied, f"{name}: {{{ph}}} is neither required nor defaulted"


@pytest.mark.parametrize(("name", "op"), list(_operations()))
def test_required_arguments_are_declared(name, op):
    properties = set(op.properties or {})
    assert set(op.required) <= properties
    if op.body_arg:
        assert op.body_arg in properties
    for key in op.query:
        assert key in properties or key == op.location


def test_tool_names_unique_across_areas():
    names = [name for module in ALL_MODULES for name in module.OPERATIONS]
    assert len(names) == len(set(names))
    assert len(names) == 253


# ── descriptors ─────────────────────────────────────────────────────────


def test_descriptor_adds_location_property(client):
    module = ToolModule("contacts", importlib.import_module("ghl_mcp.tools.contacts").OPERATIONS, client)
    descriptor = next(d for d in module.descriptors() if d["name"] == "create_contact")
    schema = descriptor["inputSchema"]
    assert schema["type"] == "object"
    assert "locationId" in schema["properties"]
    assert "required" not in schema


def test_descriptor_lists_required(client):
    module = ToolModule("contacts", importlib.import_module("ghl_mcp.tools.contacts").OPERATIONS, client)
    descriptor = next(d for d in module.descriptors() if d["name"] == "get_contact")
    assert descriptor["inputSchema"]["required"] == ["contactId"]
    assert descriptor["description"] == "Get a contact by ID"


# ── request routing ─────────────────────────────────────────────────────


def _module(area, client):
    return ToolModule(area, importlib.import_module(f"ghl_mcp.tools.{area}").OPERATIONS, client)


@respx.mock
async def test_write_sends_body_with_location(client):
    route = respx.post(f"{BASE_URL}/contacts/").mock(
        return_value=httpx.Response(201, json={"contact": {"id": "c1"}})
    )
    result = await _module("contacts", client).execute("create_contact", {"firstName": "Jane"})
    assert result == {"contact": {"id": "c1"}}

    sent = route.calls.last.request
    assert json.loads(sent.content) == {"firstName": "Jane", "locationId": "loc_test"}
    assert not sent.url.query


@respx.mock
async def test_explicit_location_wins(client):
    route = respx.post(f"{BASE_URL}/contacts/").mock(return_value=httpx.Response(201, json={}))
    await _module("contacts", client).execute("create_contact", {"firstName": "Jane", "locationId": "other"})
    assert json.loads(route.calls.last.request.content)["locationId"] == "other"


@respx.mock
async def test_null_location_falls_back_to_configured(client):
    route = respx.post(f"{BASE_URL}/contacts/").mock(return_value=httpx.Response(201, json={}))
    await _module("contacts", client).execute("create_contact", {"firstName": "Jane", "locationId": None})
    assert json.loads(route.calls.last.request.content)["locationId"] == "loc_test"


@respx.mock
async def test_empty_location_query_falls_back_to_configured(client):
    route = respx.get(path="/medias/files").mock(return_value=httpx.Response(200, json={"files": []}))
    await _module("media", client).execute("get_media_files", {"altId": "", "altType": None})
    params = route.calls.last.request.url.params
    assert params["altId"] == "loc_test"
    assert params["altType"] == "location"


@respx.mock
async def test_path_arguments_leave_the_payload(client):
    route = respx.get(f"{BASE_URL}/contacts/c1").mock(return_value=httpx.Response(200, json={"contact": {}}))
    await _module("contacts", client).execute("get_contact", {"contactId": "c1"})
    sent = route.calls.last.request
    assert not sent.url.query
    assert not sent.content


@respx.mock
async def test_read_sends_query(client):
    route = respx.get(path="/opportunities/search").mock(
        return_value=httpx.Response(200, json={"opportunities": []})
    )
    await _module("opportunities", client).execute("search_opportunities", {"status": "open"})
    params = route.calls.last.request.url.params
    assert params["location_id"] == "loc_test"
    assert params["status"] == "open"


@respx.mock
async def test_delete_with_body(client):
    route = respx.delete(f"{BASE_URL}/contacts/c1/tags").mock(return_value=httpx.Response(200, json={"tags": []}))
    await _module("contacts", client).execute("remove_contact_tags", {"contactId": "c1", "tags": ["vip"]})
    assert json.loads(route.calls.last.request.content) == {"tags": ["vip"]}


@respx.mock
async def test_query_keys_split_from_body(client):
    route = respx.post(path="/email/verify").mock(return_value=httpx.Response(200, json={"result": "deliverable"}))
    await _module("email_isv", client).execute("verify_email", {"type": "email", "verify": "a@b.test"})
    sent = route.calls.last.request
    assert sent.url.params["locationId"] == "loc_test"
    assert json.loads(sent.content) == {"type": "email", "verify": "a@b.test"}


@respx.mock
async def test_alt_id_sets_alt_type(client):
    route = respx.get(path="/medias/files").mock(return_value=httpx.Response(200, json={"files": []}))
    await _module("media", client).execute("get_media_files", {"type": "file"})
    params = route.calls.last.request.url.params
    assert params["altId"] == "loc_test"
    assert params["altType"] == "location"
    assert params["type"] == "file"


@respx.mock
async def test_fixed_fields_are_merged(client):
    route = respx.post(f"{BASE_URL}/conversations/messages").mock(
        return_value=httpx.Response(200, json={"messageId": "m1"})
    )
    await _module("conversations", client).execute("send_sms", {"contactId": "c1", "message": "hi"})
    assert json.loads(route.calls.last.request.content) == {"contactId": "c1", "message": "hi", "type": "SMS"}


@respx.mock
async def test_body_argument_is_whole_body(client):
    route = respx.post(f"{BASE_URL}/calendars/cal1/notifications").mock(
        return_value=httpx.Response(200, json=[])
    )
    notifications = [{"receiverType": "contact", "channel": "email"}]
    await _module("calendars", client).execute(
        "create_calendar_notifications", {"calendarId": "cal1", "notifications": notifications}
    )
    assert json.loads(route.calls.last.request.content) == notifications


@respx.mock
async def test_form_upload(client):
    route = respx.post(f"{BASE_URL}/medias/upload-file").mock(return_value=httpx.Response(200, json={"fileId": "f1"}))
    await _module("media", client).execute("upload_media_file", {"fileUrl": "https://cdn.test/a.png"})
    content = route.calls.last.request.content
    assert b"hosted=true" in content
    assert b"altId=loc_test" in content


async def test_missing_path_argument(client):
    with pytest.raises(ValueError, match="Missing required path parameter: contactId"):
        await _module("contacts", client).execute("get_contact", {})


@respx.mock
async def test_upstream_error_propagates(client):
    respx.get(f"{BASE_URL}/contacts/c1").mock(return_value=httpx.Response(401, json={"message": "Unauthorized"}))
    with pytest.raises(GHLAPIError, match="401"):
        await _module("contacts", client).execute("get_contact", {"contactId": "c1"})
