from __future__ import annotations

import json

import httpx
import pytest
import respx

from ghl_mcp.client import GHLAPIError, _build_path

BASE_URL = "https://services.leadconnectorhq.com"


# ── path building ───────────────────────────────────────────────────────


def test_build_path_simple():
    assert _build_path("/contacts/{contactId}", {"contactId": "c1"}) == "/contacts/c1"


def test_build_path_multiple():
    result = _build_path(
        "/social-media-posting/{locationId}/posts/{id}",
        {"locationId": "loc", "id": "p1"},
    )
    assert result == "/social-media-posting/loc/posts/p1"


def test_build_path_encodes_values():
    assert _build_path("/objects/{key}", {"key": "custom_objects/pets"}) == "/objects/custom_objects%2Fpets"


def test_build_path_missing_raises():
    with pytest.raises(ValueError, match="contactId"):
        _build_path("/contacts/{contactId}", {})


def test_build_path_empty_raises():
    with pytest.raises(ValueError, match="contactId"):
        _build_path("/contacts/{contactId}", {"contactId": ""})


# ── requests ────────────────────────────────────────────────────────────


@respx.mock
async def test_request_success(client):
    route = respx.get(f"{BASE_URL}/contacts/c1").mock(
        return_value=httpx.Response(200, json={"contact": {"id": "c1"}})
    )
    result = await client.request("GET", "/contacts/c1")
    assert result == {"contact": {"id": "c1"}}

    sent = route.calls.last.request
    assert sent.headers["Authorization"] == "Bearer test_api_key"
    assert sent.headers["Version"] == "2021-07-28"


@respx.mock
async def test_request_sends_query_and_body(client):
    route = respx.post(path="/contacts/search").mock(return_value=httpx.Response(200, json={"contacts": []}))
    await client.request("POST", "/contacts/search", query={"page": 2}, body={"query": "jane"})

    sent = route.calls.last.request
    assert sent.url.params["page"] == "2"
    assert json.loads(sent.content) == {"query": "jane"}


@respx.mock
async def test_request_form_body(client):
    route = respx.post(f"{BASE_URL}/medias/upload-file").mock(return_value=httpx.Response(200, json={"fileId": "f1"}))
    await client.request("POST", "/medias/upload-file", form={"fileUrl": "https://x.test/a.png", "hosted": True})

    sent = route.calls.last.request
    assert sent.headers["content-type"].startswith("application/x-www-form-urlencoded")
    assert b"hosted=true" in sent.content


@respx.mock
async def test_request_error_raises(client):
    respx.get(f"{BASE_URL}/contacts/bad").mock(
        return_value=httpx.Response(404, json={"message": "Contact not found"})
    )
    with pytest.raises(GHLAPIError) as exc_info:
        await client.request("GET", "/contacts/bad")
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Contact not found"
    assert str(exc_info.value) == "GHL API Error (404): Contact not found"


@respx.mock
async def test_request_error_message_list(client):
    respx.post(f"{BASE_URL}/contacts/").mock(
        return_value=httpx.Response(422, json={"message": ["email must be an email", "phone is invalid"]})
    )
    with pytest.raises(GHLAPIError, match="email must be an email; phone is invalid"):
        await client.request("POST", "/contacts/", body={})


@respx.mock
async def test_request_error_without_json(client):
    respx.get(f"{BASE_URL}/contacts/c1").mock(return_value=httpx.Response(502, text="Bad Gateway"))
    with pytest.raises(GHLAPIError) as exc_info:
        await client.request("GET", "/contacts/c1")
    assert exc_info.value.status_code == 502
    assert exc_info.value.detail == "Bad Gateway"


@respx.mock
async def test_request_timeout_propagates(client):
    respx.get(f"{BASE_URL}/contacts/c1").mock(side_effect=httpx.ReadTimeout("timed out"))
    with pytest.raises(httpx.TimeoutException):
        await client.request("GET", "/contacts/c1")


@respx.mock
async def test_request_empty_body(client):
    respx.delete(f"{BASE_URL}/contacts/c1").mock(return_value=httpx.Response(204))
    assert await client.request("DELETE", "/contacts/c1") == {"success": True}


@respx.mock
async def test_request_malformed_json(client):
    respx.get(f"{BASE_URL}/contacts/c1").mock(
        return_value=httpx.Response(200, content=b"{not json", headers={"content-type": "application/json"})
    )
    with pytest.raises(ValueError):
        await client.request("GET", "/contacts/c1")


@respx.mock
async def test_request_text_body(client):
    respx.get(f"{BASE_URL}/social-media-posting/loc_test/csv/c1").mock(
        return_value=httpx.Response(200, text="a,b\n1,2\n")
    )
    result = await client.request("GET", "/social-media-posting/loc_test/csv/c1")
    assert result["contentType"].startswith("text/plain")
    assert result["content"] == "a,b\n1,2\n"


@respx.mock
async def test_request_binary_body(client):
    respx.get(f"{BASE_URL}/medias/f1").mock(
        return_value=httpx.Response(200, content=b"\x89PNG", headers={"content-type": "image/png"})
    )
    result = await client.request("GET", "/medias/f1")
    assert result == {"contentType": "image/png", "base64": "iVBORw=="}


@respx.mock
async def test_connection(client):
    route = respx.get(f"{BASE_URL}/locations/loc_test").mock(
        return_value=httpx.Response(200, json={"location": {"id": "loc_test"}})
    )
    result = await client.test_connection()
    assert result["location"]["id"] == "loc_test"
    assert route.called
