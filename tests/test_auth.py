from __future__ import annotations

from ghl_mcp.auth import build_headers


def test_headers_carry_bearer_token(config):
    headers = build_headers(config)
    assert headers["Authorization"] == "Bearer test_api_key"


def test_headers_pin_api_version(config):
    headers = build_headers(config)
    assert headers["Version"] == "2021-07-28"
    assert headers["Accept"] == "application/json"
    assert "Content-Type" not in headers
