from __future__ import annotations

import pytest

from ghl_mcp.config import Mode, ServerSettings, select_mode


def test_config_loads_credentials(config):
    assert config.api_key == "test_api_key"
    assert config.location_id == "loc_test"
    assert config.base_url == "https://services.leadconnectorhq.com"
    assert config.api_version == "2021-07-28"


def test_config_requires_api_key(monkeypatch):
    monkeypatch.delenv("GHL_API_KEY", raising=False)
    from ghl_mcp.config import GHLConfig

    with pytest.raises(RuntimeError, match="GHL_API_KEY"):
        GHLConfig()


def test_config_requires_location_id(monkeypatch):
    monkeypatch.setenv("GHL_LOCATION_ID", "")
    from ghl_mcp.config import GHLConfig

    with pytest.raises(RuntimeError, match="GHL_LOCATION_ID"):
        GHLConfig()


def test_config_custom_base_url(monkeypatch):
    monkeypatch.setenv("GHL_BASE_URL", "https://custom.api.com")
    from ghl_mcp.config import GHLConfig

    cfg = GHLConfig()
    assert cfg.base_url == "https://custom.api.com"


# ── mode selection ──────────────────────────────────────────────────────


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ({"MCP_MODE": "http"}, Mode.HTTP),
        ({"MCP_MODE": "HTTP"}, Mode.HTTP),
        ({"MCP_MODE": "stdio"}, Mode.STDIO),
        ({"MCP_MODE": "stdio", "PORT": "9000"}, Mode.STDIO),
        ({"PORT": "9000"}, Mode.HTTP),
        ({"ENVIRONMENT": "production"}, Mode.HTTP),
        ({"ENVIRONMENT": "development"}, Mode.STDIO),
        ({"MCP_MODE": "auto"}, Mode.STDIO),
        ({}, Mode.STDIO),
    ],
)
def test_select_mode(env, expected):
    assert select_mode(env) is expected


def test_server_settings_defaults():
    settings = ServerSettings({})
    assert settings.mode is Mode.STDIO
    assert settings.host == "0.0.0.0"
    assert settings.port == 8080


def test_server_settings_port_from_env():
    settings = ServerSettings({"PORT": "9100", "MCP_HOST": "127.0.0.1"})
    assert settings.mode is Mode.HTTP
    assert settings.port == 9100
    assert settings.host == "127.0.0.1"
