from __future__ import annotations

import os

import pytest

# Set test credentials so config doesn't fail
os.environ.setdefault("GHL_API_KEY", "test_api_key")
os.environ.setdefault("GHL_LOCATION_ID", "loc_test")


@pytest.fixture()
def config():
    from ghl_mcp.config import GHLConfig

    return GHLConfig()


@pytest.fixture()
def client(config):
    from ghl_mcp.client import GHLClient

    return GHLClient(config)


@pytest.fixture()
def registry(client):
    from ghl_mcp.registry import build_registry

    return build_registry(client)
