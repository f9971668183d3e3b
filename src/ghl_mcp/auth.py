from __future__ import annotations

from .config import GHLConfig


def build_headers(config: GHLConfig) -> dict[str, str]:
    """Build request headers for the LeadConnector API.

    Every call carries the private integration / OAuth token as a Bearer
    credential and the pinned ``Version`` header. Content-Type is left to
    httpx so that JSON and form payloads both encode correctly.
    """
    return {
        "Accept": "application/json",
        "Authorization": f"Bearer {config.api_key}",
        "Version": config.api_version,
    }
