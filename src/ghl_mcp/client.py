from __future__ import annotations

import base64
import logging
import re
from typing import Any
from urllib.parse import quote

import httpx

from .auth import build_headers
from .config import GHLConfig

log = logging.getLogger("ghl_mcp")

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class GHLAPIError(Exception):
    """Non-2xx response from the LeadConnector API."""

    def __init__(self, status_code: int, message: str, detail: Any = None) -> None:
        super().__init__(f"GHL API Error ({status_code}): {message}")
        self.status_code = status_code
        self.message = message
        self.detail = detail


def _path_params(template: str) -> list[str]:
    return _PLACEHOLDER.findall(template)


def _build_path(template: str, params: dict[str, Any]) -> str:
    """Fill ``{placeholders}`` in *template* from *params*, URL-encoding values.

    Returns the resolved path.
    Raises ``ValueError`` if a required placeholder is missing.
    """
    path = template
    for ph in _path_params(template):
        val = params.get(ph)
        if val is None or val == "":
            raise ValueError(ph)
        path = path.replace("{" + ph + "}", quote(str(val), safe=""))
    return path


def _error_message(detail: Any, fallback: str) -> str:
    if isinstance(detail, dict):
        message = detail.get("message") or detail.get("error") or fallback
        if isinstance(message, list):
            return "; ".join(str(m) for m in message)
        return str(message)
    return fallback


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class GHLClient:
    """Async HTTP client for the GoHighLevel (LeadConnector) REST API."""

    def __init__(self, config: GHLConfig) -> None:
        self.config = config
        self.location_id = config.location_id
        self._http = httpx.AsyncClient(
            base_url=config.base_url,
            headers=build_headers(config),
            timeout=httpx.Timeout(30.0),
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: dict[str, Any] | None = None,
        body: Any = None,
        form: dict[str, Any] | None = None,
    ) -> Any:
        log.debug("%s %s query=%s", method, path, query)

        response = await self._http.request(
            method=method,
            url=path,
            params=query or None,
            json=body,
            data={k: _form_value(v) for k, v in form.items()} if form else None,
        )

        if response.status_code >= 400:
            try:
                detail = response.json()
            except ValueError:
                detail = response.text[:2000] or None
            raise GHLAPIError(
                response.status_code,
                _error_message(detail, response.reason_phrase),
                detail,
            )

        if not response.content:
            return {"success": True}

        content_type = response.headers.get("content-type", "")
        if "json" in content_type or not content_type:
            return response.json()
        if content_type.startswith("text/"):
            return {"contentType": content_type, "content": response.text}
        return {
            "contentType": content_type,
            "base64": base64.b64encode(response.content).decode("ascii"),
        }

    async def test_connection(self) -> Any:
        """Fetch the configured location; fails if the token or location is wrong."""
        return await self.request("GET", _build_path("/locations/{locationId}", {"locationId": self.location_id}))

    async def close(self) -> None:
        await self._http.aclose()
