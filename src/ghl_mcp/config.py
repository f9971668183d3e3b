from __future__ import annotations

import enum
import logging
import os
from collections.abc import Mapping

API_VERSION = "2021-07-28"


def setup_logging() -> None:
    level = os.environ.get("MCP_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class Mode(str, enum.Enum):
    HTTP = "http"
    STDIO = "stdio"


def select_mode(environ: Mapping[str, str] | None = None) -> Mode:
    """Pick the transport once at startup.

    An explicit ``MCP_MODE`` wins; otherwise a ``PORT`` or a production
    ``ENVIRONMENT`` means we are deployed behind HTTP. Local clients get stdio.
    """
    env = os.environ if environ is None else environ
    explicit = env.get("MCP_MODE", "").lower()
    if explicit == Mode.HTTP.value:
        return Mode.HTTP
    if explicit == Mode.STDIO.value:
        return Mode.STDIO
    if env.get("PORT") or env.get("ENVIRONMENT", "").lower() == "production":
        return Mode.HTTP
    return Mode.STDIO


class ServerSettings:
    """Transport settings loaded from environment variables."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        env = os.environ if environ is None else environ
        self.mode: Mode = select_mode(env)
        self.host: str = env.get("MCP_HOST", "0.0.0.0")
        self.port: int = int(env.get("PORT") or "8080")


class GHLConfig:
    """GoHighLevel API configuration loaded from environment variables."""

    def __init__(self) -> None:
        self.api_key: str = os.environ.get("GHL_API_KEY", "")
        self.location_id: str = os.environ.get("GHL_LOCATION_ID", "")
        self.base_url: str = os.environ.get("GHL_BASE_URL", "https://services.leadconnectorhq.com")
        self.api_version: str = API_VERSION

        if not self.api_key:
            raise RuntimeError("GHL_API_KEY environment variable is required")
        if not self.location_id:
            raise RuntimeError("GHL_LOCATION_ID environment variable is required")
