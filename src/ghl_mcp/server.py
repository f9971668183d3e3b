"""GoHighLevel MCP Server — exposes the GoHighLevel REST API as MCP tools over stdio or HTTP/SSE."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import Any

from fastmcp import FastMCP
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.server.sse import SseServerTransport
from mcp.types import TextContent
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from . import __version__
from .client import GHLClient
from .config import GHLConfig, Mode, ServerSettings, setup_logging
from .registry import ToolRegistry, build_registry
from .rpc import (
    INTERNAL_ERROR,
    PARSE_ERROR,
    PROTOCOL_VERSION,
    SERVER_NAME,
    dump_result,
    error_response,
    handle_message,
    server_info,
)

log = logging.getLogger("ghl_mcp")

SSE_PATH = "/sse"

CORS_ORIGINS = [
    "https://chatgpt.com",
    "https://chat.openai.com",
    "https://claude.ai",
    "https://app.claude.ai",
]


class GHLTool(Tool):
    """MCP tool backed by one registry entry."""

    invoke: Callable[[str, dict[str, Any]], Awaitable[Any]]

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        result = await self.invoke(self.name, arguments)
        return ToolResult(content=[TextContent(type="text", text=dump_result(result))])


class _AlreadySent(Response):
    """Placeholder for a response the SSE transport has already written to the socket."""

    async def __call__(self, scope: Any, receive: Any, send: Any) -> None:
        return None


def cors_middleware() -> list[Middleware]:
    return [
        Middleware(
            CORSMiddleware,
            allow_origins=CORS_ORIGINS,
            allow_origin_regex=r"http://localhost(:\d+)?",
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization", "Accept", "Mcp-Session-Id", "Mcp-Protocol-Version"],
            expose_headers=["Mcp-Session-Id"],
            allow_credentials=True,
        )
    ]


def create_server(registry: ToolRegistry, mode: Mode = Mode.STDIO) -> FastMCP:
    mcp = FastMCP(
        SERVER_NAME,
        version=__version__,
        instructions=(
            f"GoHighLevel MCP Server provides {len(registry)} tools over the GoHighLevel "
            "(LeadConnector) REST API: contacts, conversations, calendars, opportunities, "
            "blogs, social planner, media, custom objects, store, products, payments, "
            "invoices and more. Location-scoped tools default to the configured location."
        ),
    )

    for descriptor in registry.list_tools():
        mcp.add_tool(
            GHLTool(
                name=descriptor["name"],
                description=descriptor["description"],
                parameters=descriptor["inputSchema"],
                invoke=registry.invoke,
            )
        )

    _add_routes(mcp, registry, mode)
    return mcp


def _add_routes(mcp: FastMCP, registry: ToolRegistry, mode: Mode) -> None:
    sse = SseServerTransport(SSE_PATH)

    @mcp.custom_route("/health", methods=["GET"])
    async def health(request: Request) -> JSONResponse:
        try:
            return JSONResponse({
                "status": "healthy",
                "server": SERVER_NAME,
                "version": __version__,
                "protocol": PROTOCOL_VERSION,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "tools": registry.names(),
                "endpoint": SSE_PATH,
                "mode": mode.value,
                "unavailable": [u._asdict() for u in registry.unavailable],
            })
        except Exception:
            log.exception("Health check failed")
            return JSONResponse({"status": "error", "error": "Health check failed"}, status_code=500)

    @mcp.custom_route("/capabilities", methods=["GET"])
    async def capabilities(request: Request) -> JSONResponse:
        return JSONResponse({"capabilities": {"tools": {}}, "server": server_info()})

    @mcp.custom_route("/tools", methods=["GET"])
    async def tools(request: Request) -> JSONResponse:
        all_tools = registry.list_tools()
        log.info("Tools endpoint accessed - returning %d tools", len(all_tools))
        return JSONResponse({
            "tools": all_tools,
            "count": len(all_tools),
            "categories": registry.counts(),
            "unavailable": [u._asdict() for u in registry.unavailable],
        })

    @mcp.custom_route("/", methods=["GET"])
    async def root(request: Request) -> JSONResponse:
        return JSONResponse({
            "name": "GoHighLevel MCP Server",
            "version": __version__,
            "status": "running",
            "mode": mode.value,
            "endpoints": {
                "health": "/health",
                "capabilities": "/capabilities",
                "tools": "/tools",
                "sse": SSE_PATH,
                "mcp": "/mcp",
            },
            "tools": registry.counts(),
        })

    @mcp.custom_route(SSE_PATH, methods=["GET", "POST"])
    async def sse_endpoint(request: Request) -> Response:
        session_id = request.query_params.get("session_id") or request.query_params.get("sessionId")
        log.info("SSE request: %s from %s, session %s", request.method, request.client, session_id or "none")
        if request.method == "POST":
            if request.query_params.get("session_id"):
                # message for an open GET stream; the transport writes the 202 itself
                await sse.handle_post_message(request.scope, request.receive, request._send)
                return _AlreadySent()
            return await _handle_post(request, registry)
        return await _handle_stream(request, mcp, sse)


async def _handle_post(request: Request, registry: ToolRegistry) -> Response:
    try:
        message = await request.json()
    except ValueError:
        message = None
    if not isinstance(message, dict):
        return JSONResponse(error_response(None, PARSE_ERROR, "Parse error"), status_code=400)

    try:
        response = await handle_message(registry, message)
    except Exception as exc:
        log.exception("Unhandled error processing %s", message.get("method"))
        return JSONResponse(
            error_response(message.get("id"), INTERNAL_ERROR, "Internal error", str(exc)),
            status_code=500,
        )

    if response is None:
        return Response(status_code=200)
    return JSONResponse(response)


async def _handle_stream(request: Request, mcp: FastMCP, sse: SseServerTransport) -> Response:
    server = mcp._mcp_server
    started = False
    try:
        async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
            started = True
            log.info("SSE connection established from %s", request.client)
            await server.run(read_stream, write_stream, server.create_initialization_options())
    except Exception as exc:
        log.exception("SSE stream from %s failed", request.client)
        if not started:
            return JSONResponse(
                error_response(None, INTERNAL_ERROR, "Internal error", str(exc)),
                status_code=500,
            )
    log.info("SSE connection from %s closed", request.client)
    return _AlreadySent()


async def verify_connection(config: GHLConfig) -> None:
    """Fail fast when the token or location is wrong."""
    probe = GHLClient(config)
    try:
        result = await probe.test_connection()
    finally:
        await probe.close()
    location = result.get("location") if isinstance(result, dict) else None
    log.info(
        "GHL API connection successful, location %s",
        (location or {}).get("id", config.location_id),
    )


def main() -> None:
    setup_logging()
    settings = ServerSettings()
    log.info("Starting GoHighLevel MCP server in %s mode", settings.mode.value.upper())

    try:
        config = GHLConfig()
    except RuntimeError as exc:
        log.error("%s", exc)
        raise SystemExit(1) from exc

    log.info("Base URL: %s, API version: %s, location: %s", config.base_url, config.api_version, config.location_id)

    try:
        asyncio.run(verify_connection(config))
    except Exception as exc:
        log.error("Failed to connect to GHL API: %s", exc)
        raise SystemExit(1) from exc

    client = GHLClient(config)
    registry = build_registry(client)
    for area, count in registry.counts().items():
        log.info("  %-18s %d", area, count)

    mcp = create_server(registry, settings.mode)

    try:
        if settings.mode is Mode.HTTP:
            log.info("HTTP server on http://%s:%d (SSE endpoint %s)", settings.host, settings.port, SSE_PATH)
            mcp.run(
                transport="http",
                host=settings.host,
                port=settings.port,
                middleware=cors_middleware(),
                json_response=True,
                stateless_http=True,
            )
        else:
            mcp.run()  # stdio, the default for local desktop clients
    finally:
        asyncio.run(client.close())
        log.info("Server stopped")


if __name__ == "__main__":
    main()
