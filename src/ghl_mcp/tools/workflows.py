"""GoHighLevel MCP tools: Workflows"""

from __future__ import annotations

from .base import Operation

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "ghl_get_workflows": Operation(
        "GET", "/workflows/", "List automation workflows of the location", location="locationId",
    ),
}
