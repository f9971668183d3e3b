"""GoHighLevel MCP tools: Email — campaigns and builder templates"""

from __future__ import annotations

from .base import Operation, boolean, integer, string

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "get_email_campaigns": Operation(
        "GET", "/emails/schedule", "List scheduled email campaigns",
        {
            "status": string("Campaign status", ["active", "pause", "complete", "cancelled", "retry", "draft", "resend-scheduled"]),
            "limit": integer("Maximum number of results"),
            "offset": integer("Number of results to skip"),
        },
        location="locationId",
    ),
    "create_email_template": Operation(
        "POST", "/emails/builder", "Create an email builder template",
        {
            "title": string("Template title"),
            "html": string("Template HTML"),
            "isPlainText": boolean("Treat the content as plain text"),
        },
        ("title", "html"), location="locationId", fixed={"type": "html"},
    ),
    "get_email_templates": Operation(
        "GET", "/emails/builder", "List email builder templates",
        {
            "limit": integer("Maximum number of results"),
            "offset": integer("Number of results to skip"),
            "search": string("Free-text search"),
        },
        location="locationId",
    ),
    "update_email_template": Operation(
        "POST", "/emails/builder/data", "Replace the content of an email builder template",
        {"templateId": string("Template ID"), "html": string("Template HTML")},
        ("templateId", "html"), location="locationId", fixed={"editorType": "html"},
    ),
    "delete_email_template": Operation(
        "DELETE", "/emails/builder/{locationId}/{templateId}", "Delete an email builder template",
        {"templateId": string("Template ID")}, ("templateId",), location="locationId",
    ),
}
