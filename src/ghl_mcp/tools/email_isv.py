"""GoHighLevel MCP tools: Email verification"""

from __future__ import annotations

from .base import Operation, string

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "verify_email": Operation(
        "POST", "/email/verify", "Check deliverability of an email address or of a contact's email",
        {
            "type": string("What `verify` holds", ["email", "contact"]),
            "verify": string("Email address or contact ID"),
        },
        ("type", "verify"), location="locationId", query=("locationId",),
    ),
}
