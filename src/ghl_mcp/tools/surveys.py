"""GoHighLevel MCP tools: Surveys"""

from __future__ import annotations

from .base import Operation, integer, string

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "ghl_get_surveys": Operation(
        "GET", "/surveys/", "List surveys of the location",
        {
            "type": string("Survey type, e.g. folder"),
            "skip": integer("Number of results to skip"),
            "limit": integer("Maximum number of results (max 50)"),
        },
        location="locationId",
    ),
    "ghl_get_survey_submissions": Operation(
        "GET", "/surveys/submissions", "List survey submissions",
        {
            "surveyId": string("Filter by survey"),
            "q": string("Search by contact name, email or phone"),
            "startAt": string("Range start (YYYY-MM-DD)"),
            "endAt": string("Range end (YYYY-MM-DD)"),
            "page": integer("Page number"),
            "limit": integer("Results per page (max 100)"),
        },
        location="locationId",
    ),
}
