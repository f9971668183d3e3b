"""GoHighLevel MCP tools: Opportunities — pipelines and deals"""

from __future__ import annotations

from .base import Operation, array, integer, number, string

OPPORTUNITY_ID = {"id": string("Opportunity ID")}
STATUS = ["open", "won", "lost", "abandoned"]

OPPORTUNITY_FIELDS = {
    "name": string("Opportunity name"),
    "pipelineId": string("Pipeline ID"),
    "pipelineStageId": string("Pipeline stage ID"),
    "status": string("Status", STATUS),
    "contactId": string("Contact ID"),
    "monetaryValue": number("Deal value"),
    "assignedTo": string("User ID of the owner"),
    "customFields": array("Custom field values", {"type": "object"}),
}

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "search_opportunities": Operation(
        "GET", "/opportunities/search", "Search opportunities by pipeline, stage, status or contact",
        {
            "q": string("Free-text search"),
            "pipeline_id": string("Pipeline ID"),
            "pipeline_stage_id": string("Pipeline stage ID"),
            "contact_id": string("Contact ID"),
            "status": string("Status", STATUS + ["all"]),
            "assigned_to": string("Assigned user ID"),
            "limit": integer("Maximum number of results"),
            "page": integer("Page number"),
        },
        location="location_id",
    ),
    "get_pipelines": Operation(
        "GET", "/opportunities/pipelines", "List sales pipelines and their stages", location="locationId",
    ),
    "get_opportunity": Operation(
        "GET", "/opportunities/{id}", "Get an opportunity by ID", OPPORTUNITY_ID, ("id",),
    ),
    "create_opportunity": Operation(
        "POST", "/opportunities/", "Create an opportunity", OPPORTUNITY_FIELDS,
        ("name", "pipelineId", "contactId"), location="locationId",
    ),
    "update_opportunity_status": Operation(
        "PUT", "/opportunities/{id}/status", "Change the status of an opportunity",
        {**OPPORTUNITY_ID, "status": string("Status", STATUS), "lostReasonId": string("Lost reason ID")},
        ("id", "status"),
    ),
    "delete_opportunity": Operation(
        "DELETE", "/opportunities/{id}", "Delete an opportunity", OPPORTUNITY_ID, ("id",),
    ),
    "update_opportunity": Operation(
        "PUT", "/opportunities/{id}", "Update an opportunity", {**OPPORTUNITY_ID, **OPPORTUNITY_FIELDS}, ("id",),
    ),
    "upsert_opportunity": Operation(
        "POST", "/opportunities/upsert", "Create or update the opportunity of a contact in a pipeline",
        OPPORTUNITY_FIELDS, ("pipelineId", "contactId"), location="locationId",
    ),
    "add_opportunity_followers": Operation(
        "POST", "/opportunities/{id}/followers", "Add followers to an opportunity",
        {**OPPORTUNITY_ID, "followers": array("User IDs of followers")}, ("id", "followers"),
    ),
    "remove_opportunity_followers": Operation(
        "DELETE", "/opportunities/{id}/followers", "Remove followers from an opportunity",
        {**OPPORTUNITY_ID, "followers": array("User IDs of followers")}, ("id", "followers"), payload="body",
    ),
}
