"""GoHighLevel MCP tools: Custom Objects — schemas and records"""

from __future__ import annotations

from .base import Operation, array, boolean, integer, obj, string

SCHEMA_KEY = {"schemaKey": string("Object key, e.g. custom_objects.pets")}
RECORD_ID = {"recordId": string("Record ID")}

RECORD_FIELDS = {
    "properties": obj("Record properties keyed by field key"),
    "owners": array("Owner user IDs"),
    "followers": array("Follower user IDs"),
}

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "get_all_objects": Operation(
        "GET", "/objects/", "List standard and custom objects of the location", location="locationId",
    ),
    "create_object_schema": Operation(
        "POST", "/objects/", "Create a custom object schema",
        {
            "labels": obj("Singular and plural labels"),
            "key": string("Object key, e.g. custom_objects.pets"),
            "description": string("Object description"),
            "primaryDisplayPropertyDetails": obj("Primary display property: key, name, dataType"),
        },
        ("labels", "key", "primaryDisplayPropertyDetails"), location="locationId",
    ),
    "get_object_schema": Operation(
        "GET", "/objects/{key}", "Get an object schema by key",
        {"key": string("Object key"), "fetchProperties": boolean("Include field definitions")},
        ("key",), location="locationId",
    ),
    "update_object_schema": Operation(
        "PUT", "/objects/{key}", "Update an object schema",
        {
            "key": string("Object key"),
            "labels": obj("Singular and plural labels"),
            "description": string("Object description"),
            "searchableProperties": array("Field keys that are searchable"),
        },
        ("key", "searchableProperties"), location="locationId",
    ),
    "create_object_record": Operation(
        "POST", "/objects/{schemaKey}/records", "Create a custom object record",
        {**SCHEMA_KEY, **RECORD_FIELDS}, ("schemaKey", "properties"), location="locationId",
    ),
    "get_object_record": Operation(
        "GET", "/objects/{schemaKey}/records/{recordId}", "Get a custom object record",
        {**SCHEMA_KEY, **RECORD_ID}, ("schemaKey", "recordId"),
    ),
    "update_object_record": Operation(
        "PUT", "/objects/{schemaKey}/records/{recordId}", "Update a custom object record",
        {**SCHEMA_KEY, **RECORD_ID, **RECORD_FIELDS}, ("schemaKey", "recordId"),
        location="locationId", query=("locationId",),
    ),
    "delete_object_record": Operation(
        "DELETE", "/objects/{schemaKey}/records/{recordId}", "Delete a custom object record",
        {**SCHEMA_KEY, **RECORD_ID}, ("schemaKey", "recordId"),
    ),
    "search_object_records": Operation(
        "POST", "/objects/{schemaKey}/records/search", "Search records of an object",
        {
            **SCHEMA_KEY,
            "query": string("Free-text search over searchable properties"),
            "page": integer("Page number"),
            "pageLimit": integer("Results per page"),
            "searchAfter": array("Cursor from the previous page"),
        },
        ("schemaKey", "query", "page", "pageLimit"), location="locationId",
    ),
}
