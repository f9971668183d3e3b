"""GoHighLevel MCP tools: Associations — association types and record relations"""

from __future__ import annotations

from .base import Operation, array, paging, string

ASSOCIATION_ID = {"associationId": string("Association ID")}

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "ghl_get_all_associations": Operation(
        "GET", "/associations/", "List association types of the location", paging("skip"),
        location="locationId",
    ),
    "ghl_create_association": Operation(
        "POST", "/associations/", "Create an association type between two objects",
        {
            "key": string("Association key"),
            "firstObjectLabel": string("Label seen from the first object"),
            "firstObjectKey": string("First object key"),
            "secondObjectLabel": string("Label seen from the second object"),
            "secondObjectKey": string("Second object key"),
        },
        ("key", "firstObjectLabel", "firstObjectKey", "secondObjectLabel", "secondObjectKey"),
        location="locationId",
    ),
    "ghl_get_association_by_id": Operation(
        "GET", "/associations/{associationId}", "Get an association type by ID", ASSOCIATION_ID,
        ("associationId",),
    ),
    "ghl_update_association": Operation(
        "PUT", "/associations/{associationId}", "Relabel an association type",
        {
            **ASSOCIATION_ID,
            "firstObjectLabel": string("Label seen from the first object"),
            "secondObjectLabel": string("Label seen from the second object"),
        },
        ("associationId", "firstObjectLabel", "secondObjectLabel"),
    ),
    "ghl_delete_association": Operation(
        "DELETE", "/associations/{associationId}", "Delete an association type and its relations",
        ASSOCIATION_ID, ("associationId",),
    ),
    "ghl_get_association_by_key": Operation(
        "GET", "/associations/key/{keyName}", "Get an association type by key",
        {"keyName": string("Association key")}, ("keyName",), location="locationId",
    ),
    "ghl_get_association_by_object_key": Operation(
        "GET", "/associations/objectKey/{objectKey}", "List association types involving an object",
        {"objectKey": string("Object key")}, ("objectKey",), location="locationId",
    ),
    "ghl_create_relation": Operation(
        "POST", "/associations/relations", "Relate two records through an association",
        {
            **ASSOCIATION_ID,
            "firstRecordId": string("Record ID on the first object"),
            "secondRecordId": string("Record ID on the second object"),
        },
        ("associationId", "firstRecordId", "secondRecordId"), location="locationId",
    ),
    "ghl_get_relations_by_record": Operation(
        "GET", "/associations/relations/{recordId}", "List relations of a record",
        {"recordId": string("Record ID"), "associationIds": array("Only these association IDs"), **paging("skip")},
        ("recordId",), location="locationId",
    ),
    "ghl_delete_relation": Operation(
        "DELETE", "/associations/relations/{relationId}", "Delete a relation between two records",
        {"relationId": string("Relation ID")}, ("relationId",), location="locationId",
    ),
}
