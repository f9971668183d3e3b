"""GoHighLevel MCP tools: Custom Fields (v2) — fields and folders of custom objects"""

from __future__ import annotations

from .base import Operation, array, boolean, integer, string

FIELD_ID = {"id": string("Custom field ID")}
FOLDER_ID = {"id": string("Folder ID")}

FIELD_FIELDS = {
    "name": string("Field name"),
    "description": string("Field description"),
    "placeholder": string("Placeholder text"),
    "showInForms": boolean("Show the field in forms"),
    "options": array("Options for choice fields: key, label", {"type": "object"}),
    "acceptedFormats": string("Accepted file formats for file fields"),
    "maxFileLimit": integer("Maximum number of files"),
    "allowCustomOption": boolean("Allow free-text options"),
}

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "ghl_get_custom_field_by_id": Operation(
        "GET", "/custom-fields/{id}", "Get a custom field or folder by ID", FIELD_ID, ("id",),
    ),
    "ghl_create_custom_field": Operation(
        "POST", "/custom-fields/", "Create a custom field on an object",
        {
            **FIELD_FIELDS,
            "dataType": string("Data type", ["TEXT", "LARGE_TEXT", "NUMERICAL", "PHONE", "MONETORY", "CHECKBOX", "SINGLE_OPTIONS", "MULTIPLE_OPTIONS", "DATE", "TEXTBOX_LIST", "FILE_UPLOAD", "RADIO", "EMAIL"]),
            "fieldKey": string("Field key, e.g. custom_object.pet.name"),
            "objectKey": string("Object key"),
            "parentId": string("Folder ID"),
        },
        ("dataType", "fieldKey", "objectKey", "parentId"), location="locationId",
    ),
    "ghl_update_custom_field": Operation(
        "PUT", "/custom-fields/{id}", "Update a custom field", {**FIELD_ID, **FIELD_FIELDS}, ("id",),
        location="locationId",
    ),
    "ghl_delete_custom_field": Operation(
        "DELETE", "/custom-fields/{id}", "Delete a custom field", FIELD_ID, ("id",),
    ),
    "ghl_get_custom_fields_by_object_key": Operation(
        "GET", "/custom-fields/object-key/{objectKey}", "List custom fields and folders of an object",
        {"objectKey": string("Object key")}, ("objectKey",), location="locationId",
    ),
    "ghl_create_custom_field_folder": Operation(
        "POST", "/custom-fields/folder", "Create a custom field folder",
        {"objectKey": string("Object key"), "name": string("Folder name")},
        ("objectKey", "name"), location="locationId",
    ),
    "ghl_update_custom_field_folder": Operation(
        "PUT", "/custom-fields/folder/{id}", "Rename a custom field folder",
        {**FOLDER_ID, "name": string("Folder name")}, ("id", "name"), location="locationId",
    ),
    "ghl_delete_custom_field_folder": Operation(
        "DELETE", "/custom-fields/folder/{id}", "Delete a custom field folder", FOLDER_ID, ("id",),
        location="locationId",
    ),
}
