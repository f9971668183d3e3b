"""GoHighLevel MCP tools: Locations — sub-accounts, tags, tasks, custom fields, custom values and templates"""

from __future__ import annotations

from .base import Operation, array, boolean, integer, obj, string

LOCATION_ID = {"locationId": string("Location ID")}
TAG_ID = {"tagId": string("Tag ID")}
FIELD_ID = {"id": string("Custom field ID")}
VALUE_ID = {"id": string("Custom value ID")}

LOCATION_FIELDS = {
    "name": string("Business name"),
    "companyId": string("Agency company ID"),
    "phone": string("Phone number"),
    "email": string("Email address"),
    "address": string("Street address"),
    "city": string("City"),
    "state": string("State"),
    "country": string("Country code"),
    "postalCode": string("Postal code"),
    "website": string("Website URL"),
    "timezone": string("Timezone"),
    "prospectInfo": obj("Prospect details: firstName, lastName, email"),
    "settings": obj("Location settings"),
    "social": obj("Social profile URLs"),
    "snapshotId": string("Snapshot to load"),
}

CUSTOM_FIELD_FIELDS = {
    "name": string("Field name"),
    "dataType": string("Data type", ["TEXT", "LARGE_TEXT", "NUMERICAL", "PHONE", "MONETORY", "CHECKBOX", "SINGLE_OPTIONS", "MULTIPLE_OPTIONS", "FLOAT", "TIME", "DATE", "TEXTBOX_LIST", "FILE_UPLOAD", "SIGNATURE", "RADIO"]),
    "placeholder": string("Placeholder text"),
    "acceptedFormat": array("Accepted file formats"),
    "isMultipleFile": boolean("Allow several files"),
    "maxNumberOfFiles": integer("Maximum number of files"),
    "textBoxListOptions": array("Options for list fields", {"type": "object"}),
    "position": integer("Display position"),
    "model": string("Owning model", ["contact", "opportunity"]),
}

CUSTOM_VALUE_FIELDS = {"name": string("Custom value name"), "value": string("Custom value")}

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "search_locations": Operation(
        "GET", "/locations/search", "Search the sub-accounts of an agency",
        {
            "companyId": string("Agency company ID"),
            "email": string("Filter by email"),
            "order": string("Sort order", ["asc", "desc"]),
            "skip": integer("Number of results to skip"),
            "limit": integer("Maximum number of results"),
        },
    ),
    "get_location": Operation(
        "GET", "/locations/{locationId}", "Get a location by ID", location="locationId",
    ),
    "create_location": Operation(
        "POST", "/locations/", "Create a sub-account (agency token required)", LOCATION_FIELDS,
        ("name", "companyId"),
    ),
    "update_location": Operation(
        "PUT", "/locations/{locationId}", "Update a location", {**LOCATION_ID, **LOCATION_FIELDS},
        ("locationId", "companyId"),
    ),
    "delete_location": Operation(
        "DELETE", "/locations/{locationId}", "Delete a location",
        {**LOCATION_ID, "deleteTwilioAccount": boolean("Also delete the Twilio sub-account")},
        ("locationId", "deleteTwilioAccount"),
    ),
    "get_location_tags": Operation(
        "GET", "/locations/{locationId}/tags", "List tags of a location", location="locationId",
    ),
    "create_location_tag": Operation(
        "POST", "/locations/{locationId}/tags", "Create a location tag",
        {"name": string("Tag name")}, ("name",), location="locationId",
    ),
    "get_location_tag": Operation(
        "GET", "/locations/{locationId}/tags/{tagId}", "Get a location tag", TAG_ID, ("tagId",),
        location="locationId",
    ),
    "update_location_tag": Operation(
        "PUT", "/locations/{locationId}/tags/{tagId}", "Rename a location tag",
        {**TAG_ID, "name": string("Tag name")}, ("tagId", "name"), location="locationId",
    ),
    "delete_location_tag": Operation(
        "DELETE", "/locations/{locationId}/tags/{tagId}", "Delete a location tag", TAG_ID, ("tagId",),
        location="locationId",
    ),
    "search_location_tasks": Operation(
        "POST", "/locations/{locationId}/tasks/search", "Search tasks across a location",
        {
            "contactId": array("Contact IDs"),
            "completed": boolean("Completion state"),
            "assignedTo": array("Assigned user IDs"),
            "query": string("Free-text search"),
            "businessId": string("Business ID"),
            "limit": integer("Maximum number of results"),
            "skip": integer("Number of results to skip"),
        },
        location="locationId",
    ),
    "get_location_custom_fields": Operation(
        "GET", "/locations/{locationId}/customFields", "List custom fields of a location",
        {"model": string("Owning model", ["contact", "opportunity", "all"])}, location="locationId",
    ),
    "create_location_custom_field": Operation(
        "POST", "/locations/{locationId}/customFields", "Create a location custom field",
        CUSTOM_FIELD_FIELDS, ("name", "dataType"), location="locationId",
    ),
    "get_location_custom_field": Operation(
        "GET", "/locations/{locationId}/customFields/{id}", "Get a location custom field", FIELD_ID, ("id",),
        location="locationId",
    ),
    "update_location_custom_field": Operation(
        "PUT", "/locations/{locationId}/customFields/{id}", "Update a location custom field",
        {**FIELD_ID, **CUSTOM_FIELD_FIELDS}, ("id", "name"), location="locationId",
    ),
    "delete_location_custom_field": Operation(
        "DELETE", "/locations/{locationId}/customFields/{id}", "Delete a location custom field", FIELD_ID,
        ("id",), location="locationId",
    ),
    "get_location_custom_values": Operation(
        "GET", "/locations/{locationId}/customValues", "List custom values of a location", location="locationId",
    ),
    "create_location_custom_value": Operation(
        "POST", "/locations/{locationId}/customValues", "Create a location custom value",
        CUSTOM_VALUE_FIELDS, ("name", "value"), location="locationId",
    ),
    "get_location_custom_value": Operation(
        "GET", "/locations/{locationId}/customValues/{id}", "Get a location custom value", VALUE_ID, ("id",),
        location="locationId",
    ),
    "update_location_custom_value": Operation(
        "PUT", "/locations/{locationId}/customValues/{id}", "Update a location custom value",
        {**VALUE_ID, **CUSTOM_VALUE_FIELDS}, ("id", "name", "value"), location="locationId",
    ),
    "delete_location_custom_value": Operation(
        "DELETE", "/locations/{locationId}/customValues/{id}", "Delete a location custom value", VALUE_ID,
        ("id",), location="locationId",
    ),
    "get_location_templates": Operation(
        "GET", "/locations/{locationId}/templates", "List SMS and email templates of a location",
        {
            "originId": string("Agency or location that owns the templates"),
            "deleted": boolean("Include deleted templates"),
            "type": string("Template type", ["sms", "email", "whatsapp"]),
            "skip": integer("Number of results to skip"),
            "limit": integer("Maximum number of results"),
        },
        ("originId",), location="locationId",
    ),
    "delete_location_template": Operation(
        "DELETE", "/locations/{locationId}/templates/{id}", "Delete a location template",
        {"id": string("Template ID")}, ("id",), location="locationId",
    ),
    "get_timezones": Operation(
        "GET", "/locations/{locationId}/timezones", "List timezones available to a location",
        location="locationId",
    ),
}
