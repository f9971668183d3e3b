"""GoHighLevel MCP tools: Contacts — contacts, tags, tasks, notes, followers, campaigns and workflows"""

from __future__ import annotations

from .base import Operation, array, boolean, integer, paging, string

CONTACT_ID = {"contactId": string("Contact ID")}
TASK_ID = {"taskId": string("Task ID")}
NOTE_ID = {"noteId": string("Note ID")}

CONTACT_FIELDS = {
    "firstName": string("First name"),
    "lastName": string("Last name"),
    "name": string("Full name"),
    "email": string("Email address"),
    "phone": string("Phone number in E.164 format"),
    "companyName": string("Company name"),
    "address1": string("Street address"),
    "city": string("City"),
    "state": string("State"),
    "postalCode": string("Postal code"),
    "country": string("Country code"),
    "website": string("Website URL"),
    "timezone": string("Timezone"),
    "source": string("Lead source"),
    "dnd": boolean("Do-not-disturb flag"),
    "tags": array("Tags to apply"),
    "customFields": array("Custom field values", {"type": "object"}),
    "assignedTo": string("User ID of the owner"),
}

TASK_FIELDS = {
    "title": string("Task title"),
    "body": string("Task description"),
    "dueDate": string("Due date (ISO 8601)"),
    "completed": boolean("Whether the task is completed"),
    "assignedTo": string("User ID of the assignee"),
}

FOLLOWERS = {"followers": array("User IDs of followers")}

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "create_contact": Operation(
        "POST", "/contacts/", "Create a new contact", CONTACT_FIELDS, location="locationId",
    ),
    "search_contacts": Operation(
        "POST", "/contacts/search", "Search contacts by query string and filters",
        {
            "query": string("Free-text search"),
            "pageLimit": integer("Results per page"),
            "page": integer("Page number"),
            "filters": array("Advanced filter groups", {"type": "object"}),
            "sort": array("Sort clauses", {"type": "object"}),
        },
        location="locationId",
    ),
    "get_contact": Operation(
        "GET", "/contacts/{contactId}", "Get a contact by ID", CONTACT_ID, ("contactId",),
    ),
    "update_contact": Operation(
        "PUT", "/contacts/{contactId}", "Update an existing contact",
        {**CONTACT_ID, **CONTACT_FIELDS}, ("contactId",),
    ),
    "add_contact_tags": Operation(
        "POST", "/contacts/{contactId}/tags", "Add tags to a contact",
        {**CONTACT_ID, "tags": array("Tags to add")}, ("contactId", "tags"),
    ),
    "remove_contact_tags": Operation(
        "DELETE", "/contacts/{contactId}/tags", "Remove tags from a contact",
        {**CONTACT_ID, "tags": array("Tags to remove")}, ("contactId", "tags"), payload="body",
    ),
    "delete_contact": Operation(
        "DELETE", "/contacts/{contactId}", "Delete a contact", CONTACT_ID, ("contactId",),
    ),
    "get_contact_tasks": Operation(
        "GET", "/contacts/{contactId}/tasks", "List tasks of a contact", CONTACT_ID, ("contactId",),
    ),
    "create_contact_task": Operation(
        "POST", "/contacts/{contactId}/tasks", "Create a task for a contact",
        {**CONTACT_ID, **TASK_FIELDS}, ("contactId", "title", "dueDate"),
    ),
    "get_contact_task": Operation(
        "GET", "/contacts/{contactId}/tasks/{taskId}", "Get a contact task",
        {**CONTACT_ID, **TASK_ID}, ("contactId", "taskId"),
    ),
    "update_contact_task": Operation(
        "PUT", "/contacts/{contactId}/tasks/{taskId}", "Update a contact task",
        {**CONTACT_ID, **TASK_ID, **TASK_FIELDS}, ("contactId", "taskId"),
    ),
    "delete_contact_task": Operation(
        "DELETE", "/contacts/{contactId}/tasks/{taskId}", "Delete a contact task",
        {**CONTACT_ID, **TASK_ID}, ("contactId", "taskId"),
    ),
    "update_task_completion": Operation(
        "PUT", "/contacts/{contactId}/tasks/{taskId}/completed", "Mark a contact task completed or open",
        {**CONTACT_ID, **TASK_ID, "completed": boolean("Completion state")},
        ("contactId", "taskId", "completed"),
    ),
    "get_contact_notes": Operation(
        "GET", "/contacts/{contactId}/notes", "List notes of a contact", CONTACT_ID, ("contactId",),
    ),
    "create_contact_note": Operation(
        "POST", "/contacts/{contactId}/notes", "Add a note to a contact",
        {**CONTACT_ID, "body": string("Note text"), "userId": string("Author user ID")},
        ("contactId", "body"),
    ),
    "get_contact_note": Operation(
        "GET", "/contacts/{contactId}/notes/{noteId}", "Get a contact note",
        {**CONTACT_ID, **NOTE_ID}, ("contactId", "noteId"),
    ),
    "update_contact_note": Operation(
        "PUT", "/contacts/{contactId}/notes/{noteId}", "Update a contact note",
        {**CONTACT_ID, **NOTE_ID, "body": string("Note text"), "userId": string("Author user ID")},
        ("contactId", "noteId", "body"),
    ),
    "delete_contact_note": Operation(
        "DELETE", "/contacts/{contactId}/notes/{noteId}", "Delete a contact note",
        {**CONTACT_ID, **NOTE_ID}, ("contactId", "noteId"),
    ),
    "upsert_contact": Operation(
        "POST", "/contacts/upsert", "Create a contact or update the one matching email/phone",
        CONTACT_FIELDS, location="locationId",
    ),
    "get_duplicate_contact": Operation(
        "GET", "/contacts/search/duplicate", "Find a duplicate contact by email or phone",
        {"email": string("Email address"), "number": string("Phone number")},
        location="locationId",
    ),
    "get_contacts_by_business": Operation(
        "GET", "/contacts/business/{businessId}", "List contacts associated with a business",
        {"businessId": string("Business ID"), "query": string("Free-text search"), **paging("skip")},
        ("businessId",), location="locationId",
    ),
    "get_contact_appointments": Operation(
        "GET", "/contacts/{contactId}/appointments", "List appointments of a contact",
        CONTACT_ID, ("contactId",),
    ),
    "bulk_update_contact_tags": Operation(
        "POST", "/contacts/bulk/tags/update/{type}", "Add or remove tags on many contacts at once",
        {
            "type": string("Operation type", ["add", "remove"]),
            "contacts": array("Contact IDs"),
            "tags": array("Tags"),
            "removeAllTags": boolean("Remove every tag before applying"),
        },
        ("type", "contacts", "tags"), location="locationId",
    ),
    "bulk_update_contact_business": Operation(
        "POST", "/contacts/bulk/business", "Attach many contacts to a business (null detaches)",
        {"ids": array("Contact IDs"), "businessId": string("Business ID")},
        ("ids",), location="locationId",
    ),
    "add_contact_followers": Operation(
        "POST", "/contacts/{contactId}/followers", "Add followers to a contact",
        {**CONTACT_ID, **FOLLOWERS}, ("contactId", "followers"),
    ),
    "remove_contact_followers": Operation(
        "DELETE", "/contacts/{contactId}/followers", "Remove followers from a contact",
        {**CONTACT_ID, **FOLLOWERS}, ("contactId", "followers"), payload="body",
    ),
    "add_contact_to_campaign": Operation(
        "POST", "/contacts/{contactId}/campaigns/{campaignId}", "Add a contact to a campaign",
        {**CONTACT_ID, "campaignId": string("Campaign ID")}, ("contactId", "campaignId"),
    ),
    "remove_contact_from_campaign": Operation(
        "DELETE", "/contacts/{contactId}/campaigns/{campaignId}", "Remove a contact from a campaign",
        {**CONTACT_ID, "campaignId": string("Campaign ID")}, ("contactId", "campaignId"),
    ),
    "remove_contact_from_all_campaigns": Operation(
        "DELETE", "/contacts/{contactId}/campaigns/removeAll", "Remove a contact from every campaign",
        CONTACT_ID, ("contactId",),
    ),
    "add_contact_to_workflow": Operation(
        "POST", "/contacts/{contactId}/workflow/{workflowId}", "Enroll a contact in a workflow",
        {
            **CONTACT_ID,
            "workflowId": string("Workflow ID"),
            "eventStartTime": string("Start time of the workflow event (ISO 8601)"),
        },
        ("contactId", "workflowId"),
    ),
    "remove_contact_from_workflow": Operation(
        "DELETE", "/contacts/{contactId}/workflow/{workflowId}", "Remove a contact from a workflow",
        {**CONTACT_ID, "workflowId": string("Workflow ID")}, ("contactId", "workflowId"),
    ),
}
