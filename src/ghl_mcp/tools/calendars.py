"""GoHighLevel MCP tools: Calendars — groups, calendars, appointments, resources, notifications and blocked slots"""

from __future__ import annotations

from .base import Operation, array, boolean, integer, paging, string

GROUP_ID = {"groupId": string("Calendar group ID")}
CALENDAR_ID = {"calendarId": string("Calendar ID")}
EVENT_ID = {"eventId": string("Event / appointment ID")}
APPOINTMENT_ID = {"appointmentId": string("Appointment ID")}
NOTE_ID = {"noteId": string("Note ID")}
RESOURCE_ID = {"id": string("Resource ID")}
NOTIFICATION_ID = {"notificationId": string("Notification ID")}

GROUP_FIELDS = {
    "name": string("Group name"),
    "description": string("Group description"),
    "slug": string("Group URL slug"),
    "isActive": boolean("Whether the group is active"),
}

CALENDAR_FIELDS = {
    "name": string("Calendar name"),
    "description": string("Calendar description"),
    "groupId": string("Calendar group ID"),
    "slug": string("Calendar URL slug"),
    "calendarType": string("Calendar type", ["round_robin", "event", "class_booking", "collective", "service_booking", "personal"]),
    "teamMembers": array("Team member settings", {"type": "object"}),
    "eventType": string("Event type"),
    "slotDuration": integer("Slot duration in minutes"),
    "slotInterval": integer("Slot interval in minutes"),
    "slotBuffer": integer("Buffer between slots in minutes"),
    "openHours": array("Weekly open hours", {"type": "object"}),
    "autoConfirm": boolean("Confirm bookings automatically"),
    "isActive": boolean("Whether the calendar is active"),
}

APPOINTMENT_FIELDS = {
    "calendarId": string("Calendar ID"),
    "contactId": string("Contact ID"),
    "startTime": string("Start time (ISO 8601)"),
    "endTime": string("End time (ISO 8601)"),
    "title": string("Appointment title"),
    "appointmentStatus": string("Status", ["new", "confirmed", "cancelled", "showed", "noshow", "invalid"]),
    "assignedUserId": string("Assigned user ID"),
    "address": string("Meeting location or address"),
    "meetingLocationType": string("Meeting location type"),
    "ignoreDateRange": boolean("Skip the calendar's date range checks"),
    "ignoreFreeSlotValidation": boolean("Book even if the slot is not free"),
    "toNotify": boolean("Send notifications"),
}

RANGE = {
    "startTime": string("Range start (epoch millis)"),
    "endTime": string("Range end (epoch millis)"),
    "calendarId": string("Filter by calendar"),
    "userId": string("Filter by user"),
    "groupId": string("Filter by calendar group"),
}

RESOURCE_FIELDS = {
    "name": string("Resource name"),
    "description": string("Resource description"),
    "quantity": integer("Available quantity"),
    "outOfService": integer("Quantity out of service"),
    "capacity": integer("Capacity"),
    "calendarIds": array("Calendar IDs the resource serves"),
    "isActive": boolean("Whether the resource is active"),
}

NOTIFICATION_FIELDS = {
    "receiverType": string("Receiver", ["contact", "guest", "assignedUser", "emails"]),
    "channel": string("Channel", ["email", "inApp"]),
    "notificationType": string("Trigger", ["booked", "confirmation", "cancellation", "reminder", "followup", "reschedule"]),
    "isActive": boolean("Whether the notification is active"),
    "templateId": string("Email template ID"),
    "body": string("Body"),
    "subject": string("Subject"),
    "afterTime": array("Follow-up offsets", {"type": "object"}),
    "beforeTime": array("Reminder offsets", {"type": "object"}),
    "additionalEmailIds": array("Extra recipient addresses"),
    "selectedUsers": array("User IDs"),
    "fromAddress": string("From address"),
    "fromName": string("From name"),
}

BLOCK_SLOT_FIELDS = {
    "calendarId": string("Calendar ID"),
    "startTime": string("Start time (ISO 8601)"),
    "endTime": string("End time (ISO 8601)"),
    "title": string("Block title"),
    "assignedUserId": string("Assigned user ID"),
}


def _resource_operations(kind: str, label: str) -> dict[str, Operation]:
    base = f"/calendars/resources/{kind}"
    return {
        f"get_calendar_resources_{kind}": Operation(
            "GET", base, f"List calendar {label} resources", paging("skip"), location="locationId",
        ),
        f"create_calendar_resource_{kind[:-1]}": Operation(
            "POST", base, f"Create a calendar {label} resource", RESOURCE_FIELDS,
            ("name", "description", "quantity", "outOfService", "capacity", "calendarIds"),
            location="locationId",
        ),
        f"get_calendar_resource_{kind[:-1]}": Operation(
            "GET", base + "/{id}", f"Get a calendar {label} resource", RESOURCE_ID, ("id",),
        ),
        f"update_calendar_resource_{kind[:-1]}": Operation(
            "PUT", base + "/{id}", f"Update a calendar {label} resource",
            {**RESOURCE_ID, **RESOURCE_FIELDS}, ("id",), location="locationId",
        ),
        f"delete_calendar_resource_{kind[:-1]}": Operation(
            "DELETE", base + "/{id}", f"Delete a calendar {label} resource", RESOURCE_ID, ("id",),
        ),
    }


# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "get_calendar_groups": Operation(
        "GET", "/calendars/groups", "List calendar groups", location="locationId",
    ),
    "create_calendar_group": Operation(
        "POST", "/calendars/groups", "Create a calendar group", GROUP_FIELDS,
        ("name", "description", "slug"), location="locationId",
    ),
    "validate_group_slug": Operation(
        "POST", "/calendars/groups/validate-slug", "Check whether a calendar group slug is available",
        {"slug": string("Group URL slug")}, ("slug",), location="locationId",
    ),
    "update_calendar_group": Operation(
        "PUT", "/calendars/groups/{groupId}", "Update a calendar group",
        {**GROUP_ID, **GROUP_FIELDS}, ("groupId", "name", "description", "slug"),
    ),
    "delete_calendar_group": Operation(
        "DELETE", "/calendars/groups/{groupId}", "Delete a calendar group", GROUP_ID, ("groupId",),
    ),
    "disable_calendar_group": Operation(
        "PUT", "/calendars/groups/{groupId}/status", "Enable or disable a calendar group",
        {**GROUP_ID, "isActive": boolean("Whether the group is active")}, ("groupId", "isActive"),
    ),
    "get_calendars": Operation(
        "GET", "/calendars/", "List calendars",
        {"groupId": string("Filter by calendar group"), "showDrafted": boolean("Include draft calendars")},
        location="locationId",
    ),
    "create_calendar": Operation(
        "POST", "/calendars/", "Create a calendar", CALENDAR_FIELDS, ("name",), location="locationId",
    ),
    "get_calendar": Operation(
        "GET", "/calendars/{calendarId}", "Get a calendar by ID", CALENDAR_ID, ("calendarId",),
    ),
    "update_calendar": Operation(
        "PUT", "/calendars/{calendarId}", "Update a calendar", {**CALENDAR_ID, **CALENDAR_FIELDS}, ("calendarId",),
    ),
    "delete_calendar": Operation(
        "DELETE", "/calendars/{calendarId}", "Delete a calendar", CALENDAR_ID, ("calendarId",),
    ),
    "get_calendar_events": Operation(
        "GET", "/calendars/events", "List calendar events in a time range",
        RANGE, ("startTime", "endTime"), location="locationId",
    ),
    "get_free_slots": Operation(
        "GET", "/calendars/{calendarId}/free-slots", "List free booking slots of a calendar",
        {
            **CALENDAR_ID,
            "startDate": integer("Range start (epoch millis)"),
            "endDate": integer("Range end (epoch millis)"),
            "timezone": string("IANA timezone for the returned slots"),
            "userId": string("Only slots of this user"),
        },
        ("calendarId", "startDate", "endDate"),
    ),
    "create_appointment": Operation(
        "POST", "/calendars/events/appointments", "Book an appointment",
        APPOINTMENT_FIELDS, ("calendarId", "contactId", "startTime"), location="locationId",
    ),
    "get_appointment": Operation(
        "GET", "/calendars/events/appointments/{eventId}", "Get an appointment by ID", EVENT_ID, ("eventId",),
    ),
    "update_appointment": Operation(
        "PUT", "/calendars/events/appointments/{eventId}", "Update an appointment",
        {**EVENT_ID, **APPOINTMENT_FIELDS}, ("eventId",),
    ),
    "delete_appointment": Operation(
        "DELETE", "/calendars/events/{eventId}", "Delete an appointment or event", EVENT_ID, ("eventId",),
    ),
    "get_appointment_notes": Operation(
        "GET", "/calendars/appointments/{appointmentId}/notes", "List notes of an appointment",
        {**APPOINTMENT_ID, **paging()}, ("appointmentId",),
    ),
    "create_appointment_note": Operation(
        "POST", "/calendars/appointments/{appointmentId}/notes", "Add a note to an appointment",
        {**APPOINTMENT_ID, "body": string("Note text"), "userId": string("Author user ID")},
        ("appointmentId", "body"),
    ),
    "update_appointment_note": Operation(
        "PUT", "/calendars/appointments/{appointmentId}/notes/{noteId}", "Update an appointment note",
        {**APPOINTMENT_ID, **NOTE_ID, "body": string("Note text"), "userId": string("Author user ID")},
        ("appointmentId", "noteId", "body"),
    ),
    "delete_appointment_note": Operation(
        "DELETE", "/calendars/appointments/{appointmentId}/notes/{noteId}", "Delete an appointment note",
        {**APPOINTMENT_ID, **NOTE_ID}, ("appointmentId", "noteId"),
    ),
    **_resource_operations("equipments", "equipment"),
    **_resource_operations("rooms", "room"),
    "get_calendar_notifications": Operation(
        "GET", "/calendars/{calendarId}/notifications", "List notifications of a calendar",
        {
            **CALENDAR_ID,
            "isActive": boolean("Only active notifications"),
            "deleted": boolean("Include deleted notifications"),
            **paging("skip"),
        },
        ("calendarId",),
    ),
    "create_calendar_notifications": Operation(
        "POST", "/calendars/{calendarId}/notifications", "Create notifications for a calendar",
        {**CALENDAR_ID, "notifications": array("Notification definitions", {"type": "object"})},
        ("calendarId", "notifications"), body_arg="notifications",
    ),
    "get_calendar_notification": Operation(
        "GET", "/calendars/{calendarId}/notifications/{notificationId}", "Get a calendar notification",
        {**CALENDAR_ID, **NOTIFICATION_ID}, ("calendarId", "notificationId"),
    ),
    "update_calendar_notification": Operation(
        "PUT", "/calendars/{calendarId}/notifications/{notificationId}", "Update a calendar notification",
        {**CALENDAR_ID, **NOTIFICATION_ID, **NOTIFICATION_FIELDS, "deleted": boolean("Soft-delete flag")},
        ("calendarId", "notificationId"),
    ),
    "delete_calendar_notification": Operation(
        "DELETE", "/calendars/{calendarId}/notifications/{notificationId}", "Delete a calendar notification",
        {**CALENDAR_ID, **NOTIFICATION_ID}, ("calendarId", "notificationId"),
    ),
    "create_block_slot": Operation(
        "POST", "/calendars/events/block-slots", "Block a time slot on a calendar or user",
        BLOCK_SLOT_FIELDS, ("startTime", "endTime"), location="locationId",
    ),
    "update_block_slot": Operation(
        "PUT", "/calendars/events/block-slots/{eventId}", "Update a blocked time slot",
        {**EVENT_ID, **BLOCK_SLOT_FIELDS}, ("eventId",), location="locationId",
    ),
    "get_blocked_slots": Operation(
        "GET", "/calendars/blocked-slots", "List blocked slots in a time range",
        RANGE, ("startTime", "endTime"), location="locationId",
    ),
}
