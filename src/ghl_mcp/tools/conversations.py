"""GoHighLevel MCP tools: Conversations — messaging, conversation threads, recordings and transcriptions"""

from __future__ import annotations

from .base import Operation, array, boolean, integer, obj, string

CONVERSATION_ID = {"conversationId": string("Conversation ID")}
MESSAGE_ID = {"messageId": string("Message ID")}

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "send_sms": Operation(
        "POST", "/conversations/messages", "Send an SMS message to a contact",
        {
            "contactId": string("Contact ID"),
            "message": string("Message text"),
            "fromNumber": string("Sending phone number"),
            "toNumber": string("Recipient phone number"),
            "scheduledTimestamp": integer("Unix timestamp to schedule the message"),
        },
        ("contactId", "message"), fixed={"type": "SMS"},
    ),
    "send_email": Operation(
        "POST", "/conversations/messages", "Send an email message to a contact",
        {
            "contactId": string("Contact ID"),
            "subject": string("Email subject"),
            "message": string("Plain-text body"),
            "html": string("HTML body"),
            "emailFrom": string("Sender address"),
            "emailTo": string("Recipient address"),
            "emailCc": array("CC addresses"),
            "emailBcc": array("BCC addresses"),
            "attachments": array("Attachment URLs"),
            "replyMessageId": string("Message ID being replied to"),
            "scheduledTimestamp": integer("Unix timestamp to schedule the email"),
        },
        ("contactId", "subject"), fixed={"type": "Email"},
    ),
    "search_conversations": Operation(
        "GET", "/conversations/search", "Search conversations",
        {
            "contactId": string("Filter by contact"),
            "query": string("Free-text search"),
            "status": string("Conversation status", ["all", "read", "unread", "starred", "recents"]),
            "assignedTo": string("Filter by assigned user"),
            "limit": integer("Maximum number of results"),
            "lastMessageType": string("Filter by last message type"),
            "startAfterDate": integer("Pagination cursor (timestamp)"),
        },
        location="locationId",
    ),
    "get_conversation": Operation(
        "GET", "/conversations/{conversationId}", "Get a conversation by ID",
        CONVERSATION_ID, ("conversationId",),
    ),
    "create_conversation": Operation(
        "POST", "/conversations/", "Create a conversation for a contact",
        {"contactId": string("Contact ID")}, ("contactId",), location="locationId",
    ),
    "update_conversation": Operation(
        "PUT", "/conversations/{conversationId}", "Update a conversation",
        {
            **CONVERSATION_ID,
            "unreadCount": integer("Unread message count"),
            "starred": boolean("Star the conversation"),
            "feedback": obj("Feedback payload"),
        },
        ("conversationId",), location="locationId",
    ),
    "delete_conversation": Operation(
        "DELETE", "/conversations/{conversationId}", "Delete a conversation",
        CONVERSATION_ID, ("conversationId",),
    ),
    "get_recent_messages": Operation(
        "GET", "/conversations/{conversationId}/messages", "List the most recent messages of a conversation",
        {
            **CONVERSATION_ID,
            "limit": integer("Maximum number of messages"),
            "lastMessageId": string("Pagination cursor"),
            "type": string("Comma-separated message types"),
        },
        ("conversationId",),
    ),
    "get_email_message": Operation(
        "GET", "/conversations/messages/email/{id}", "Get an email message by ID",
        {"id": string("Email message ID")}, ("id",),
    ),
    "get_message": Operation(
        "GET", "/conversations/messages/{id}", "Get a message by ID",
        {"id": string("Message ID")}, ("id",),
    ),
    "upload_message_attachments": Operation(
        "POST", "/conversations/messages/upload", "Attach hosted files to a conversation",
        {**CONVERSATION_ID, "attachmentUrls": array("File URLs")},
        ("conversationId", "attachmentUrls"), location="locationId",
    ),
    "update_message_status": Operation(
        "PUT", "/conversations/messages/{messageId}/status", "Update the delivery status of a message",
        {
            **MESSAGE_ID,
            "status": string("Delivery status", ["delivered", "failed", "pending", "read"]),
            "error": obj("Error details"),
            "emailMessageId": string("Email message ID"),
            "recipients": array("Recipient addresses"),
        },
        ("messageId", "status"),
    ),
    "add_inbound_message": Operation(
        "POST", "/conversations/messages/inbound", "Record an inbound message received outside the platform",
        {
            "type": string("Message channel", ["SMS", "Email", "WhatsApp", "GMB", "IG", "FB", "Custom", "WebChat", "Live_Chat", "Call"]),
            **CONVERSATION_ID,
            "conversationProviderId": string("Conversation provider ID"),
            "message": string("Message text"),
            "attachments": array("Attachment URLs"),
            "html": string("HTML body"),
            "subject": string("Email subject"),
            "emailFrom": string("Sender address"),
            "emailTo": string("Recipient address"),
            "altId": string("External message ID"),
            "date": string("Message date (ISO 8601)"),
        },
        ("type", "conversationId", "conversationProviderId"),
    ),
    "add_outbound_call": Operation(
        "POST", "/conversations/messages/outbound", "Record an outbound call made outside the platform",
        {
            **CONVERSATION_ID,
            "conversationProviderId": string("Conversation provider ID"),
            "call": obj("Call details: to, from, status"),
            "attachments": array("Attachment URLs"),
            "altId": string("External message ID"),
            "date": string("Call date (ISO 8601)"),
        },
        ("conversationId", "conversationProviderId"), fixed={"type": "Call"},
    ),
    "get_message_recording": Operation(
        "GET", "/conversations/messages/{messageId}/locations/{locationId}/recording",
        "Download the recording of a call message", MESSAGE_ID, ("messageId",), location="locationId",
    ),
    "get_message_transcription": Operation(
        "GET", "/conversations/locations/{locationId}/messages/{messageId}/transcription",
        "Get the transcription of a call message", MESSAGE_ID, ("messageId",), location="locationId",
    ),
    "download_transcription": Operation(
        "GET", "/conversations/locations/{locationId}/messages/{messageId}/transcription/download",
        "Download the transcription of a call message as text", MESSAGE_ID, ("messageId",),
        location="locationId",
    ),
    "cancel_scheduled_message": Operation(
        "DELETE", "/conversations/messages/{messageId}/schedule", "Cancel a scheduled message",
        MESSAGE_ID, ("messageId",),
    ),
    "cancel_scheduled_email": Operation(
        "DELETE", "/conversations/messages/email/{emailMessageId}/schedule", "Cancel a scheduled email",
        {"emailMessageId": string("Email message ID")}, ("emailMessageId",),
    ),
    "live_chat_typing": Operation(
        "POST", "/conversations/providers/live-chat/typing", "Show or hide the agent typing indicator in live chat",
        {
            "isTyping": boolean("Whether the agent is typing"),
            "visitorId": string("Live chat visitor ID"),
            **CONVERSATION_ID,
        },
        ("isTyping", "visitorId", "conversationId"), location="locationId",
    ),
}
