"""GoHighLevel MCP tools: Invoices — templates, schedules, invoices and estimates"""

from __future__ import annotations

from .base import Operation, array, boolean, obj, paging, string

TEMPLATE_ID = {"templateId": string("Invoice template ID")}
SCHEDULE_ID = {"scheduleId": string("Invoice schedule ID")}
INVOICE_ID = {"invoiceId": string("Invoice ID")}
ESTIMATE_ID = {"estimateId": string("Estimate ID")}
SEND_ACTION = string("Delivery channel", ["sms_and_email", "send_manually", "email", "sms"])

DOCUMENT_FIELDS = {
    "name": string("Document name"),
    "title": string("Title shown on the document"),
    "currency": string("Currency code"),
    "items": array("Line items: name, amount, qty, currency", {"type": "object"}),
    "businessDetails": obj("Business details shown on the document"),
    "discount": obj("Discount: type, value"),
    "termsNotes": string("Terms and notes"),
    "contactDetails": obj("Customer details: id, name, email, phoneNo"),
    "liveMode": boolean("Live (true) or test (false) mode"),
}

LIST_FILTERS = {
    **paging(),
    "status": string("Status filter"),
    "search": string("Free-text search"),
}

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "create_invoice_template": Operation(
        "POST", "/invoices/template", "Create an invoice template", DOCUMENT_FIELDS,
        ("name", "currency", "items"), location="altId",
    ),
    "list_invoice_templates": Operation(
        "GET", "/invoices/template", "List invoice templates", LIST_FILTERS, location="altId",
    ),
    "get_invoice_template": Operation(
        "GET", "/invoices/template/{templateId}", "Get an invoice template", TEMPLATE_ID, ("templateId",),
        location="altId",
    ),
    "update_invoice_template": Operation(
        "PUT", "/invoices/template/{templateId}", "Update an invoice template", {**TEMPLATE_ID, **DOCUMENT_FIELDS},
        ("templateId",), location="altId",
    ),
    "delete_invoice_template": Operation(
        "DELETE", "/invoices/template/{templateId}", "Delete an invoice template", TEMPLATE_ID, ("templateId",),
        location="altId",
    ),
    "create_invoice_schedule": Operation(
        "POST", "/invoices/schedule", "Create a recurring invoice schedule",
        {**DOCUMENT_FIELDS, "schedule": obj("Recurrence rule: executeAt, rrule")},
        ("name", "contactDetails", "schedule", "currency", "items"), location="altId",
    ),
    "list_invoice_schedules": Operation(
        "GET", "/invoices/schedule", "List invoice schedules", LIST_FILTERS, location="altId",
    ),
    "get_invoice_schedule": Operation(
        "GET", "/invoices/schedule/{scheduleId}", "Get an invoice schedule", SCHEDULE_ID, ("scheduleId",),
        location="altId",
    ),
    "create_invoice": Operation(
        "POST", "/invoices/", "Create an invoice",
        {
            **DOCUMENT_FIELDS,
            "issueDate": string("Issue date (YYYY-MM-DD)"),
            "dueDate": string("Due date (YYYY-MM-DD)"),
            "invoiceNumber": string("Invoice number"),
            "sentTo": obj("Recipients: email, phoneNo"),
        },
        ("name", "contactDetails", "currency", "items", "issueDate"), location="altId",
    ),
    "list_invoices": Operation(
        "GET", "/invoices/", "List invoices",
        {
            **LIST_FILTERS,
            "contactId": string("Filter by contact"),
            "startAt": string("Range start (YYYY-MM-DD)"),
            "endAt": string("Range end (YYYY-MM-DD)"),
        },
        location="altId",
    ),
    "get_invoice": Operation(
        "GET", "/invoices/{invoiceId}", "Get an invoice", INVOICE_ID, ("invoiceId",), location="altId",
    ),
    "send_invoice": Operation(
        "POST", "/invoices/{invoiceId}/send", "Send an invoice to the customer",
        {
            **INVOICE_ID,
            "userId": string("Sending user ID"),
            "action": SEND_ACTION,
            "liveMode": boolean("Live (true) or test (false) mode"),
            "sentFrom": obj("Sender: fromName, fromEmail"),
        },
        ("invoiceId", "userId", "action", "liveMode"), location="altId",
    ),
    "create_estimate": Operation(
        "POST", "/invoices/estimate", "Create an estimate",
        {
            **DOCUMENT_FIELDS,
            "issueDate": string("Issue date (YYYY-MM-DD)"),
            "expiryDate": string("Expiry date (YYYY-MM-DD)"),
            "estimateNumber": string("Estimate number"),
            "frequencySettings": obj("Recurrence settings"),
        },
        ("name", "contactDetails", "currency", "items"), location="altId",
    ),
    "list_estimates": Operation(
        "GET", "/invoices/estimate/list", "List estimates",
        {**LIST_FILTERS, "contactId": string("Filter by contact")}, location="altId",
    ),
    "send_estimate": Operation(
        "POST", "/invoices/estimate/{estimateId}/send", "Send an estimate to the customer",
        {
            **ESTIMATE_ID,
            "userId": string("Sending user ID"),
            "action": SEND_ACTION,
            "liveMode": boolean("Live (true) or test (false) mode"),
            "estimateName": string("Estimate name"),
            "sentFrom": obj("Sender: fromName, fromEmail"),
        },
        ("estimateId", "userId", "action", "liveMode"), location="altId",
    ),
    "create_invoice_from_estimate": Operation(
        "POST", "/invoices/estimate/{estimateId}/invoice", "Convert an estimate into an invoice",
        {
            **ESTIMATE_ID,
            "markAsInvoiced": boolean("Mark the estimate as invoiced"),
            "version": string("Estimate version to convert"),
        },
        ("estimateId", "markAsInvoiced"), location="altId",
    ),
    "generate_invoice_number": Operation(
        "GET", "/invoices/generate-invoice-number", "Reserve the next invoice number", location="altId",
    ),
    "generate_estimate_number": Operation(
        "GET", "/invoices/estimate/number/generate", "Reserve the next estimate number", location="altId",
    ),
}
