"""GoHighLevel MCP tools: Payments — orders, fulfillments, transactions, subscriptions, coupons and custom providers"""

from __future__ import annotations

from .base import Operation, array, boolean, integer, number, obj, paging, string

ORDER_ID = {"orderId": string("Order ID")}
COUPON_ID = {"id": string("Coupon ID")}
PAYMENT_MODE = string("Payment mode", ["live", "test"])

DATE_RANGE = {
    "startAt": string("Range start (YYYY-MM-DD)"),
    "endAt": string("Range end (YYYY-MM-DD)"),
}

LIST_FILTERS = {
    **paging(),
    **DATE_RANGE,
    "paymentMode": PAYMENT_MODE,
    "search": string("Free-text search"),
    "contactId": string("Filter by contact"),
}

COUPON_FIELDS = {
    "name": string("Coupon name"),
    "code": string("Coupon code"),
    "discountType": string("Discount type", ["percentage", "amount"]),
    "discountValue": number("Discount value"),
    "startDate": string("Start date (ISO 8601)"),
    "endDate": string("End date (ISO 8601)"),
    "usageLimit": integer("Maximum redemptions"),
    "productIds": array("Products the coupon applies to"),
    "applyToFuturePayments": boolean("Apply to recurring payments"),
    "applyToFuturePaymentsConfig": obj("Recurring discount configuration"),
    "limitPerCustomer": boolean("One redemption per customer"),
}

PROVIDER_KEYS = obj("API key and publishable key: apiKey, publishableKey")

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "create_whitelabel_integration_provider": Operation(
        "POST", "/payments/integrations/provider/whitelabel", "Create a white-label payment integration provider",
        {
            "uniqueName": string("Unique provider name"),
            "title": string("Display title"),
            "provider": string("Underlying provider", ["authorize-net", "nmi"]),
            "description": string("Provider description"),
            "imageUrl": string("Logo URL"),
        },
        ("uniqueName", "title", "provider", "description", "imageUrl"), location="altId",
    ),
    "list_whitelabel_integration_providers": Operation(
        "GET", "/payments/integrations/provider/whitelabel", "List white-label payment integration providers",
        paging(), location="altId",
    ),
    "list_orders": Operation(
        "GET", "/payments/orders", "List orders",
        {
            **LIST_FILTERS,
            "status": string("Order status"),
            "funnelProductIds": string("Comma-separated funnel product IDs"),
        },
        location="altId",
    ),
    "get_order_by_id": Operation(
        "GET", "/payments/orders/{orderId}", "Get an order", ORDER_ID, ("orderId",), location="altId",
    ),
    "create_order_fulfillment": Operation(
        "POST", "/payments/orders/{orderId}/fulfillments", "Fulfill items of an order",
        {
            **ORDER_ID,
            "trackings": array("Tracking entries: trackingNumber, shippingCarrier, trackingUrl", {"type": "object"}),
            "items": array("Fulfilled items: priceId, qty", {"type": "object"}),
            "notifyCustomer": boolean("Email the customer"),
        },
        ("orderId", "trackings", "items", "notifyCustomer"), location="altId",
    ),
    "list_order_fulfillments": Operation(
        "GET", "/payments/orders/{orderId}/fulfillments", "List fulfillments of an order", ORDER_ID,
        ("orderId",), location="altId",
    ),
    "list_transactions": Operation(
        "GET", "/payments/transactions", "List transactions",
        {
            **LIST_FILTERS,
            "entitySourceType": string("Source type"),
            "entitySourceSubType": string("Source sub-type"),
            "entityId": string("Source entity ID"),
            "subscriptionId": string("Filter by subscription"),
        },
        location="altId",
    ),
    "get_transaction_by_id": Operation(
        "GET", "/payments/transactions/{transactionId}", "Get a transaction",
        {"transactionId": string("Transaction ID")}, ("transactionId",), location="altId",
    ),
    "list_subscriptions": Operation(
        "GET", "/payments/subscriptions", "List subscriptions",
        {**LIST_FILTERS, "entityId": string("Source entity ID"), "id": string("Subscription ID")},
        location="altId",
    ),
    "get_subscription_by_id": Operation(
        "GET", "/payments/subscriptions/{subscriptionId}", "Get a subscription",
        {"subscriptionId": string("Subscription ID")}, ("subscriptionId",), location="altId",
    ),
    "list_coupons": Operation(
        "GET", "/payments/coupon/list", "List coupons",
        {**paging(), "status": string("Coupon status", ["scheduled", "active", "expired"]),
         "search": string("Free-text search")},
        location="altId",
    ),
    "create_coupon": Operation(
        "POST", "/payments/coupon", "Create a coupon", COUPON_FIELDS,
        ("name", "code", "discountType", "discountValue", "startDate"), location="altId",
    ),
    "update_coupon": Operation(
        "PUT", "/payments/coupon", "Update a coupon", {**COUPON_ID, **COUPON_FIELDS},
        ("id", "name", "code", "discountType", "discountValue", "startDate"), location="altId",
    ),
    "delete_coupon": Operation(
        "DELETE", "/payments/coupon", "Delete a coupon", COUPON_ID, ("id",), location="altId", payload="body",
    ),
    "get_coupon": Operation(
        "GET", "/payments/coupon", "Get a coupon by ID and code",
        {**COUPON_ID, "code": string("Coupon code")}, ("id", "code"), location="altId",
    ),
    "create_custom_provider_integration": Operation(
        "POST", "/payments/custom-provider/provider", "Register a custom payment provider",
        {
            "name": string("Provider name"),
            "description": string("Provider description"),
            "paymentsUrl": string("Checkout iframe URL"),
            "queryUrl": string("Query endpoint URL"),
            "imageUrl": string("Logo URL"),
        },
        ("name", "description", "paymentsUrl", "queryUrl", "imageUrl"),
        location="locationId", query=("locationId",),
    ),
    "delete_custom_provider_integration": Operation(
        "DELETE", "/payments/custom-provider/provider", "Remove the custom payment provider",
        location="locationId",
    ),
    "get_custom_provider_config": Operation(
        "GET", "/payments/custom-provider/connect", "Get the custom provider connection config",
        location="locationId",
    ),
    "create_custom_provider_config": Operation(
        "POST", "/payments/custom-provider/connect", "Connect live and test keys of the custom provider",
        {"live": PROVIDER_KEYS, "test": PROVIDER_KEYS}, ("live", "test"),
        location="locationId", query=("locationId",),
    ),
    "disconnect_custom_provider_config": Operation(
        "POST", "/payments/custom-provider/disconnect", "Disconnect the custom provider for a mode",
        {"liveMode": boolean("Disconnect live (true) or test (false) keys")}, ("liveMode",),
        location="locationId", query=("locationId",),
    ),
}
