"""GoHighLevel MCP tools: Store — shipping zones, rates, carriers and store settings"""

from __future__ import annotations

from .base import Operation, array, boolean, number, obj, paging, string

ZONE = "/store/shipping-zone"
CARRIER = "/store/shipping-carrier"
ZONE_ID = {"shippingZoneId": string("Shipping zone ID")}
RATE_ID = {"shippingRateId": string("Shipping rate ID")}
CARRIER_ID = {"shippingCarrierId": string("Shipping carrier ID")}

ZONE_FIELDS = {
    "name": string("Zone name"),
    "countries": array("Countries: code plus optional states", {"type": "object"}),
}

RATE_FIELDS = {
    "name": string("Rate name"),
    "description": string("Rate description"),
    "currency": string("Currency code"),
    "amount": number("Flat amount"),
    "conditionType": string("Condition", ["none", "price", "weight"]),
    "minCondition": number("Lower bound of the condition"),
    "maxCondition": number("Upper bound of the condition"),
    "isCarrierRate": boolean("Use live carrier rates"),
    "shippingCarrierId": string("Carrier ID for carrier rates"),
    "percentageOfRateFee": number("Markup on carrier rates in percent"),
    "shippingCarrierServices": array("Carrier services: name, value", {"type": "object"}),
}

CARRIER_FIELDS = {
    "name": string("Carrier name"),
    "callbackUrl": string("Rate callback URL"),
    "services": array("Services: name, value", {"type": "object"}),
    "allowsMultipleServiceSelection": boolean("Allow several services per order"),
}

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "ghl_create_shipping_zone": Operation(
        "POST", ZONE, "Create a shipping zone", ZONE_FIELDS, ("name", "countries"), location="altId",
    ),
    "ghl_list_shipping_zones": Operation(
        "GET", ZONE, "List shipping zones",
        {**paging(), "withShippingRate": boolean("Include shipping rates")}, location="altId",
    ),
    "ghl_get_shipping_zone": Operation(
        "GET", ZONE + "/{shippingZoneId}", "Get a shipping zone",
        {**ZONE_ID, "withShippingRate": boolean("Include shipping rates")}, ("shippingZoneId",),
        location="altId",
    ),
    "ghl_update_shipping_zone": Operation(
        "PUT", ZONE + "/{shippingZoneId}", "Update a shipping zone", {**ZONE_ID, **ZONE_FIELDS},
        ("shippingZoneId",), location="altId",
    ),
    "ghl_delete_shipping_zone": Operation(
        "DELETE", ZONE + "/{shippingZoneId}", "Delete a shipping zone", ZONE_ID, ("shippingZoneId",),
        location="altId",
    ),
    "ghl_get_available_shipping_rates": Operation(
        "POST", ZONE + "/shipping-rates", "Quote the shipping rates available for an order",
        {
            "country": string("Destination country code"),
            "address": obj("Destination address"),
            "amountAvailable": string("Whether the order total is known"),
            "totalOrderAmount": number("Order total"),
            "weightAvailable": boolean("Whether the order weight is known"),
            "totalOrderWeight": number("Order weight"),
            "source": obj("Order source: type, subType"),
            "products": array("Products: id, quantity", {"type": "object"}),
            "couponCode": string("Applied coupon code"),
        },
        ("country", "totalOrderAmount", "totalOrderWeight", "source", "products"), location="altId",
    ),
    "ghl_create_shipping_rate": Operation(
        "POST", ZONE + "/{shippingZoneId}/shipping-rate", "Create a shipping rate in a zone",
        {**ZONE_ID, **RATE_FIELDS}, ("shippingZoneId", "name", "currency", "amount", "conditionType"),
        location="altId",
    ),
    "ghl_list_shipping_rates": Operation(
        "GET", ZONE + "/{shippingZoneId}/shipping-rate", "List shipping rates of a zone",
        {**ZONE_ID, **paging()}, ("shippingZoneId",), location="altId",
    ),
    "ghl_get_shipping_rate": Operation(
        "GET", ZONE + "/{shippingZoneId}/shipping-rate/{shippingRateId}", "Get a shipping rate",
        {**ZONE_ID, **RATE_ID}, ("shippingZoneId", "shippingRateId"), location="altId",
    ),
    "ghl_update_shipping_rate": Operation(
        "PUT", ZONE + "/{shippingZoneId}/shipping-rate/{shippingRateId}", "Update a shipping rate",
        {**ZONE_ID, **RATE_ID, **RATE_FIELDS}, ("shippingZoneId", "shippingRateId"), location="altId",
    ),
    "ghl_delete_shipping_rate": Operation(
        "DELETE", ZONE + "/{shippingZoneId}/shipping-rate/{shippingRateId}", "Delete a shipping rate",
        {**ZONE_ID, **RATE_ID}, ("shippingZoneId", "shippingRateId"), location="altId",
    ),
    "ghl_create_shipping_carrier": Operation(
        "POST", CARRIER, "Register a shipping carrier", CARRIER_FIELDS, ("name", "callbackUrl", "services"),
        location="altId",
    ),
    "ghl_list_shipping_carriers": Operation(
        "GET", CARRIER, "List shipping carriers", location="altId",
    ),
    "ghl_get_shipping_carrier": Operation(
        "GET", CARRIER + "/{shippingCarrierId}", "Get a shipping carrier", CARRIER_ID, ("shippingCarrierId",),
        location="altId",
    ),
    "ghl_update_shipping_carrier": Operation(
        "PUT", CARRIER + "/{shippingCarrierId}", "Update a shipping carrier", {**CARRIER_ID, **CARRIER_FIELDS},
        ("shippingCarrierId",), location="altId",
    ),
    "ghl_delete_shipping_carrier": Operation(
        "DELETE", CARRIER + "/{shippingCarrierId}", "Delete a shipping carrier", CARRIER_ID,
        ("shippingCarrierId",), location="altId",
    ),
    "ghl_create_store_setting": Operation(
        "POST", "/store/store-setting", "Create or replace the store settings",
        {
            "shippingOrigin": obj("Ship-from address"),
            "storeOrderNotification": obj("Order notification email settings"),
            "storeOrderFulfillmentNotification": obj("Fulfillment notification email settings"),
        },
        ("shippingOrigin",), location="altId",
    ),
    "ghl_get_store_setting": Operation(
        "GET", "/store/store-setting", "Get the store settings", location="altId",
    ),
}
