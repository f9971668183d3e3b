"""GoHighLevel MCP tools: Products — products, prices, inventory and collections"""

from __future__ import annotations

from .base import Operation, array, boolean, integer, number, obj, paging, string

PRODUCT_ID = {"productId": string("Product ID")}

PRODUCT_FIELDS = {
    "name": string("Product name"),
    "productType": string("Product type", ["DIGITAL", "PHYSICAL", "SERVICE", "PHYSICAL/DIGITAL"]),
    "description": string("Product description"),
    "image": string("Image URL"),
    "statementDescriptor": string("Statement descriptor"),
    "availableInStore": boolean("List the product in the online store"),
    "medias": array("Media items", {"type": "object"}),
    "variants": array("Variant definitions", {"type": "object"}),
    "collectionIds": array("Collection IDs"),
    "slug": string("URL slug"),
}

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "ghl_create_product": Operation(
        "POST", "/products/", "Create a product", PRODUCT_FIELDS, ("name", "productType"),
        location="locationId",
    ),
    "ghl_list_products": Operation(
        "GET", "/products/", "List products",
        {**paging(), "search": string("Free-text search"), "collectionIds": string("Comma-separated collection IDs")},
        location="locationId",
    ),
    "ghl_get_product": Operation(
        "GET", "/products/{productId}", "Get a product", PRODUCT_ID, ("productId",), location="locationId",
    ),
    "ghl_update_product": Operation(
        "PUT", "/products/{productId}", "Update a product", {**PRODUCT_ID, **PRODUCT_FIELDS},
        ("productId", "name", "productType"), location="locationId",
    ),
    "ghl_delete_product": Operation(
        "DELETE", "/products/{productId}", "Delete a product", PRODUCT_ID, ("productId",), location="locationId",
    ),
    "ghl_create_price": Operation(
        "POST", "/products/{productId}/price", "Create a price for a product",
        {
            **PRODUCT_ID,
            "name": string("Price name"),
            "type": string("Price type", ["one_time", "recurring"]),
            "currency": string("Currency code"),
            "amount": number("Amount"),
            "recurring": obj("Recurrence: interval, intervalCount"),
            "description": string("Price description"),
            "trialPeriod": integer("Trial period in days"),
            "totalCycles": integer("Number of billing cycles"),
            "setupFee": number("Setup fee"),
            "compareAtPrice": number("Compare-at price"),
            "trackInventory": boolean("Track inventory for this price"),
            "availableQuantity": integer("Units in stock"),
            "sku": string("SKU"),
        },
        ("productId", "name", "type", "currency", "amount"), location="locationId",
    ),
    "ghl_list_prices": Operation(
        "GET", "/products/{productId}/price", "List prices of a product",
        {**PRODUCT_ID, **paging(), "ids": string("Comma-separated price IDs")}, ("productId",),
        location="locationId",
    ),
    "ghl_list_inventory": Operation(
        "GET", "/products/inventory", "List inventory of tracked prices",
        {**paging(), "search": string("Free-text search")}, location="altId",
    ),
    "ghl_create_product_collection": Operation(
        "POST", "/products/collections", "Create a product collection",
        {
            "name": string("Collection name"),
            "slug": string("URL slug"),
            "image": string("Image URL"),
            "seo": obj("SEO title and description"),
        },
        ("name", "slug"), location="altId",
    ),
    "ghl_list_product_collections": Operation(
        "GET", "/products/collections", "List product collections",
        {**paging(), "collectionIds": string("Comma-separated collection IDs"), "name": string("Filter by name")},
        location="altId",
    ),
}
