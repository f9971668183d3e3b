"""GoHighLevel MCP tools: Social Planner — posts, accounts, CSV imports, categories, tags and OAuth"""

from __future__ import annotations

from .base import Operation, array, boolean, integer, obj, string

BASE = "/social-media-posting/{locationId}"
POST_ID = {"id": string("Post ID")}
PLATFORMS = ["google", "facebook", "instagram", "linkedin", "twitter", "tiktok", "tiktok-business"]

POST_FIELDS = {
    "accountIds": array("Social account IDs to publish to"),
    "summary": string("Post text"),
    "media": array("Media items: url, caption, type", {"type": "object"}),
    "status": string("Post status", ["draft", "scheduled", "published", "failed", "in_review", "deleted"]),
    "scheduleDate": string("Scheduled publish time (ISO 8601)"),
    "followUpComment": string("Comment posted right after publishing"),
    "type": string("Post type", ["post", "story", "reel"]),
    "tags": array("Tag IDs"),
    "categoryId": string("Category ID"),
    "userId": string("Author user ID"),
    "ogTagsDetails": obj("Open Graph preview details"),
}

LOOKUP = {
    "searchText": string("Free-text search"),
    "limit": string("Maximum number of results"),
    "skip": string("Number of results to skip"),
}

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "search_social_posts": Operation(
        "POST", BASE + "/posts/list", "List social posts with filters",
        {
            "type": string("Post state", ["recent", "all", "scheduled", "draft", "failed", "in_review", "published", "in_progress", "deleted"]),
            "accounts": string("Comma-separated account IDs"),
            "skip": string("Number of results to skip"),
            "limit": string("Maximum number of results"),
            "fromDate": string("Range start (ISO 8601)"),
            "toDate": string("Range end (ISO 8601)"),
            "includeUsers": string("Include user details ('true' / 'false')"),
            "postType": string("Post type", ["post", "story", "reel"]),
        },
        ("fromDate", "toDate", "includeUsers"), location="locationId",
    ),
    "create_social_post": Operation(
        "POST", BASE + "/posts", "Create or schedule a social post", POST_FIELDS,
        ("accountIds", "summary", "type"), location="locationId",
    ),
    "get_social_post": Operation(
        "GET", BASE + "/posts/{id}", "Get a social post", POST_ID, ("id",), location="locationId",
    ),
    "update_social_post": Operation(
        "PUT", BASE + "/posts/{id}", "Update a social post", {**POST_ID, **POST_FIELDS}, ("id",),
        location="locationId",
    ),
    "delete_social_post": Operation(
        "DELETE", BASE + "/posts/{id}", "Delete a social post", POST_ID, ("id",), location="locationId",
    ),
    "bulk_delete_social_posts": Operation(
        "POST", BASE + "/posts/bulk-delete", "Delete up to 50 social posts at once",
        {"postIds": array("Post IDs")}, ("postIds",), location="locationId",
    ),
    "get_social_accounts": Operation(
        "GET", BASE + "/accounts", "List connected social accounts and groups", location="locationId",
    ),
    "delete_social_account": Operation(
        "DELETE", BASE + "/accounts/{id}", "Disconnect a social account",
        {"id": string("Account ID"), "companyId": string("Company ID"), "userId": string("User ID")},
        ("id",), location="locationId",
    ),
    "upload_social_csv": Operation(
        "POST", BASE + "/csv", "Import social posts from a hosted CSV file",
        {"fileUrl": string("URL of the CSV file")}, ("fileUrl",), location="locationId",
    ),
    "get_csv_upload_status": Operation(
        "GET", BASE + "/csv", "List CSV imports and their status",
        {"skip": string("Number of results to skip"), "limit": string("Maximum number of results"),
         "userId": string("Filter by user")},
        location="locationId",
    ),
    "set_csv_accounts": Operation(
        "POST", BASE + "/set-accounts", "Choose the accounts an imported CSV will publish to",
        {
            "accountIds": array("Social account IDs"),
            "filePath": string("Path of the uploaded CSV"),
            "rowsCount": integer("Number of rows"),
            "fileName": string("CSV file name"),
            "approver": string("Approver user ID"),
            "userId": string("User ID"),
        },
        ("accountIds", "filePath", "rowsCount", "fileName"), location="locationId",
    ),
    "get_social_categories": Operation(
        "GET", BASE + "/categories", "List social post categories", LOOKUP, location="locationId",
    ),
    "get_social_category": Operation(
        "GET", BASE + "/categories/{id}", "Get a social post category",
        {"id": string("Category ID")}, ("id",), location="locationId",
    ),
    "get_social_tags": Operation(
        "GET", BASE + "/tags", "List social post tags", LOOKUP, location="locationId",
    ),
    "get_social_tags_by_ids": Operation(
        "POST", BASE + "/tags/details", "Get social post tags by ID",
        {"tagIds": array("Tag IDs")}, ("tagIds",), location="locationId",
    ),
    "start_social_oauth": Operation(
        "GET", "/social-media-posting/oauth/{platform}/start", "Start the OAuth flow connecting a social platform",
        {
            "platform": string("Platform", PLATFORMS),
            "userId": string("User ID starting the flow"),
            "page": string("Page to return to"),
            "reconnect": boolean("Reconnect an existing account"),
        },
        ("platform", "userId"), location="locationId",
    ),
    "get_platform_accounts": Operation(
        "GET", "/social-media-posting/oauth/{locationId}/{platform}/accounts/{accountId}",
        "List pages / profiles available after an OAuth connection",
        {"platform": string("Platform", PLATFORMS), "accountId": string("OAuth account ID")},
        ("platform", "accountId"), location="locationId",
    ),
}
