"""GoHighLevel MCP tools: Blogs — posts, sites, authors and categories"""

from __future__ import annotations

from .base import Operation, array, integer, string

POST_FIELDS = {
    "title": string("Post title"),
    "blogId": string("Blog site ID"),
    "imageUrl": string("Cover image URL"),
    "imageAltText": string("Cover image alt text"),
    "description": string("Short description"),
    "rawHTML": string("Full HTML content"),
    "status": string("Publication status", ["DRAFT", "PUBLISHED", "SCHEDULED", "ARCHIVED"]),
    "categories": array("Category IDs"),
    "tags": array("Tags"),
    "author": string("Author ID"),
    "urlSlug": string("URL slug"),
    "canonicalLink": string("Canonical URL"),
    "publishedAt": string("Publication date (ISO 8601)"),
}

LIST_ARGS = {"limit": integer("Maximum number of results"), "offset": integer("Number of results to skip")}

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "create_blog_post": Operation(
        "POST", "/blogs/posts", "Create a blog post", POST_FIELDS,
        ("title", "blogId", "rawHTML", "status"), location="locationId",
    ),
    "update_blog_post": Operation(
        "PUT", "/blogs/posts/{postId}", "Update a blog post",
        {"postId": string("Blog post ID"), **POST_FIELDS}, ("postId", "blogId"), location="locationId",
    ),
    "get_blog_posts": Operation(
        "GET", "/blogs/posts/all", "List posts of a blog",
        {
            "blogId": string("Blog site ID"),
            "searchTerm": string("Free-text search"),
            "status": string("Publication status", ["DRAFT", "PUBLISHED", "SCHEDULED", "ARCHIVED"]),
            **LIST_ARGS,
        },
        ("blogId",), location="locationId",
    ),
    "get_blog_sites": Operation(
        "GET", "/blogs/site/all", "List blog sites",
        {"searchTerm": string("Free-text search"), "skip": integer("Number of results to skip"),
         "limit": integer("Maximum number of results")},
        location="locationId",
    ),
    "get_blog_authors": Operation(
        "GET", "/blogs/authors", "List blog authors", LIST_ARGS, location="locationId",
    ),
    "get_blog_categories": Operation(
        "GET", "/blogs/categories", "List blog categories", LIST_ARGS, location="locationId",
    ),
    "check_url_slug": Operation(
        "GET", "/blogs/posts/url-slug-exists", "Check whether a blog URL slug is already taken",
        {"urlSlug": string("URL slug"), "postId": string("Post ID to exclude from the check")},
        ("urlSlug",), location="locationId",
    ),
}
