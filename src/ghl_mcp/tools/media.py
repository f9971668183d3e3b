"""GoHighLevel MCP tools: Media Library"""

from __future__ import annotations

from .base import Operation, boolean, string

# (tool_name) -> Operation
OPERATIONS: dict[str, Operation] = {
    "get_media_files": Operation(
        "GET", "/medias/files", "List files and folders of the media library",
        {
            "sortBy": string("Sort field", ["createdAt", "name"]),
            "sortOrder": string("Sort order", ["asc", "desc"]),
            "type": string("Entry type", ["file", "folder"]),
            "query": string("Free-text search"),
            "limit": string("Maximum number of results"),
            "offset": string("Number of results to skip"),
            "parentId": string("Folder ID"),
        },
        location="altId",
    ),
    "upload_media_file": Operation(
        "POST", "/medias/upload-file", "Add a hosted file to the media library",
        {
            "fileUrl": string("URL of the hosted file"),
            "name": string("File name"),
            "parentId": string("Target folder ID"),
            "hosted": boolean("File is hosted elsewhere (always true here)"),
        },
        ("fileUrl",), location="altId", payload="form", fixed={"hosted": True},
    ),
    "delete_media_file": Operation(
        "DELETE", "/medias/{id}", "Delete a file or folder from the media library",
        {"id": string("File or folder ID")}, ("id",), location="altId",
    ),
}
