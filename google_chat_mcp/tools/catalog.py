"""The fixed tool catalog.

Eight tools: seven forward to one Chat REST operation each, one translates
natural-language filter phrases locally. The set is closed; dispatch is a
lookup keyed by tool name.
"""

from __future__ import annotations

import copy
from typing import Any

from .types import ToolDescriptor


def _space_id() -> dict[str, Any]:
    return {"type": "string", "description": "The unique ID of the Google Chat space."}


def _schema(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


TOOL_DESCRIPTORS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="post_text_message",
        description=(
            "Post a text message to a Google Chat space. Refer to the API documentation: "
            "https://developers.google.com/chat/api/reference/rest/v1/spaces.messages/create"
        ),
        input_schema=_schema(
            {
                "spaceId": _space_id(),
                "text": {"type": "string", "description": "The text content of the message to be posted."},
            },
            ["spaceId", "text"],
        ),
    ),
    ToolDescriptor(
        name="fetch_member_details",
        description=(
            "Retrieve detailed membership information from a Google Chat space. See: "
            "https://developers.google.com/chat/api/reference/rest/v1/spaces.members/get"
        ),
        input_schema=_schema(
            {
                "spaceId": _space_id(),
                "memberId": {"type": "string", "description": "The unique ID of the member."},
            },
            ["spaceId", "memberId"],
        ),
    ),
    ToolDescriptor(
        name="fetch_space_details",
        description=(
            "Get comprehensive details about a specific Google Chat space. Documentation: "
            "https://developers.google.com/chat/api/reference/rest/v1/spaces/get"
        ),
        input_schema=_schema({"spaceId": _space_id()}, ["spaceId"]),
    ),
    ToolDescriptor(
        name="list_space_memberships",
        description=(
            "List all memberships in a Google Chat space along with detailed role and membership status. "
            "Documentation: https://developers.google.com/chat/api/reference/rest/v1/spaces.members/list"
        ),
        input_schema=_schema(
            {
                "spaceId": _space_id(),
                "pageSize": {
                    "type": "integer",
                    "description": "Maximum number of memberships to return (default is 100 if unspecified).",
                },
                "pageToken": {
                    "type": "string",
                    "description": "A page token from a previous call to paginate results.",
                },
                "filter": {"type": "string", "description": "Filter query (e.g., 'role = \"OWNER\"')."},
                "showInvited": {
                    "type": "boolean",
                    "description": "Include memberships of invited members if true.",
                },
            },
            ["spaceId"],
        ),
    ),
    ToolDescriptor(
        name="list_space_messages",
        description=(
            "Retrieve a list of messages from a Google Chat space, including those from blocked members "
            "and spaces. Refer to: https://developers.google.com/chat/api/reference/rest/v1/spaces.messages/list. "
            "Optional filters like 'Monday', 'manager message', 'Rahul message', etc. can be applied via "
            "apply_natural_language_filter."
        ),
        input_schema=_schema(
            {
                "spaceId": _space_id(),
                "pageSize": {
                    "type": "integer",
                    "description": "Maximum number of messages to return (default is 25 if unspecified).",
                },
                "pageToken": {
                    "type": "string",
                    "description": "A page token from a previous call for pagination.",
                },
                "orderBy": {
                    "type": "string",
                    "description": "Ordering of messages, e.g., 'createTime' or 'lastUpdateTime'.",
                    "enum": ["createTime", "lastUpdateTime"],
                },
                "filter": {
                    "type": "string",
                    "description": (
                        "Filter messages by criteria such as date, specific keywords (e.g., 'Rahul'), "
                        "days (e.g., 'Monday') etc."
                    ),
                },
                "showDeleted": {"type": "boolean", "description": "Include deleted messages if set to true."},
            },
            ["spaceId"],
        ),
    ),
    ToolDescriptor(
        name="fetch_message_details",
        description=(
            "Get detailed information about a specific message in a Google Chat space. See: "
            "https://developers.google.com/chat/api/reference/rest/v1/spaces.messages/get"
        ),
        input_schema=_schema(
            {
                "spaceId": _space_id(),
                "messageId": {"type": "string", "description": "The unique ID of the message."},
            },
            ["spaceId", "messageId"],
        ),
    ),
    ToolDescriptor(
        name="list_joined_spaces",
        description=(
            "List all Google Chat spaces that the caller is a member of. Group chats and DMs are listed "
            "only after the first message is sent. Documentation: "
            "https://developers.google.com/chat/api/reference/rest/v1/spaces/list"
        ),
        input_schema=_schema(
            {
                "pageSize": {
                    "type": "integer",
                    "description": "Maximum number of spaces to return (default is 100 if unspecified).",
                },
                "pageToken": {
                    "type": "string",
                    "description": "A page token from a previous call to paginate results.",
                },
                "filter": {
                    "type": "string",
                    "description": "Filter spaces using a query (e.g., 'spaceType = \"SPACE\"').",
                },
            },
        ),
    ),
    ToolDescriptor(
        name="apply_natural_language_filter",
        description=(
            "Convert a natural language filter query (e.g., 'Monday', 'Tuesday', 'Rahul message', "
            "'manager message', etc.) into a standardized filter string that can be used with other tools. "
            "This tool helps in mapping human-friendly filter terms to API query parameters."
        ),
        input_schema=_schema(
            {
                "filterText": {
                    "type": "string",
                    "description": "The natural language filter query provided by the user.",
                },
            },
            ["filterText"],
        ),
    ),
)

CATALOG: dict[str, ToolDescriptor] = {d.name: d for d in TOOL_DESCRIPTORS}


def descriptor_to_dict(descriptor: ToolDescriptor) -> dict[str, Any]:
    """Wire shape of a descriptor, as returned by ``tools/list``."""

    return {
        "name": descriptor.name,
        "description": descriptor.description,
        "inputSchema": copy.deepcopy(dict(descriptor.input_schema)),
    }
