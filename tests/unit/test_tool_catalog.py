from __future__ import annotations

from google_chat_mcp.tools import CATALOG, TOOL_DESCRIPTORS, descriptor_to_dict
from google_chat_mcp.tools.dispatcher import build_routes


def test_catalog_is_the_fixed_set_of_eight_tools() -> None:
    assert [d.name for d in TOOL_DESCRIPTORS] == [
        "post_text_message",
        "fetch_member_details",
        "fetch_space_details",
        "list_space_memberships",
        "list_space_messages",
        "fetch_message_details",
        "list_joined_spaces",
        "apply_natural_language_filter",
    ]
    assert len(CATALOG) == len(TOOL_DESCRIPTORS)


def test_required_fields() -> None:
    required = {name: set(d.required) for name, d in CATALOG.items()}
    assert required == {
        "post_text_message": {"spaceId", "text"},
        "fetch_member_details": {"spaceId", "memberId"},
        "fetch_space_details": {"spaceId"},
        "list_space_memberships": {"spaceId"},
        "list_space_messages": {"spaceId"},
        "fetch_message_details": {"spaceId", "messageId"},
        "list_joined_spaces": set(),
        "apply_natural_language_filter": {"filterText"},
    }


def test_optional_fields() -> None:
    assert set(CATALOG["list_space_memberships"].properties) == {
        "spaceId",
        "pageSize",
        "pageToken",
        "filter",
        "showInvited",
    }
    assert set(CATALOG["list_joined_spaces"].properties) == {"pageSize", "pageToken", "filter"}
    assert CATALOG["list_space_messages"].properties["orderBy"]["enum"] == ["createTime", "lastUpdateTime"]


def test_every_tool_has_a_handler() -> None:
    routes = build_routes()
    assert set(routes) == set(CATALOG)
    assert routes["list_joined_spaces"].action == "listing joined spaces"


def test_descriptor_wire_shape() -> None:
    wire = descriptor_to_dict(CATALOG["fetch_space_details"])
    assert set(wire) == {"name", "description", "inputSchema"}
    assert wire["inputSchema"]["type"] == "object"
    assert wire["inputSchema"]["required"] == ["spaceId"]
    assert "required" not in descriptor_to_dict(CATALOG["list_joined_spaces"])["inputSchema"]


def test_space_id_property_is_not_shared_between_tools() -> None:
    a = CATALOG["fetch_space_details"].properties["spaceId"]
    b = CATALOG["list_space_messages"].properties["spaceId"]
    assert a == b
    assert a is not b


def test_descriptor_wire_shape_is_a_copy() -> None:
    wire = descriptor_to_dict(CATALOG["post_text_message"])
    wire["inputSchema"]["properties"]["text"]["type"] = "integer"

    assert CATALOG["post_text_message"].properties["text"]["type"] == "string"
