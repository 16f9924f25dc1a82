from __future__ import annotations

import asyncio
import json
from typing import Any

import pytest

from google_chat_mcp.tools import ToolArgumentsError, ToolCall, ToolDispatcher, ToolNotFoundError, ToolResult


def _dispatch(chat: Any, name: str, **arguments: Any) -> ToolResult:
    return asyncio.run(ToolDispatcher(chat).dispatch(ToolCall(name=name, arguments=arguments)))


@pytest.mark.parametrize(
    ("name", "arguments", "expected_op", "expected_path"),
    [
        ("post_text_message", {"spaceId": "S1", "text": "hi"}, "create_message", "spaces/S1"),
        ("fetch_member_details", {"spaceId": "S1", "memberId": "U1"}, "get_member", "spaces/S1/members/U1"),
        ("fetch_space_details", {"spaceId": "S1"}, "get_space", "spaces/S1"),
        ("list_space_memberships", {"spaceId": "S1"}, "list_members", "spaces/S1"),
        ("list_space_messages", {"spaceId": "S1"}, "list_messages", "spaces/S1"),
        ("fetch_message_details", {"spaceId": "S1", "messageId": "M1"}, "get_message", "spaces/S1/messages/M1"),
        ("list_joined_spaces", {}, "list_spaces", None),
    ],
)
def test_backend_tools_build_resource_paths(
    chat: Any, name: str, arguments: dict[str, Any], expected_op: str, expected_path: str | None
) -> None:
    res = _dispatch(chat, name, **arguments)

    assert res.is_error is False
    assert len(chat.calls) == 1
    op, path, _ = chat.calls[0]
    assert op == expected_op
    assert path == expected_path


def test_post_text_message_confirms_with_message_name(chat: Any) -> None:
    res = _dispatch(chat, "post_text_message", spaceId="S1", text="hello")

    assert res.text == "Message created successfully. Message ID: spaces/S1/messages/M1"
    assert chat.calls == [("create_message", "spaces/S1", {"text": "hello"})]


def test_read_tools_return_indented_json_in_backend_order(chat: Any) -> None:
    chat.response = {"name": "spaces/S1", "displayName": "Équipe", "spaceType": "SPACE"}

    res = _dispatch(chat, "fetch_space_details", spaceId="S1")

    assert res.text == json.dumps(chat.response, indent=2, ensure_ascii=False)
    assert list(json.loads(res.text)) == ["name", "displayName", "spaceType"]
    assert [c.type for c in res.content] == ["text"]


def test_optional_fields_are_forwarded_verbatim(chat: Any) -> None:
    _dispatch(
        chat,
        "list_space_messages",
        spaceId="S1",
        pageSize=10,
        pageToken="",
        orderBy="createTime",
        filter='createTime > "2025-01-01T00:00:00Z"',
        showDeleted=False,
    )

    _, _, params = chat.calls[0]
    assert params == {
        "pageSize": 10,
        "pageToken": "",
        "orderBy": "createTime",
        "filter": 'createTime > "2025-01-01T00:00:00Z"',
        "showDeleted": False,
    }


def test_omitted_and_null_optional_fields_are_not_sent(chat: Any) -> None:
    _dispatch(chat, "list_space_memberships", spaceId="S1", pageSize=5, pageToken=None)
    _dispatch(chat, "list_joined_spaces")

    assert chat.calls[0][2] == {"pageSize": 5}
    assert chat.calls[1][2] == {}


def test_unknown_tool_raises_method_not_found_without_backend_call(chat: Any) -> None:
    with pytest.raises(ToolNotFoundError) as ei:
        _dispatch(chat, "delete_space", spaceId="S1")

    assert ei.value.message == "Unknown tool: delete_space"
    assert chat.calls == []


def test_missing_required_argument_is_rejected(chat: Any) -> None:
    with pytest.raises(ToolArgumentsError) as ei:
        _dispatch(chat, "fetch_message_details", spaceId="S1")

    assert ei.value.field == "messageId"
    assert chat.calls == []


def test_enum_and_type_violations_are_rejected(chat: Any) -> None:
    with pytest.raises(ToolArgumentsError):
        _dispatch(chat, "list_space_messages", spaceId="S1", orderBy="sender")
    with pytest.raises(ToolArgumentsError):
        _dispatch(chat, "list_space_messages", spaceId="S1", pageSize=True)
    with pytest.raises(ToolArgumentsError):
        _dispatch(chat, "list_space_memberships", spaceId="S1", showInvited="yes")

    assert chat.calls == []


@pytest.mark.parametrize(
    ("name", "arguments", "prefix"),
    [
        ("post_text_message", {"spaceId": "S1", "text": "hi"}, "Error creating message: "),
        ("fetch_member_details", {"spaceId": "S1", "memberId": "U1"}, "Error fetching member details: "),
        ("fetch_space_details", {"spaceId": "S1"}, "Error fetching space details: "),
        ("list_space_memberships", {"spaceId": "S1"}, "Error listing space memberships: "),
        ("list_space_messages", {"spaceId": "S1"}, "Error listing space messages: "),
        ("fetch_message_details", {"spaceId": "S1", "messageId": "M1"}, "Error fetching message details: "),
        ("list_joined_spaces", {}, "Error listing joined spaces: "),
    ],
)
def test_backend_failure_becomes_error_result(
    failing_chat: Any, name: str, arguments: dict[str, Any], prefix: str
) -> None:
    res = _dispatch(failing_chat, name, **arguments)

    assert res.is_error is True
    assert len(res.content) == 1
    assert res.text == prefix + "Requested entity was not found."


def test_unexpected_exception_is_contained(chat: Any) -> None:
    chat.fail = ConnectionResetError("peer went away")

    res = _dispatch(chat, "fetch_space_details", spaceId="S1")

    assert res.is_error is True
    assert res.text == "Error fetching space details: peer went away"


def test_failure_does_not_affect_other_calls(chat: Any) -> None:
    dispatcher = ToolDispatcher(chat)

    async def run() -> list[ToolResult]:
        chat.fail = RuntimeError("boom")
        first = await dispatcher.dispatch(ToolCall(name="fetch_space_details", arguments={"spaceId": "S1"}))
        chat.fail = None
        second = await dispatcher.dispatch(ToolCall(name="fetch_space_details", arguments={"spaceId": "S2"}))
        return [first, second]

    first, second = asyncio.run(run())
    assert first.is_error is True
    assert second.is_error is False


def test_concurrent_calls_are_independent(chat: Any) -> None:
    dispatcher = ToolDispatcher(chat)

    async def run() -> list[ToolResult]:
        calls = [
            dispatcher.dispatch(ToolCall(name="fetch_space_details", arguments={"spaceId": f"S{i}"}))
            for i in range(5)
        ]
        return await asyncio.gather(*calls)

    results = asyncio.run(run())
    assert all(not r.is_error for r in results)
    assert sorted(path for _, path, _ in chat.calls) == [f"spaces/S{i}" for i in range(5)]


def test_natural_language_filter_tool_is_local(chat: Any) -> None:
    res = _dispatch(chat, "apply_natural_language_filter", filterText="rahul message")

    assert res.is_error is False
    assert res.text == 'Converted filter: text CONTAINS "Rahul"'
    assert chat.calls == []


def test_natural_language_filter_fallback(chat: Any) -> None:
    res = _dispatch(chat, "apply_natural_language_filter", filterText="hello world")
    assert res.text == "Converted filter: hello world"


def test_tool_result_is_frozen(chat: Any) -> None:
    res = _dispatch(chat, "fetch_space_details", spaceId="S1")
    with pytest.raises(AttributeError):
        res.is_error = True  # type: ignore[misc]
