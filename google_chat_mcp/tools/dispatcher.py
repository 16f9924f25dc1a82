"""Tool call routing.

Every call goes through :meth:`ToolDispatcher.dispatch`:

1. Unknown names raise :class:`ToolNotFoundError` (no backend call).
2. Arguments are checked against the descriptor schema
   (:class:`ToolArgumentsError`, no backend call).
3. The handler runs. Any exception it raises becomes an ``is_error`` result
   of the form ``Error <action>: <message>``; it never escapes the call.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping

from google_chat_mcp.chat.client import ChatClient
from google_chat_mcp.observability.context import bind_call, new_call_id

from .catalog import CATALOG
from .codec import describe_exception, error_result, json_result, text_result
from .errors import ToolNotFoundError
from .filters import translate_filter
from .types import ToolCall, ToolDescriptor, ToolResult


logger = logging.getLogger(__name__)

Handler = Callable[[ChatClient, Mapping[str, Any]], Awaitable[ToolResult]]


def space_path(space_id: str) -> str:
    return f"spaces/{space_id}"


def member_path(space_id: str, member_id: str) -> str:
    return f"spaces/{space_id}/members/{member_id}"


def message_path(space_id: str, message_id: str) -> str:
    return f"spaces/{space_id}/messages/{message_id}"


def optional_params(arguments: Mapping[str, Any], *keys: str) -> dict[str, Any]:
    """Pick the optional fields the caller actually supplied (null counts as absent)."""

    return {k: arguments[k] for k in keys if arguments.get(k) is not None}


async def _post_text_message(chat: ChatClient, args: Mapping[str, Any]) -> ToolResult:
    response = await chat.create_message(space_path(args["spaceId"]), args["text"])
    return text_result(f"Message created successfully. Message ID: {response.get('name')}")


async def _fetch_member_details(chat: ChatClient, args: Mapping[str, Any]) -> ToolResult:
    return json_result(await chat.get_member(member_path(args["spaceId"], args["memberId"])))


async def _fetch_space_details(chat: ChatClient, args: Mapping[str, Any]) -> ToolResult:
    return json_result(await chat.get_space(space_path(args["spaceId"])))


async def _list_space_memberships(chat: ChatClient, args: Mapping[str, Any]) -> ToolResult:
    params = optional_params(args, "pageSize", "pageToken", "filter", "showInvited")
    return json_result(await chat.list_members(space_path(args["spaceId"]), params))


async def _list_space_messages(chat: ChatClient, args: Mapping[str, Any]) -> ToolResult:
    params = optional_params(args, "pageSize", "pageToken", "orderBy", "filter", "showDeleted")
    return json_result(await chat.list_messages(space_path(args["spaceId"]), params))


async def _fetch_message_details(chat: ChatClient, args: Mapping[str, Any]) -> ToolResult:
    return json_result(await chat.get_message(message_path(args["spaceId"], args["messageId"])))


async def _list_joined_spaces(chat: ChatClient, args: Mapping[str, Any]) -> ToolResult:
    return json_result(await chat.list_spaces(optional_params(args, "pageSize", "pageToken", "filter")))


async def _apply_natural_language_filter(chat: ChatClient, args: Mapping[str, Any]) -> ToolResult:
    return text_result(f"Converted filter: {translate_filter(args['filterText'])}")


@dataclass(frozen=True, slots=True)
class ToolRoute:
    descriptor: ToolDescriptor
    action: str
    handler: Handler


# tool name -> (error-message action, handler)
_HANDLERS: dict[str, tuple[str, Handler]] = {
    "post_text_message": ("creating message", _post_text_message),
    "fetch_member_details": ("fetching member details", _fetch_member_details),
    "fetch_space_details": ("fetching space details", _fetch_space_details),
    "list_space_memberships": ("listing space memberships", _list_space_memberships),
    "list_space_messages": ("listing space messages", _list_space_messages),
    "fetch_message_details": ("fetching message details", _fetch_message_details),
    "list_joined_spaces": ("listing joined spaces", _list_joined_spaces),
    "apply_natural_language_filter": ("applying natural language filter", _apply_natural_language_filter),
}


def build_routes(catalog: Mapping[str, ToolDescriptor] = CATALOG) -> dict[str, ToolRoute]:
    missing = set(catalog) ^ set(_HANDLERS)
    if missing:
        raise RuntimeError(f"catalog and handlers disagree on tools: {sorted(missing)}")
    return {
        name: ToolRoute(descriptor=descriptor, action=_HANDLERS[name][0], handler=_HANDLERS[name][1])
        for name, descriptor in catalog.items()
    }


class ToolDispatcher:
    """Route tool calls to handlers backed by one shared :class:`ChatClient`."""

    def __init__(self, chat: ChatClient) -> None:
        self._chat = chat
        self._routes = build_routes()

    def descriptors(self) -> list[ToolDescriptor]:
        return [route.descriptor for route in self._routes.values()]

    async def dispatch(self, call: ToolCall) -> ToolResult:
        route = self._routes.get(call.name)
        if route is None:
            logger.warning("tool_not_found", extra={"tool_name": call.name})
            raise ToolNotFoundError(call.name)

        route.descriptor.validate(call.arguments)

        with bind_call(call_id=new_call_id(), tool=call.name):
            started = time.monotonic()
            try:
                result = await route.handler(self._chat, call.arguments)
            except Exception as e:  # noqa: BLE001
                logger.warning(
                    "tool_backend_error",
                    extra={"error_type": getattr(e, "error_type", type(e).__name__), "error": str(e)},
                    exc_info=True,
                )
                return error_result(f"Error {route.action}: {describe_exception(e)}")

            logger.info("tool_ok", extra={"latency_ms": round((time.monotonic() - started) * 1000, 1)})
            return result
