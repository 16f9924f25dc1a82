"""MCP server adapter.

Binds :class:`ToolDispatcher` to the MCP SDK low-level server. The
``tools/call`` handler is registered directly (not through the SDK decorator)
so dispatch errors reach the client as JSON-RPC errors rather than being
folded into an ``isError`` result.
"""

from __future__ import annotations

import copy
import logging

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from google_chat_mcp.tools import (
    ToolArgumentsError,
    ToolCall,
    ToolDescriptor,
    ToolDispatcher,
    ToolNotFoundError,
    ToolResult,
)


logger = logging.getLogger(__name__)


def to_mcp_tool(descriptor: ToolDescriptor) -> types.Tool:
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=copy.deepcopy(dict(descriptor.input_schema)),
    )


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
        isError=result.is_error,
    )


def build_server(dispatcher: ToolDispatcher, *, name: str = "google-chat-server", version: str = "0.1.0") -> Server:
    server: Server = Server(name, version=version)
    tools = [to_mcp_tool(d) for d in dispatcher.descriptors()]

    async def handle_list_tools(req: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(types.ListToolsResult(tools=tools))

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        call = ToolCall(name=req.params.name, arguments=dict(req.params.arguments or {}))
        try:
            result = await dispatcher.dispatch(call)
        except ToolNotFoundError as e:
            raise McpError(types.ErrorData(code=types.METHOD_NOT_FOUND, message=e.message)) from e
        except ToolArgumentsError as e:
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=e.message)) from e
        return types.ServerResult(to_call_tool_result(result))

    server.request_handlers[types.ListToolsRequest] = handle_list_tools
    server.request_handlers[types.CallToolRequest] = handle_call_tool
    return server


async def serve_stdio(server: Server) -> None:
    """Run ``server`` on stdin/stdout until the client disconnects."""

    async with stdio_server() as (read_stream, write_stream):
        logger.info("server_started", extra={"transport": "stdio", "server": server.name})
        await server.run(read_stream, write_stream, server.create_initialization_options())
    logger.info("server_stopped", extra={"server": server.name})
