"""Tool catalog, dispatch and the natural-language filter translator."""

from __future__ import annotations

from .catalog import CATALOG, TOOL_DESCRIPTORS, descriptor_to_dict
from .dispatcher import ToolDispatcher
from .errors import ToolArgumentsError, ToolDispatchError, ToolNotFoundError
from .filters import translate_filter
from .types import TextContent, ToolCall, ToolDescriptor, ToolResult

__all__ = [
    "CATALOG",
    "TOOL_DESCRIPTORS",
    "TextContent",
    "ToolArgumentsError",
    "ToolCall",
    "ToolDescriptor",
    "ToolDispatchError",
    "ToolDispatcher",
    "ToolNotFoundError",
    "ToolResult",
    "descriptor_to_dict",
    "translate_filter",
]
