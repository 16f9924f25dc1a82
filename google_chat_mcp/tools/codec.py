from __future__ import annotations

import json
from typing import Any

from .types import TextContent, ToolResult


def text_result(text: str) -> ToolResult:
    return ToolResult(content=(TextContent(text=text),))


def error_result(text: str) -> ToolResult:
    return ToolResult(content=(TextContent(text=text),), is_error=True)


def dumps_response(data: Any) -> str:
    """Serialize a backend response for humans: indented, key order kept."""

    return json.dumps(data, indent=2, ensure_ascii=False)


def json_result(data: Any) -> ToolResult:
    return text_result(dumps_response(data))


def describe_exception(exc: BaseException) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or type(exc).__name__
