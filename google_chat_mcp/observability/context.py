from __future__ import annotations

import secrets
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator


_call_id: ContextVar[str | None] = ContextVar("call_id", default=None)
_tool: ContextVar[str | None] = ContextVar("tool", default=None)


def new_call_id() -> str:
    return secrets.token_hex(8)


@contextmanager
def bind_call(*, call_id: str, tool: str) -> Iterator[None]:
    """Bind per-call fields for the duration of one tool call.

    Each asyncio task gets its own context copy, so overlapping calls never
    see each other's fields.
    """

    call_token = _call_id.set(call_id)
    tool_token = _tool.set(tool)
    try:
        yield
    finally:
        _tool.reset(tool_token)
        _call_id.reset(call_token)


def snapshot() -> dict[str, object]:
    """Return the bound call fields for logging."""

    out: dict[str, object] = {}
    if (v := _call_id.get()) is not None:
        out["call_id"] = v
    if (v := _tool.get()) is not None:
        out["tool"] = v
    return out
