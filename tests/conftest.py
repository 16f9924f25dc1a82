from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import pytest

from google_chat_mcp.chat.errors import ChatApiError


@dataclass(slots=True)
class FakeChatClient:
    """In-memory ChatClient that records every backend call."""

    calls: list[tuple[str, str | None, dict[str, Any] | None]] = field(default_factory=list)
    response: dict[str, Any] = field(default_factory=lambda: {"name": "spaces/S1/messages/M1"})
    fail: Exception | None = None

    def _record(self, op: str, path: str | None, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        self.calls.append((op, path, dict(params) if params is not None else None))
        if self.fail is not None:
            raise self.fail
        return self.response

    async def create_message(self, parent: str, text: str) -> dict[str, Any]:
        return self._record("create_message", parent, {"text": text})

    async def get_member(self, name: str) -> dict[str, Any]:
        return self._record("get_member", name)

    async def get_space(self, name: str) -> dict[str, Any]:
        return self._record("get_space", name)

    async def list_members(self, parent: str, params: Mapping[str, Any]) -> dict[str, Any]:
        return self._record("list_members", parent, params)

    async def list_messages(self, parent: str, params: Mapping[str, Any]) -> dict[str, Any]:
        return self._record("list_messages", parent, params)

    async def get_message(self, name: str) -> dict[str, Any]:
        return self._record("get_message", name)

    async def list_spaces(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return self._record("list_spaces", None, params)


@pytest.fixture
def chat() -> FakeChatClient:
    return FakeChatClient()


@pytest.fixture
def failing_chat() -> FakeChatClient:
    return FakeChatClient(fail=ChatApiError("http", "Requested entity was not found.", status_code=404))
