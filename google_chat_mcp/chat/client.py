from __future__ import annotations

from typing import Any, Mapping, Protocol


class ChatClient(Protocol):
    """Capability surface of the Google Chat backend used by the tools.

    ``parent`` and ``name`` are resource paths such as ``spaces/AAA`` or
    ``spaces/AAA/messages/BBB``. ``params`` holds optional query fields and
    only contains keys the caller actually supplied.

    Implementations raise on failure; the exception text is shown to callers.
    """

    async def create_message(self, parent: str, text: str) -> dict[str, Any]:
        ...

    async def get_member(self, name: str) -> dict[str, Any]:
        ...

    async def get_space(self, name: str) -> dict[str, Any]:
        ...

    async def list_members(self, parent: str, params: Mapping[str, Any]) -> dict[str, Any]:
        ...

    async def list_messages(self, parent: str, params: Mapping[str, Any]) -> dict[str, Any]:
        ...

    async def get_message(self, name: str) -> dict[str, Any]:
        ...

    async def list_spaces(self, params: Mapping[str, Any]) -> dict[str, Any]:
        ...
