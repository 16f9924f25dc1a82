"""httpx implementation of :class:`ChatClient` against Chat REST v1.

Reference: https://developers.google.com/chat/api/reference/rest
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from .auth import RefreshTokenCredentials
from .errors import ChatApiError


logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> tuple[str, str | None]:
    """Pull ``error.message`` / ``error.status`` out of a Google error body."""

    try:
        body = response.json()
    except ValueError:
        return (response.text or response.reason_phrase or f"HTTP {response.status_code}"), None

    err = body.get("error") if isinstance(body, dict) else None
    if isinstance(err, dict):
        message = err.get("message") or response.reason_phrase
        status = err.get("status")
        return str(message), (str(status) if status is not None else None)
    return (response.reason_phrase or f"HTTP {response.status_code}"), None


class HttpChatClient:
    """Authenticated Chat API client.

    One instance is created at startup and shared by every tool call; it
    owns the underlying ``httpx.AsyncClient`` and must be closed with
    :meth:`aclose`.
    """

    def __init__(
        self,
        *,
        credentials: RefreshTokenCredentials,
        base_url: str = "https://chat.googleapis.com/v1/",
        timeout_s: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._credentials = credentials
        self._http = httpx.AsyncClient(
            base_url=base_url if base_url.endswith("/") else base_url + "/",
            timeout=timeout_s,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "HttpChatClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        token = await self._credentials.access_token(self._http)
        try:
            response = await self._http.request(
                method,
                path,
                params=dict(params) if params else None,
                json=json,
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as e:
            raise ChatApiError("transport", str(e) or type(e).__name__) from e

        if response.is_error:
            message, status = _error_message(response)
            logger.info(
                "chat_api_error",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise ChatApiError("http", message, status_code=response.status_code, status=status)

        if not response.content:
            return {}
        return response.json()

    async def create_message(self, parent: str, text: str) -> dict[str, Any]:
        return await self._request("POST", f"{parent}/messages", json={"text": text})

    async def get_member(self, name: str) -> dict[str, Any]:
        return await self._request("GET", name)

    async def get_space(self, name: str) -> dict[str, Any]:
        return await self._request("GET", name)

    async def list_members(self, parent: str, params: Mapping[str, Any]) -> dict[str, Any]:
        return await self._request("GET", f"{parent}/members", params=params)

    async def list_messages(self, parent: str, params: Mapping[str, Any]) -> dict[str, Any]:
        return await self._request("GET", f"{parent}/messages", params=params)

    async def get_message(self, name: str) -> dict[str, Any]:
        return await self._request("GET", name)

    async def list_spaces(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return await self._request("GET", "spaces", params=params)
