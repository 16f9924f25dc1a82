from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable

import httpx

from .errors import ChatAuthError


logger = logging.getLogger(__name__)

# Refresh this long before the server-side expiry.
_EXPIRY_SKEW_S = 60.0


class RefreshTokenCredentials:
    """Exchange a long-lived OAuth refresh token for short-lived access tokens.

    The access token is cached until shortly before it expires. Concurrent
    callers share a single refresh request.
    """

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        refresh_token: str,
        token_url: str = "https://oauth2.googleapis.com/token",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self._refresh_token = refresh_token
        self._token_url = token_url
        self._clock = clock

        self._access_token: str | None = None
        self._expires_at = 0.0
        self._lock = asyncio.Lock()

    def _valid(self) -> bool:
        return self._access_token is not None and self._clock() < self._expires_at

    async def access_token(self, http: httpx.AsyncClient) -> str:
        if self._valid():
            return self._access_token  # type: ignore[return-value]

        async with self._lock:
            if not self._valid():
                await self._refresh(http)
            return self._access_token  # type: ignore[return-value]

    async def _refresh(self, http: httpx.AsyncClient) -> None:
        data = {
            "grant_type": "refresh_token",
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            "refresh_token": self._refresh_token,
        }
        try:
            response = await http.post(self._token_url, data=data)
        except httpx.HTTPError as e:
            raise ChatAuthError(f"token request failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.status_code >= 400:
            message = body.get("error_description") or body.get("error") or response.reason_phrase
            logger.warning("token_refresh_failed", extra={"status_code": response.status_code})
            raise ChatAuthError(str(message), status_code=response.status_code)

        token = body.get("access_token")
        if not isinstance(token, str) or not token:
            raise ChatAuthError("token response did not contain an access_token")

        expires_in = float(body.get("expires_in", 3600))
        self._access_token = token
        self._expires_at = self._clock() + max(0.0, expires_in - _EXPIRY_SKEW_S)
        logger.debug("token_refreshed", extra={"expires_in": expires_in})
