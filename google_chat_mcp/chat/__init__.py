"""Google Chat REST backend: capability protocol and httpx implementation."""

from __future__ import annotations

from .auth import RefreshTokenCredentials
from .client import ChatClient
from .errors import ChatApiError, ChatAuthError
from .http import HttpChatClient

__all__ = [
    "ChatApiError",
    "ChatAuthError",
    "ChatClient",
    "HttpChatClient",
    "RefreshTokenCredentials",
]
