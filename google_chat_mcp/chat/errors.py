from __future__ import annotations


class ChatApiError(RuntimeError):
    """Failure reported by (or while reaching) the Google Chat REST API.

    ``message`` is the human-readable text surfaced in tool error results.
    """

    def __init__(
        self,
        error_type: str,
        message: str,
        *,
        status_code: int | None = None,
        status: str | None = None,
    ):
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.status_code = status_code
        self.status = status


class ChatAuthError(ChatApiError):
    """The refresh token could not be exchanged for an access token."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__("auth", message, status_code=status_code)
