from __future__ import annotations

from .context import bind_call, new_call_id, snapshot
from .logging import JsonFormatter, configure_logging

__all__ = ["JsonFormatter", "bind_call", "configure_logging", "new_call_id", "snapshot"]
