from __future__ import annotations


class ToolDispatchError(RuntimeError):
    """A tool call rejected before any handler ran.

    These are protocol-level faults: fatal to the one call, reported on the
    RPC error channel, never turned into a ToolResult.
    """

    def __init__(self, message: str, *, tool: str):
        super().__init__(message)
        self.message = message
        self.tool = tool


class ToolNotFoundError(ToolDispatchError):
    def __init__(self, tool: str):
        super().__init__(f"Unknown tool: {tool}", tool=tool)


class ToolArgumentsError(ToolDispatchError):
    def __init__(self, tool: str, problem: str, *, field: str | None = None):
        where = f" ({field})" if field else ""
        super().__init__(f"Invalid arguments for {tool}{where}: {problem}", tool=tool)
        self.field = field
        self.problem = problem
