"""Google Chat MCP server.

Exposes a fixed catalog of Google Chat REST operations as MCP tools over
stdio, plus a small natural-language filter translator.
"""

__version__ = "0.1.0"
