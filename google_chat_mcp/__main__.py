from __future__ import annotations

from google_chat_mcp.runtime.lifecycle import main

if __name__ == "__main__":
    raise SystemExit(main())
