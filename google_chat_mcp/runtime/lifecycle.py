from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from google_chat_mcp.chat import HttpChatClient, RefreshTokenCredentials
from google_chat_mcp.config import AppConfig, ConfigError, build_app_config, load_config, resolve_profile_configs
from google_chat_mcp.observability.logging import configure_logging
from google_chat_mcp.server import build_server, serve_stdio
from google_chat_mcp.tools import TOOL_DESCRIPTORS, ToolDispatcher, descriptor_to_dict


logger = logging.getLogger(__name__)

_COMMANDS = {"serve", "tools", "print-config"}
_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_SECRET_KEYS = {"client_id", "client_secret", "refresh_token", "access_token"}


def _redact_secrets(obj: Any) -> Any:
    """Mask credentials for human-facing config dumps."""

    if isinstance(obj, dict):
        out: dict[str, Any] = {}
        for k, v in obj.items():
            if isinstance(k, str) and (k in _SECRET_KEYS or any(p in k.lower() for p in ("secret", "password"))):
                out[k] = "<redacted>"
            else:
                out[k] = _redact_secrets(v)
        return out
    if isinstance(obj, list):
        return [_redact_secrets(x) for x in obj]
    return obj


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="google-chat-mcp",
        description="Google Chat MCP server (stdio)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default=None,
        help="Logging level; overrides logging.level from config",
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument("--config", type=Path, help="Path to a YAML config file (skips profile resolution)")
    group.add_argument(
        "--profile",
        choices=["app", "dev"],
        default="app",
        help="Config profile from ./configs, or the packaged defaults (app loads app.yaml; dev overlays dev.yaml)",
    )

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("serve", help="Serve the tools over MCP stdio").set_defaults(command="serve")
    sub.add_parser("tools", help="Print the tool catalog as JSON").set_defaults(command="tools")
    sub.add_parser("print-config", help="Load and print the expanded config").set_defaults(command="print-config")
    return parser


async def run_server(cfg: AppConfig) -> None:
    credentials = RefreshTokenCredentials(
        client_id=cfg.google.client_id,
        client_secret=cfg.google.client_secret,
        refresh_token=cfg.google.refresh_token,
        token_url=cfg.google.token_url,
    )
    async with HttpChatClient(
        credentials=credentials,
        base_url=cfg.google.api_base_url,
        timeout_s=cfg.google.timeout_s,
    ) as chat:
        server = build_server(ToolDispatcher(chat), name=cfg.server.name, version=cfg.server.version)
        await serve_stdio(server)


def main(argv: Sequence[str] | None = None) -> int:
    """Console entrypoint referenced by pyproject.toml.

    ``google-chat-mcp tools`` and ``--help`` work without any credentials.
    """

    argv_list = list(argv) if argv is not None else sys.argv[1:]
    if not any(a in _COMMANDS for a in argv_list) and not any(a in {"-h", "--help"} for a in argv_list):
        argv_list = [*argv_list, "serve"]

    try:
        ns = _build_parser().parse_args(argv_list)
    except SystemExit as e:
        code = e.code
        return int(code) if isinstance(code, int) else 1

    configure_logging(level=ns.log_level or "INFO")

    if ns.command == "tools":
        sys.stdout.write(json.dumps([descriptor_to_dict(d) for d in TOOL_DESCRIPTORS], ensure_ascii=False, indent=2))
        sys.stdout.write("\n")
        return 0

    try:
        if ns.config is not None:
            config_paths = [ns.config]
        else:
            config_paths = resolve_profile_configs(profile=ns.profile, configs_dir=Path.cwd() / "configs")

        raw = load_config(config_paths)
        logger.info("config_loaded", extra={"config_files": [str(p) for p in config_paths]})

        if ns.command == "print-config":
            sys.stdout.write(json.dumps(_redact_secrets(raw), ensure_ascii=False, indent=2))
            sys.stdout.write("\n")
            return 0

        cfg = build_app_config(raw)
        if ns.log_level is None:
            configure_logging(level=cfg.logging.level)

        asyncio.run(run_server(cfg))
        return 0

    except ConfigError as e:
        logger.error("config_error", extra={"error": str(e)})
        sys.stderr.write(f"ConfigError: {e}\n")
        return 2
    except KeyboardInterrupt:
        logger.info("shutdown_requested")
        return 0
    except Exception as e:  # noqa: BLE001
        logger.exception("fatal_error")
        sys.stderr.write(f"Fatal error: {e}\n")
        return 1
