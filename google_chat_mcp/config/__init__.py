"""Configuration loading and schema.

- YAML-first configuration: ./configs/*.yaml, else the packaged defaults
- Strict ${ENV_VAR} expansion (missing/empty env vars are errors)
- Typed, frozen view of the expanded mapping
"""

from __future__ import annotations

from google_chat_mcp.config.errors import ConfigError
from google_chat_mcp.config.loader import load_config, packaged_configs_dir, resolve_profile_configs
from google_chat_mcp.config.model import AppConfig, GoogleConfig, LoggingConfig, ServerConfig, build_app_config

__all__ = [
    "AppConfig",
    "ConfigError",
    "GoogleConfig",
    "LoggingConfig",
    "ServerConfig",
    "build_app_config",
    "load_config",
    "packaged_configs_dir",
    "resolve_profile_configs",
]
