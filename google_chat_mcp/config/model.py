from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from google_chat_mcp.config.errors import ConfigError


@dataclass(frozen=True)
class ServerConfig:
    name: str = "google-chat-server"
    version: str = "0.1.0"


@dataclass(frozen=True)
class GoogleConfig:
    """OAuth client credentials and Chat REST endpoint settings."""

    client_id: str
    client_secret: str
    refresh_token: str
    api_base_url: str = "https://chat.googleapis.com/v1/"
    token_url: str = "https://oauth2.googleapis.com/token"
    timeout_s: float = 30.0


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    google: GoogleConfig
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError("must be a mapping", path=key)
    return value


def _require_str(section: Mapping[str, Any], key: str, *, path: str) -> str:
    value = section.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError("must be a non-empty string", path=f"{path}.{key}")
    return value


def build_app_config(raw: Mapping[str, Any]) -> AppConfig:
    """Build the typed config from an expanded YAML mapping."""

    google_raw = _section(raw, "google")
    try:
        timeout_s = float(google_raw.get("timeout_s", GoogleConfig.timeout_s))
    except (TypeError, ValueError) as e:
        raise ConfigError("must be a number", path="google.timeout_s") from e
    if timeout_s <= 0:
        raise ConfigError("must be > 0", path="google.timeout_s")

    google = GoogleConfig(
        client_id=_require_str(google_raw, "client_id", path="google"),
        client_secret=_require_str(google_raw, "client_secret", path="google"),
        refresh_token=_require_str(google_raw, "refresh_token", path="google"),
        api_base_url=str(google_raw.get("api_base_url", GoogleConfig.api_base_url)),
        token_url=str(google_raw.get("token_url", GoogleConfig.token_url)),
        timeout_s=timeout_s,
    )

    server_raw = _section(raw, "server")
    server = ServerConfig(
        name=str(server_raw.get("name", ServerConfig.name)),
        version=str(server_raw.get("version", ServerConfig.version)),
    )

    logging_raw = _section(raw, "logging")
    level = str(logging_raw.get("level", LoggingConfig.level)).upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ConfigError(f"unknown log level: {level!r}", path="logging.level")

    return AppConfig(google=google, server=server, logging=LoggingConfig(level=level))
