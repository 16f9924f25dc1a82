from __future__ import annotations

import pytest

from google_chat_mcp.config import ConfigError, GoogleConfig, build_app_config


def _google(**overrides: object) -> dict[str, object]:
    google: dict[str, object] = {"client_id": "cid", "client_secret": "secret", "refresh_token": "rt"}
    google.update(overrides)
    return google


def test_defaults() -> None:
    cfg = build_app_config({"google": _google()})

    assert cfg.google.api_base_url == GoogleConfig.api_base_url
    assert cfg.google.timeout_s == 30.0
    assert cfg.server.name == "google-chat-server"
    assert cfg.server.version == "0.1.0"
    assert cfg.logging.level == "INFO"


def test_missing_credentials_are_reported_by_path() -> None:
    with pytest.raises(ConfigError) as ei:
        build_app_config({"google": _google(refresh_token="  ")})
    assert ei.value.path == "google.refresh_token"

    with pytest.raises(ConfigError) as ei:
        build_app_config({})
    assert ei.value.path == "google.client_id"


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ConfigError) as ei:
        build_app_config({"google": _google(timeout_s=0)})
    assert ei.value.path == "google.timeout_s"


def test_log_level_is_normalized_and_checked() -> None:
    assert build_app_config({"google": _google(), "logging": {"level": "debug"}}).logging.level == "DEBUG"
    with pytest.raises(ConfigError):
        build_app_config({"google": _google(), "logging": {"level": "chatty"}})


def test_sections_must_be_mappings() -> None:
    with pytest.raises(ConfigError) as ei:
        build_app_config({"google": ["cid"]})
    assert ei.value.path == "google"
