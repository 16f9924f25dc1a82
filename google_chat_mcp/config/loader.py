"""YAML config loader with strict ${ENV_VAR} expansion.

Secrets (OAuth client id/secret, refresh token) never live in YAML: the YAML
references them as ``${GOOGLE_CLIENT_ID}`` and friends, and they are resolved
from the process environment, optionally seeded from a ``.env`` file.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Sequence

import yaml
from dotenv import load_dotenv

from google_chat_mcp.config.errors import ConfigError


_ENV_PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass(frozen=True, slots=True)
class _UnresolvedEnvRef:
    var_name: str
    key_path: str
    reason: str  # "missing" | "empty"


def _deep_merge(base: MutableMapping[str, Any], overlay: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Merge ``overlay`` into ``base``: mappings recurse, everything else is replaced."""

    for key, value in overlay.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), Mapping):
            base[key] = _deep_merge(dict(base[key]), value)
        else:
            base[key] = value
    return base


def _read_yaml(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    return yaml.safe_load(text)


def _expand(obj: Any, *, key_path: str, unresolved: list[_UnresolvedEnvRef]) -> Any:
    if isinstance(obj, str):

        def repl(match: re.Match[str]) -> str:
            name = match.group(1)
            value = os.getenv(name)
            if value is None or value == "":
                reason = "missing" if value is None else "empty"
                unresolved.append(_UnresolvedEnvRef(var_name=name, key_path=key_path, reason=reason))
                return match.group(0)
            return value

        return _ENV_PLACEHOLDER_RE.sub(repl, obj)

    if isinstance(obj, Mapping):
        return {
            str(k): _expand(v, key_path=f"{key_path}.{k}" if key_path else str(k), unresolved=unresolved)
            for k, v in obj.items()
        }

    if isinstance(obj, list):
        return [
            _expand(v, key_path=f"{key_path}[{i}]" if key_path else f"[{i}]", unresolved=unresolved)
            for i, v in enumerate(obj)
        ]

    return obj


def load_config(
    paths: Path | Sequence[Path],
    *,
    load_dotenv_file: bool = True,
    dotenv_path: Path | None = None,
) -> dict[str, Any]:
    """Load one or more YAML files and expand ``${ENV_VAR}`` placeholders.

    Later files override earlier ones. Every unresolved placeholder is
    reported at once, with the key path it was found at.

    Raises:
        ConfigError: If a file is unreadable or not a mapping, or if any
            referenced environment variable is missing or empty.
    """

    file_list: list[Path] = [paths] if isinstance(paths, Path) else list(paths)
    if not file_list:
        raise ConfigError("No config files provided")

    if load_dotenv_file:
        load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)

    merged: dict[str, Any] = {}
    for path in file_list:
        try:
            fragment = _read_yaml(path)
        except Exception as e:  # noqa: BLE001
            raise ConfigError(f"Failed to read YAML config: {e}", path=str(path)) from e

        if fragment is None:
            fragment = {}
        if not isinstance(fragment, Mapping):
            raise ConfigError("Top-level YAML must be a mapping", path=str(path))

        merged = dict(_deep_merge(merged, fragment))

    unresolved: list[_UnresolvedEnvRef] = []
    expanded = _expand(merged, key_path="", unresolved=unresolved)

    if unresolved:
        lines = ["Unresolved environment variables in config:"]
        for ref in unresolved:
            lines.append(f"- {ref.var_name} ({ref.reason}) at {ref.key_path or '<root>'}")
        raise ConfigError("\n".join(lines))

    return expanded


def packaged_configs_dir() -> Path:
    """Directory holding the app.yaml / dev.yaml shipped inside the package."""

    return Path(str(resources.files("google_chat_mcp.config")))


def resolve_profile_configs(*, profile: str, configs_dir: Path | None = None) -> list[Path]:
    """Map a profile name to the config files it loads.

    - app -> [app.yaml]
    - dev -> [app.yaml, dev.yaml]

    Files come from ``configs_dir`` when it holds an ``app.yaml``, otherwise
    from the packaged defaults, which only reference environment variables.
    """

    if configs_dir is None or not (configs_dir / "app.yaml").is_file():
        configs_dir = packaged_configs_dir()

    if profile == "app":
        return [configs_dir / "app.yaml"]
    if profile == "dev":
        return [configs_dir / "app.yaml", configs_dir / "dev.yaml"]
    raise ConfigError(f"Unknown profile: {profile}")
