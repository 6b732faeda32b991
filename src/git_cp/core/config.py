"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.git-cp/config.toml.
Loaded eagerly at the CLI entry point and stored in GitCpContext.
"""

import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import tomlkit

CONFIG_PATH_ENV = "GIT_CP_CONFIG"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    All fields are read-only after construction.
    """

    commit_limit: int = 60
    remote: str = "origin"
    confirm_push_default: bool = False
    page_size: int = 15


def global_config_path() -> Path:
    """Get the path to the global config file.

    GIT_CP_CONFIG overrides the default ~/.git-cp/config.toml.
    """
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".git-cp" / "config.toml"


def config_keys() -> list[str]:
    """Names of all config keys, in declaration order."""
    return [f.name for f in fields(GlobalConfig)]


def coerce_config_value(key: str, raw: Any) -> Any:
    """Convert and validate a value for one config key.

    Accepts native TOML values as well as strings typed on the command line.

    Raises:
        ValueError: If the key is unknown or the value is invalid
    """
    if key in ("commit_limit", "page_size"):
        if isinstance(raw, bool):
            raise ValueError(f"'{key}' must be a positive integer, got {raw!r}")
        try:
            value = int(raw)
        except (TypeError, ValueError):
            raise ValueError(f"'{key}' must be a positive integer, got {raw!r}") from None
        if value <= 0:
            raise ValueError(f"'{key}' must be a positive integer, got {raw!r}")
        return value

    if key == "confirm_push_default":
        if isinstance(raw, bool):
            return raw
        text = str(raw).strip().lower()
        if text in ("true", "yes", "1", "on"):
            return True
        if text in ("false", "no", "0", "off"):
            return False
        raise ValueError(f"'{key}' must be true or false, got {raw!r}")

    if key == "remote":
        value = str(raw).strip()
        if not value or any(ch.isspace() for ch in value):
            raise ValueError(f"'{key}' must be a remote name without spaces, got {raw!r}")
        return value

    raise ValueError(f"Unknown config key '{key}'. Valid keys: {', '.join(config_keys())}")


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load global config, falling back to defaults when the file is missing.

    Args:
        path: Config file path (defaults to global_config_path())

    Returns:
        GlobalConfig instance with loaded values

    Raises:
        ValueError: If the file is malformed or contains invalid values
    """
    config_path = path if path is not None else global_config_path()
    if not config_path.exists():
        return GlobalConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Malformed config at {config_path}: {e}") from e

    values = {key: coerce_config_value(key, data[key]) for key in config_keys() if key in data}
    return replace(GlobalConfig(), **values)


def save_global_config(config: GlobalConfig, path: Path | None = None) -> None:
    """Save global config, preserving comments in an existing file.

    Args:
        config: GlobalConfig instance to save
        path: Config file path (defaults to global_config_path())
    """
    config_path = path if path is not None else global_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    if config_path.exists():
        doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
    else:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("Global git-cp configuration"))

    for key in config_keys():
        doc[key] = getattr(config, key)

    config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")


def set_config_value(config: GlobalConfig, key: str, raw: str) -> GlobalConfig:
    """Return a copy of config with one key updated from a string value."""
    return replace(config, **{key: coerce_config_value(key, raw)})
