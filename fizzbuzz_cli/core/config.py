"""Configuration loading and persistence."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]

from fizzbuzz_cli.core.constants import DEFAULT_BUZZ, DEFAULT_END, DEFAULT_FIZZ, DEFAULT_START

_YAML_SUFFIXES = {".yaml", ".yml"}


class ConfigError(RuntimeError):
    """Raised when config file parsing fails."""


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_path(path_str: str) -> Path:
    """Expand user/env vars and return absolute path."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_config_path() -> Path:
    """Get default config file path."""
    raw = os.getenv("FIZZBUZZ_CONFIG_FILE", "~/.config/fizzbuzz/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    return {
        "rules": {
            "fizz": DEFAULT_FIZZ,
            "buzz": DEFAULT_BUZZ,
        },
        "range": {
            "start": DEFAULT_START,
            "end": DEFAULT_END,
        },
    }


DEFAULT_CONFIG: Dict[str, Any] = _default_config()


def _read_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        text = path.read_text()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    try:
        if suffix in {".toml", ""}:
            loaded = tomllib.loads(text)
        elif suffix in _YAML_SUFFIXES:
            loaded = yaml.safe_load(text) or {}
        else:
            loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file {path}: {exc}") from exc
    except Exception as exc:
        if suffix in {".toml", ""}:
            raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc
        raise ConfigError(f"Failed to parse config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults."""
    cfg_path = path or default_config_path()
    cfg = _default_config()

    if cfg_path.exists():
        loaded = _read_config(cfg_path)
        cfg = _deep_merge(cfg, loaded)

    return cfg


def _dict_to_toml(data: Dict[str, Dict[str, int]]) -> str:
    blocks = []
    for table, values in data.items():
        lines = [f"[{table}]"]
        lines.extend(f"{key} = {value}" for key, value in values.items())
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def save_config(config: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """Save configuration to disk as TOML (default), JSON or YAML."""
    cfg_path = path or default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    suffix = cfg_path.suffix.lower()
    if suffix == ".json":
        cfg_path.write_text(json.dumps(config, indent=2) + "\n")
        return cfg_path
    if suffix in _YAML_SUFFIXES:
        cfg_path.write_text(yaml.safe_dump(config, sort_keys=False))
        return cfg_path

    cfg_path.write_text(_dict_to_toml(config).strip() + "\n")
    return cfg_path


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def _config_int(config: Dict[str, Any], key: str, default: int) -> int:
    table = config.get("range", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[range] must be a table, got {table!r}")
    raw = table.get(key, default)
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ConfigError(f"[range] {key} must be an integer, got {raw!r}")
    return raw


def resolve_range_defaults(config: Dict[str, Any]) -> Dict[str, int]:
    """Resolve default range bounds from env first, then config."""
    start = _env_int("FIZZBUZZ_START")
    end = _env_int("FIZZBUZZ_END")
    return {
        "start": start if start is not None else _config_int(config, "start", DEFAULT_START),
        "end": end if end is not None else _config_int(config, "end", DEFAULT_END),
    }
