"""Configuration loading for ext3order (.ext3order.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".ext3order.yml"

DEFAULT_NAMESPACES = ("Ext",)
DEFAULT_INCLUDE = ("**/*.js",)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ExtractorConfig:
    """Extractor enablement."""

    enabled: List[str] = field(default_factory=list)


@dataclass
class OrderConfig:
    """Represents the settings defined in .ext3order.yml."""

    root: Path
    verbose: bool = False
    base_dir: Optional[Path] = None
    namespaces: List[str] = field(default_factory=lambda: list(DEFAULT_NAMESPACES))
    extractors: ExtractorConfig = field(default_factory=ExtractorConfig)
    include: List[str] = field(default_factory=lambda: list(DEFAULT_INCLUDE))
    exclude_paths: List[str] = field(default_factory=list)


def load_config(config_path: Path) -> OrderConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return OrderConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = OrderConfig(root=root)
    config.verbose = _as_bool(data.get("verbose")) or False

    base_dir = _as_str(data.get("base_dir"))
    if base_dir:
        config.base_dir = (root / base_dir).resolve()

    namespaces = _as_str_list(data.get("namespaces"))
    if namespaces:
        config.namespaces = namespaces

    extractor_data = _as_dict(data.get("extractors"))
    if extractor_data:
        config.extractors.enabled = _as_str_list(extractor_data.get("enabled"))

    include = _as_str_list(data.get("include"))
    if include:
        config.include = include

    config.exclude_paths = _as_str_list(data.get("exclude_paths"))
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ExtractorConfig",
    "OrderConfig",
    "load_config",
]
