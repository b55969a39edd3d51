"""Scanner configuration loaded from YAML with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .category import Category, parse_categories
from .collector import DEFAULT_MAX_DEPTH
from .utils import read_yaml_file

CONFIG_FILENAME = ".compliance-scanner.yaml"
LOG_LEVEL_ENV = "COMPLIANCE_SCANNER_LOG_LEVEL"
LOG_FORMAT_ENV = "COMPLIANCE_SCANNER_LOG_FORMAT"
LOG_FORMATS = ("console", "json")


class ConfigError(ValueError):
    """Raised when a configuration file holds invalid values."""


@dataclass(frozen=True)
class ScannerConfig:
    categories: Tuple[Category, ...] = ()
    sovereign_mode: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    exclude: Tuple[str, ...] = ()
    log_level: str = "WARNING"
    log_format: str = "console"


def load_config(
    path: Optional[str | Path] = None,
    scan_root: Optional[str | Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ScannerConfig:
    """Resolve configuration: explicit file, else the scan root's file, else defaults."""

    environ = os.environ if environ is None else environ
    config_path = _resolve_path(path, scan_root)
    data: Dict[str, Any] = {}
    if config_path is not None:
        try:
            loaded = read_yaml_file(config_path)
        except yaml.YAMLError as exc:
            raise ConfigError(f"{config_path}: invalid YAML ({exc})") from exc
        if loaded is None and path is not None and not config_path.exists():
            raise ConfigError(f"{config_path}: file not found")
        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigError(f"{config_path}: expected a mapping at top level")
        data = loaded or {}

    config = _from_mapping(data, source=str(config_path) if config_path else "defaults")
    overrides: Dict[str, Any] = {}
    if environ.get(LOG_LEVEL_ENV):
        overrides["log_level"] = environ[LOG_LEVEL_ENV].upper()
    if environ.get(LOG_FORMAT_ENV):
        overrides["log_format"] = _check_format(environ[LOG_FORMAT_ENV], LOG_FORMAT_ENV)
    return replace(config, **overrides) if overrides else config


def _resolve_path(path: Optional[str | Path], scan_root: Optional[str | Path]) -> Optional[Path]:
    if path is not None:
        return Path(path)
    if scan_root is not None:
        candidate = Path(scan_root) / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def _from_mapping(data: Mapping[str, Any], source: str) -> ScannerConfig:
    kwargs: Dict[str, Any] = {}

    if "categories" in data:
        raw = data["categories"]
        if not isinstance(raw, (list, str)):
            raise ConfigError(f"{source}: 'categories' must be a list or comma-separated string")
        try:
            kwargs["categories"] = tuple(parse_categories(raw))
        except ValueError as exc:
            raise ConfigError(f"{source}: {exc}") from exc

    if "sovereign" in data:
        if not isinstance(data["sovereign"], bool):
            raise ConfigError(f"{source}: 'sovereign' must be true or false")
        kwargs["sovereign_mode"] = data["sovereign"]

    if "max_depth" in data:
        depth = data["max_depth"]
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
            raise ConfigError(f"{source}: 'max_depth' must be a non-negative integer")
        kwargs["max_depth"] = depth

    if "exclude" in data:
        exclude = data["exclude"]
        if not isinstance(exclude, list):
            raise ConfigError(f"{source}: 'exclude' must be a list of directory names")
        kwargs["exclude"] = tuple(str(name) for name in exclude)

    logging_section = data.get("logging") or {}
    if not isinstance(logging_section, dict):
        raise ConfigError(f"{source}: 'logging' must be a mapping")
    if "level" in logging_section:
        kwargs["log_level"] = str(logging_section["level"]).upper()
    if "format" in logging_section:
        kwargs["log_format"] = _check_format(logging_section["format"], source)

    return ScannerConfig(**kwargs)


def _check_format(value: Any, source: str) -> str:
    fmt = str(value).lower()
    if fmt not in LOG_FORMATS:
        raise ConfigError(f"{source}: log format must be one of {', '.join(LOG_FORMATS)}")
    return fmt
