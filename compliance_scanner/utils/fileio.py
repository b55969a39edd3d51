"""Basic file IO helpers."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import yaml


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML if the file exists, otherwise ``None``."""

    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def read_json_file(path: Path) -> Any:
    """Return the parsed JSON if the file exists, otherwise ``None``."""

    if not path.exists():
        return None
    return json.loads(path.read_text(encoding="utf-8"))


def read_toml_file(path: Path) -> Any:
    """Return the parsed TOML if the file exists, otherwise ``None``."""

    if not path.exists():
        return None
    with path.open("rb") as handle:
        return tomllib.load(handle)


def read_text_file(path: Path) -> str:
    """Return the file contents as UTF-8 text, or an empty string if missing."""

    if not path.exists():
        return ""
    return path.read_text(encoding="utf-8")


def write_text_file(path: Path, text: str) -> None:
    """Write UTF-8 text, creating missing parent directories."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
