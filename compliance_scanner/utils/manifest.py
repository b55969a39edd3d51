"""Project manifest helpers (``package.json`` and ``pyproject.toml``)."""

from __future__ import annotations

import json
import re
import tomllib
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional

import structlog

from .fileio import read_json_file, read_toml_file

logger = structlog.get_logger(__name__)

MANIFEST_FILES = ("package.json", "pyproject.toml")
NPM_DEPENDENCY_KEYS = ("dependencies", "devDependencies")
REQUIREMENT_NAME_PATTERN = re.compile(r"^\s*([A-Za-z0-9@][A-Za-z0-9._\-/@]*)")


def load_manifest(root: Path) -> Optional[Dict[str, Any]]:
    """Load the first manifest found at ``root``.

    Malformed documents are treated as absent.
    """

    for filename in MANIFEST_FILES:
        path = root / filename
        try:
            if filename.endswith(".json"):
                data = read_json_file(path)
            else:
                data = read_toml_file(path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
            logger.debug("manifest_unreadable", path=str(path), error=str(exc))
            return None
        if data is None:
            continue
        if not isinstance(data, dict):
            logger.debug("manifest_not_mapping", path=str(path))
            return None
        return data
    return None


def dependency_names(manifest: Optional[Dict[str, Any]]) -> FrozenSet[str]:
    """Return the lower-cased names of every declared dependency."""

    if not manifest:
        return frozenset()
    names = set()
    for key in NPM_DEPENDENCY_KEYS:
        declared = manifest.get(key)
        if isinstance(declared, dict):
            names.update(str(name).lower() for name in declared)

    project = manifest.get("project")
    if isinstance(project, dict):
        requirements = list(_as_list(project.get("dependencies")))
        optional = project.get("optional-dependencies")
        if isinstance(optional, dict):
            for group in optional.values():
                requirements.extend(_as_list(group))
        for requirement in requirements:
            match = REQUIREMENT_NAME_PATTERN.match(str(requirement))
            if match:
                names.add(match.group(1).lower())
    return frozenset(names)


def _as_list(value: Any) -> list:
    if isinstance(value, list):
        return value
    return []
