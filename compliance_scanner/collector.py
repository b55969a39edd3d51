"""Build the scan context from the filesystem."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import structlog

from .checks import ScanContext
from .utils import iter_project_files, load_manifest

logger = structlog.get_logger(__name__)

DEFAULT_MAX_DEPTH = 3


def collect_files(root: Path, max_depth: int = DEFAULT_MAX_DEPTH, exclude: Iterable[str] = ()) -> tuple[Path, ...]:
    if not root.is_dir():
        return ()
    return tuple(iter_project_files(root, max_depth=max_depth, exclude=exclude))


def build_context(
    path: str | Path,
    sovereign_mode: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
    exclude: Iterable[str] = (),
) -> ScanContext:
    root = Path(path).resolve()
    files = collect_files(root, max_depth=max_depth, exclude=exclude)
    manifest = load_manifest(root) if root.is_dir() else None
    logger.debug("context_built", path=str(root), files=len(files), manifest=manifest is not None)
    return ScanContext(scan_path=root, manifest=manifest, files=files, sovereign_mode=sovereign_mode)
