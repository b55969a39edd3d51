"""Directory walking helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator, Iterable

ALWAYS_EXCLUDED = frozenset({"node_modules"})


def iter_project_files(
    root: Path,
    max_depth: int = 3,
    exclude: Iterable[str] = (),
) -> Generator[Path, None, None]:
    """Yield files beneath ``root``, descending at most ``max_depth`` levels.

    Hidden entries and excluded directory names are skipped. Directories that
    cannot be listed contribute nothing.
    """

    excluded = ALWAYS_EXCLUDED | set(exclude)
    yield from _walk(root, 0, max_depth, excluded)


def _walk(directory: Path, depth: int, max_depth: int, excluded: frozenset) -> Generator[Path, None, None]:
    if depth > max_depth:
        return
    try:
        with os.scandir(directory) as entries:
            ordered = sorted(entries, key=lambda entry: entry.name)
    except OSError:
        return
    for entry in ordered:
        if entry.name.startswith(".") or entry.name in excluded:
            continue
        path = Path(entry.path)
        try:
            is_dir = entry.is_dir()
        except OSError:
            continue
        if is_dir:
            yield from _walk(path, depth + 1, max_depth, excluded)
        else:
            yield path
