"""Depth-limited directory tree walk."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterator

from venvsweep.models.scan_result import TraversalEntry

log = logging.getLogger(__name__)

PrunePredicate = Callable[[Path], bool]


def iter_entries(
    root: Path,
    max_depth: int | None = None,
    prune: PrunePredicate | None = None,
) -> Iterator[TraversalEntry]:
    """Yield *root* and every entry beneath it.

    All children of a directory are yielded, sorted by name, before the
    walk descends into any of them, so a project's ``pyproject.toml`` is
    seen before its subdirectories are listed. Symlinks are reported but
    never followed.

    Directories are listed lazily: a directory removed by the consumer
    before its turn comes is skipped, as is one that cannot be read.

    Args:
        root: Directory to start from (depth 0).
        max_depth: Deepest level to yield, or None for no limit.
        prune: Called for each directory before it is listed; returning True
            leaves its contents out of the walk.
    """
    try:
        root_is_dir = root.is_dir()
    except OSError as exc:
        log.debug("Cannot read metadata of %s: %s", root, exc)
        return

    yield TraversalEntry(path=root, depth=0, is_dir=root_is_dir)
    if not root_is_dir:
        return

    stack: list[tuple[Path, int]] = [(root, 0)]
    while stack:
        directory, depth = stack.pop()
        if max_depth is not None and depth >= max_depth:
            continue
        if prune is not None and prune(directory):
            log.debug("Not descending into %s", directory)
            continue

        try:
            with os.scandir(directory) as it:
                children = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            log.debug("Error listing %s, did you just delete the parent? %s", directory, exc)
            continue

        subdirs: list[Path] = []
        for child in children:
            path = directory / child.name
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError as exc:
                log.debug("Cannot read metadata of %s: %s", path, exc)
                continue
            yield TraversalEntry(path=path, depth=depth + 1, is_dir=is_dir)
            if is_dir:
                subdirs.append(path)

        stack.extend((subdir, depth + 1) for subdir in reversed(subdirs))
