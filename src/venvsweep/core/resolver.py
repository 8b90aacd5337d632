"""Decides whether a traversal entry yields a virtualenv to measure."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from venvsweep.core.poetry import PoetryError, poetry_available, query_env_path
from venvsweep.models.scan_config import ScanConfiguration
from venvsweep.models.scan_result import ResolveError, ResolveOutcome, Skip, TraversalEntry, VirtualenvCandidate

log = logging.getLogger(__name__)

MARKER_NAME = "pyproject.toml"
VENV_DIR_NAME = ".venv"


class ClaimedRoots:
    """Project roots already identified during this run.

    Append-only. Lookups are a linear prefix scan, which is fine for the
    number of projects on a disk.
    """

    def __init__(self) -> None:
        self._roots: list[Path] = []

    def add(self, path: Path) -> None:
        self._roots.append(path)

    def covers(self, path: Path) -> bool:
        """True if *path* is a claimed root or lies somewhere beneath one."""
        return any(path.is_relative_to(root) for root in self._roots)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._roots)

    def __len__(self) -> int:
        return len(self._roots)


def resolve(
    claimed_roots: ClaimedRoots,
    config: ScanConfiguration,
    entry: TraversalEntry,
) -> ResolveOutcome:
    """Resolve *entry* into a virtualenv candidate, a skip, or an error.

    A ``pyproject.toml`` claims its parent directory, so unless deep
    scanning is enabled nothing beneath that directory is considered again.
    A ``.venv`` directory next to the marker wins; Poetry is only asked
    when there is none.
    """
    path = entry.path
    if not config.deep and claimed_roots.covers(path):
        return Skip(f"Already checked parent of {path}")

    if entry.is_dir or path.name != MARKER_NAME:
        return Skip(f"Not {MARKER_NAME}: {path}")

    project_root = path.parent
    claimed_roots.add(project_root)
    log.debug("Project path: %s", project_root)

    venv = project_root / VENV_DIR_NAME
    if venv.is_dir():
        log.debug("venv path found: %s", venv)
        return VirtualenvCandidate(path=venv, project_root=project_root)

    if poetry_available():
        log.debug("venv path not found, trying to run poetry")
        try:
            venv = query_env_path(project_root)
        except PoetryError as exc:
            return ResolveError(str(exc))
        return VirtualenvCandidate(path=venv, project_root=project_root)

    return ResolveError(
        f"No {VENV_DIR_NAME} in {project_root} and poetry is not installed, cannot locate its virtualenv"
    )
