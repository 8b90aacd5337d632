"""Traversal entries and resolver outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class TraversalEntry:
    """Single filesystem node yielded by the tree walk."""

    path: Path
    depth: int
    is_dir: bool


@dataclass(frozen=True, slots=True)
class VirtualenvCandidate:
    """Path believed to be the virtualenv of ``project_root``."""

    path: Path
    project_root: Path


@dataclass(frozen=True, slots=True)
class Skip:
    """Entry is not a new project marker. Expected, only logged in debug mode."""

    reason: str


@dataclass(frozen=True, slots=True)
class ResolveError:
    """Project found but its virtualenv could not be located."""

    message: str


ResolveOutcome = VirtualenvCandidate | Skip | ResolveError


@dataclass(slots=True)
class FoundVenv:
    """Candidate together with its measured size.

    ``deleted`` is set once the directory has been removed.
    """

    candidate: VirtualenvCandidate
    size_bytes: int
    file_count: int = 0
    deleted: bool = False

    @property
    def path(self) -> Path:
        return self.candidate.path
