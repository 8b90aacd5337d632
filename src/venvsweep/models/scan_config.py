"""Scan configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ScanConfiguration:
    """Options for a single run, built once from the command line."""

    root: Path = field(default_factory=lambda: Path("."))
    delete: bool = False
    max_depth: int | None = None
    deep: bool = False
    debug: bool = False
    non_interactive: bool = False
