"""Shared utility functions."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

log = logging.getLogger(__name__)


def has_command(name: str) -> bool:
    """Check if a command exists on the system's executable search path."""
    return shutil.which(name) is not None


def dir_info(path: Path | str) -> tuple[int, int]:
    """Calculate total size and file count of a directory tree.

    Only regular files count; directories, symlinks and special files
    contribute nothing. Entries that vanish or cannot be read while walking
    are skipped, so a tree being modified concurrently still yields the sum
    of everything that could be measured.

    Returns:
        (total_bytes, file_count) tuple.
    """
    total = 0
    count = 0
    stack: list[Path | str] = [path]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        if entry.is_file(follow_symlinks=False):
                            total += entry.stat(follow_symlinks=False).st_size
                            count += 1
                        elif entry.is_dir(follow_symlinks=False):
                            stack.append(entry.path)
                    except OSError:
                        pass
        except OSError:
            pass
    return total, count


def dir_size(path: Path | str) -> int:
    """Calculate total size of a directory tree."""
    return dir_info(path)[0]


def bytes_to_human(size_bytes: int) -> str:
    """Convert byte count to a human-readable string using decimal (SI) units."""
    if size_bytes < 0:
        return f"-{bytes_to_human(-size_bytes)}"
    if size_bytes < 1000:
        return f"{size_bytes} B"

    units = ("KB", "MB", "GB", "TB", "PB")
    value = size_bytes / 1000
    for unit in units[:-1]:
        if round(value, 1) < 1000:
            return f"{value:.1f} {unit}"
        value /= 1000
    return f"{value:.1f} {units[-1]}"
