"""Virtualenv lookup through the Poetry command line."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from venvsweep.utils import has_command

log = logging.getLogger(__name__)

POETRY = "poetry"


class PoetryError(Exception):
    """Raised when Poetry cannot report a project's virtualenv."""


def poetry_available() -> bool:
    """Check if poetry is available on the system."""
    return has_command(POETRY)


def query_env_path(project_root: Path, timeout: float | None = None) -> Path:
    """Ask Poetry where the virtualenv of *project_root* lives.

    Runs ``poetry env info --path --directory <project_root>`` with stdin
    closed so Poetry can never wait on a prompt.

    Args:
        project_root: Directory holding the project's ``pyproject.toml``.
        timeout: Seconds to wait for Poetry, or None to wait indefinitely.

    Returns:
        The virtualenv path Poetry printed, whitespace trimmed.

    Raises:
        PoetryError: On spawn failure, timeout, non-zero exit or empty output.
    """
    cmd = [POETRY, "env", "info", "--path", "--directory", str(project_root)]
    log.debug("Running %s", " ".join(cmd))

    try:
        proc = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        raise PoetryError(f"poetry timed out after {timeout} seconds for {project_root}") from exc
    except OSError as exc:
        raise PoetryError(f"Failed to execute poetry: {exc}") from exc

    if proc.returncode != 0:
        stderr = proc.stderr.strip()
        raise PoetryError(f"Failed to get venv path from poetry (exit {proc.returncode}): {stderr}")

    venv_path = proc.stdout.strip()
    if not venv_path:
        raise PoetryError(f"poetry reported no virtualenv for {project_root}")

    log.debug("Virtualenv path from poetry: %s", venv_path)
    return Path(venv_path)
