"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


def make_project(root: Path, venv_files: dict[str, int] | None = None, venv: bool = True) -> Path:
    """Create a project with a pyproject.toml and optionally a .venv of known size."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "pyproject.toml").write_text("[project]\nname = 'demo'\n")
    if venv:
        venv_dir = root / ".venv"
        venv_dir.mkdir()
        for rel, size in (venv_files or {"bin/python": 100}).items():
            target = venv_dir / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(b"x" * size)
    return root


@pytest.fixture
def no_poetry(monkeypatch):
    """Pretend poetry is not installed."""
    monkeypatch.setattr("shutil.which", lambda name: None)


@pytest.fixture
def project_tree(tmp_path):
    """Two sibling projects, one nested project inside the first, and noise."""
    make_project(tmp_path / "alpha", {"bin/python": 300, "lib/site.py": 200})
    make_project(tmp_path / "alpha" / "plugins" / "inner", {"bin/python": 50})
    make_project(tmp_path / "beta", {"bin/python": 1000})
    (tmp_path / "notes").mkdir()
    (tmp_path / "notes" / "readme.txt").write_text("hello")
    return tmp_path


@pytest.fixture(name="make_project")
def make_project_fixture():
    return make_project
