"""Tests for the command line interface."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from venvsweep import cli

pytestmark = pytest.mark.usefixtures("no_poetry")


@pytest.fixture(autouse=True)
def no_signal_handler(monkeypatch):
    installed = []
    monkeypatch.setattr(cli, "install_interrupt_handler", lambda total, delete: installed.append(delete))
    return installed


@pytest.fixture
def runner():
    return CliRunner()


def test_help_exits_zero(runner):
    result = runner.invoke(cli.main, ["--help"])
    assert result.exit_code == 0
    assert "--non-interactive" in result.output


def test_version(runner):
    result = runner.invoke(cli.main, ["--version"])
    assert result.exit_code == 0
    assert "venv-sweep" in result.output


def test_report(runner, project_tree):
    result = runner.invoke(cli.main, [str(project_tree)])

    assert result.exit_code == 0
    assert f"Found {project_tree / 'alpha' / '.venv'} (500 B)" in result.output
    assert f"Found {project_tree / 'beta' / '.venv'} (1.0 KB)" in result.output
    assert "Found 1.5 KB of virtualenvs" in result.output
    assert (project_tree / "beta" / ".venv").exists()


def test_default_path_is_cwd(runner, project_tree, monkeypatch):
    monkeypatch.chdir(project_tree)
    result = runner.invoke(cli.main, [])

    assert result.exit_code == 0
    assert "Found 1.5 KB of virtualenvs" in result.output


def test_deep_flag(runner, project_tree):
    result = runner.invoke(cli.main, [str(project_tree), "-D"])

    assert result.exit_code == 0
    assert str(project_tree / "alpha" / "plugins" / "inner" / ".venv") in result.output


def test_max_depth(runner, project_tree):
    result = runner.invoke(cli.main, [str(project_tree), "--max-depth", "1"])

    assert result.exit_code == 0
    assert "Found 0 B of virtualenvs" in result.output


def test_negative_max_depth_rejected(runner, project_tree):
    result = runner.invoke(cli.main, [str(project_tree), "--max-depth", "-1"])
    assert result.exit_code == 2


def test_missing_path_rejected(runner, tmp_path):
    result = runner.invoke(cli.main, [str(tmp_path / "nope")])
    assert result.exit_code == 2


def test_delete_non_interactive(runner, project_tree, no_signal_handler):
    result = runner.invoke(cli.main, [str(project_tree), "-d", "-n"])

    assert result.exit_code == 0
    assert f"Deleted {project_tree / 'alpha' / '.venv'} (500 B)" in result.output
    assert "Deleted 1.5 KB of virtualenvs" in result.output
    assert not (project_tree / "alpha" / ".venv").exists()
    assert not (project_tree / "beta" / ".venv").exists()
    assert no_signal_handler == [True]


def test_delete_prompts(runner, project_tree):
    result = runner.invoke(cli.main, [str(project_tree), "--delete"], input="n\ny\n")

    assert result.exit_code == 0
    assert f"Delete this? {project_tree / 'alpha' / '.venv'} (500 B)" in result.output
    assert "Deleted 1.0 KB of virtualenvs" in result.output
    assert (project_tree / "alpha" / ".venv").exists()
    assert not (project_tree / "beta" / ".venv").exists()


def test_delete_without_answer_aborts(runner, project_tree):
    result = runner.invoke(cli.main, [str(project_tree), "--delete"], input="")

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "of virtualenvs" not in result.output
    assert (project_tree / "alpha" / ".venv").exists()


def test_resolution_failure_reported(runner, tmp_path, make_project, caplog):
    make_project(tmp_path / "app", venv=False)

    result = runner.invoke(cli.main, [str(tmp_path)])

    assert result.exit_code == 0
    assert any("poetry is not installed" in r.getMessage() for r in caplog.records)
