"""CLI interface for venv-sweep."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from venvsweep import __version__
from venvsweep.core.engine import ConfirmationError, ScanAborted, VenvScanner
from venvsweep.core.interrupt import install_interrupt_handler, summary_line
from venvsweep.models.scan_config import ScanConfiguration
from venvsweep.models.scan_result import FoundVenv
from venvsweep.utils import bytes_to_human


def _setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _confirm_delete(found: FoundVenv) -> bool:
    try:
        return click.confirm(f"Delete this? {found.path} ({bytes_to_human(found.size_bytes)})", default=False)
    except click.Abort as exc:
        raise ConfirmationError("no answer to the confirmation prompt") from exc


def _print_found(found: FoundVenv) -> None:
    click.echo(f"Found {found.path} ({bytes_to_human(found.size_bytes)})")


def _print_deleted(found: FoundVenv) -> None:
    click.echo(f"Deleted {found.path} ({bytes_to_human(found.size_bytes)})")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "path",
    required=False,
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("--delete", "-d", is_flag=True, help="Delete the virtualenvs instead of just printing them")
@click.option(
    "--max-depth",
    "-m",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum depth to recurse into the directory",
)
@click.option(
    "--deep",
    "-D",
    is_flag=True,
    help="Keep looking for projects below a directory that already has a pyproject.toml",
)
@click.option("--debug", is_flag=True, help="Print diagnostic logging to stderr")
@click.option("--non-interactive", "-n", is_flag=True, help="Delete without asking for confirmation")
@click.version_option(__version__, "-V", "--version", prog_name="venv-sweep")
def main(
    path: Path,
    delete: bool,
    max_depth: int | None,
    deep: bool,
    debug: bool,
    non_interactive: bool,
) -> None:
    """Find Python project virtualenvs under PATH and report or delete them.

    A directory holding a pyproject.toml is a project; its virtualenv is the
    .venv directory next to it, or whatever `poetry env info --path` reports.
    """
    _setup_logging(debug)
    config = ScanConfiguration(
        root=path,
        delete=delete,
        max_depth=max_depth,
        deep=deep,
        debug=debug,
        non_interactive=non_interactive,
    )

    scanner = VenvScanner(
        config,
        confirm=_confirm_delete,
        on_found=_print_found,
        on_deleted=_print_deleted,
    )
    install_interrupt_handler(scanner.total, config.delete)

    try:
        total = scanner.run()
    except ScanAborted as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(summary_line(total, config.delete), err=True)
