"""Scan orchestration: walk, resolve, measure, report or delete."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable

from venvsweep.core.resolver import ClaimedRoots, resolve
from venvsweep.core.tracker import RunningTotal
from venvsweep.core.walker import iter_entries
from venvsweep.models.scan_config import ScanConfiguration
from venvsweep.models.scan_result import FoundVenv, ResolveError, Skip, VirtualenvCandidate
from venvsweep.utils import dir_info

log = logging.getLogger(__name__)

ConfirmCallback = Callable[[FoundVenv], bool]
FoundCallback = Callable[[FoundVenv], None]


class ScanAborted(Exception):
    """A condition the scan cannot safely continue past."""


class ConfirmationError(ScanAborted):
    """No answer could be obtained from the operator."""


class DeletionError(ScanAborted):
    """A virtualenv directory could not be removed."""


class VenvScanner:
    """Finds virtualenvs under ``config.root`` and reports or deletes them."""

    def __init__(
        self,
        config: ScanConfiguration,
        confirm: ConfirmCallback | None = None,
        on_found: FoundCallback | None = None,
        on_deleted: FoundCallback | None = None,
        total: RunningTotal | None = None,
    ) -> None:
        self.config = config
        self.claimed_roots = ClaimedRoots()
        self.total = total if total is not None else RunningTotal()
        self.found: list[FoundVenv] = []
        self._confirm = confirm
        self._on_found = on_found
        self._on_deleted = on_deleted

    def run(self) -> int:
        """Walk the tree once and return the bytes found (or deleted).

        Raises:
            ConfirmationError: The confirmation prompt failed.
            DeletionError: A virtualenv could not be removed.
        """
        config = self.config
        log.debug("Walking path: %s", config.root)

        for entry in iter_entries(config.root, config.max_depth, prune=self._should_prune):
            try:
                if not entry.path.exists():
                    log.debug("Path doesn't exist: %s", entry.path)
                    continue
            except OSError as exc:
                log.debug("Cannot read metadata of %s: %s", entry.path, exc)
                continue

            outcome = resolve(self.claimed_roots, config, entry)
            match outcome:
                case Skip(reason=reason):
                    log.debug("%s", reason)
                case ResolveError(message=message):
                    log.warning("%s", message)
                case VirtualenvCandidate():
                    self._handle_candidate(outcome)

        return self.total.value

    def _should_prune(self, directory: Path) -> bool:
        return not self.config.deep and self.claimed_roots.covers(directory)

    def _handle_candidate(self, candidate: VirtualenvCandidate) -> None:
        if not candidate.path.is_dir():
            log.warning("Virtualenv %s of %s does not exist", candidate.path, candidate.project_root)
            return

        size, fcount = dir_info(candidate.path)
        found = FoundVenv(candidate=candidate, size_bytes=size, file_count=fcount)
        self.found.append(found)
        log.debug("%s: %d files, %d bytes", candidate.path, fcount, size)

        if not self.config.delete:
            self.total.add(size)
            if self._on_found:
                self._on_found(found)
            return

        if not self._approved(found):
            log.debug("Keeping %s", candidate.path)
            return

        log.debug("Deleting %s", candidate.path)
        try:
            shutil.rmtree(candidate.path)
        except OSError as exc:
            raise DeletionError(f"Failed to delete {candidate.path}: {exc}") from exc

        found.deleted = True
        self.total.add(size)
        if self._on_deleted:
            self._on_deleted(found)

    def _approved(self, found: FoundVenv) -> bool:
        if self.config.non_interactive:
            return True
        if self._confirm is None:
            raise ConfirmationError(f"No way to confirm deletion of {found.path}")
        try:
            return self._confirm(found)
        except ConfirmationError:
            raise
        except Exception as exc:
            raise ConfirmationError(f"Error getting response from user: {exc}") from exc
