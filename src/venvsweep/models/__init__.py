"""venv-sweep data models."""

from venvsweep.models.scan_config import ScanConfiguration
from venvsweep.models.scan_result import FoundVenv, ResolveError, Skip, TraversalEntry, VirtualenvCandidate

__all__ = [
    "FoundVenv",
    "ResolveError",
    "ScanConfiguration",
    "Skip",
    "TraversalEntry",
    "VirtualenvCandidate",
]
