"""Destination resolution and relocation of classified files."""

from .executor import RelocationExecutor
from .models import EntryOutcome, FileEntry, RunSummary
from .resolver import MAX_SUFFIX, resolve_unique_destination

__all__ = [
    "EntryOutcome",
    "FileEntry",
    "MAX_SUFFIX",
    "RelocationExecutor",
    "RunSummary",
    "resolve_unique_destination",
]
