"""Relocation of classified downloads into their category folders."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from orderly.classification import Category, ExtensionClassifier, extension_of
from orderly.system.filesystem import move_file, path_exists

from .models import EntryOutcome, FileEntry, RunSummary
from .resolver import resolve_unique_destination

LOGGER = logging.getLogger(__name__)

MovePrimitive = Callable[[Path, Path], None]
ExistsPrimitive = Callable[[Path], bool]
OutcomeReporter = Callable[[EntryOutcome], None]


class RelocationExecutor:
    """Move classified files out of a source directory in one sequential pass."""

    def __init__(
        self,
        *,
        move: MovePrimitive = move_file,
        exists: ExistsPrimitive = path_exists,
        classifier: Optional[ExtensionClassifier] = None,
        reporter: Optional[OutcomeReporter] = None,
    ) -> None:
        self._move = move
        self._exists = exists
        self._classifier = classifier or ExtensionClassifier()
        self._reporter = reporter

    def run(
        self,
        source_dir: Path,
        listing: Iterable[FileEntry],
        destination_for: Callable[[Category], Path],
    ) -> RunSummary:
        """Process every entry of ``listing`` and tally the outcomes.

        Directories are ignored without being counted. Files with an unknown
        category are skipped. A failed move is recorded as an error and the pass
        continues with the next entry; nothing is retried.

        Args:
            source_dir: Directory the listing was taken from.
            listing: Entries in the order they should be processed.
            destination_for: Maps a known category to its existing target directory.

        Returns:
            RunSummary: Moved, skipped, and error counts with per-entry outcomes.
        """

        summary = RunSummary()

        for entry in listing:
            if entry.is_directory:
                continue

            category = self._classifier.classify(extension_of(entry.name))
            if category is Category.UNKNOWN:
                summary.skipped += 1
                self._record(
                    summary,
                    EntryOutcome(name=entry.name, status="skipped", category=category),
                )
                continue

            desired = destination_for(category) / entry.name
            destination = resolve_unique_destination(desired, self._exists)
            source = source_dir / entry.name

            try:
                self._move(source, destination)
            except OSError as exc:
                summary.errors += 1
                LOGGER.warning("Error moving %s: %s", entry.name, exc)
                outcome = EntryOutcome(
                    name=entry.name,
                    status="error",
                    category=category,
                    destination=destination,
                    error=str(exc),
                )
            else:
                summary.moved += 1
                LOGGER.info("Moved %s -> %s", entry.name, destination)
                outcome = EntryOutcome(
                    name=entry.name,
                    status="moved",
                    category=category,
                    destination=destination,
                )
            self._record(summary, outcome)

        return summary

    def _record(self, summary: RunSummary, outcome: EntryOutcome) -> None:
        summary.outcomes.append(outcome)
        if self._reporter is not None:
            self._reporter(outcome)


__all__ = ["RelocationExecutor"]
