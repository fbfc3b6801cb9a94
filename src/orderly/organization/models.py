"""Relocation run data models."""

from __future__ import annotations

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from orderly.classification.models import Category
from orderly.system.models import FileEntry


class EntryOutcome(BaseModel):
    """Result of processing one regular file from the source listing.

    Attributes:
        name: File name as it appeared in the listing.
        status: Whether the file was moved, skipped, or failed to move.
        category: Category assigned by the classifier.
        destination: Final destination path for moved or failed entries.
        error: Failure reason reported by the move primitive.
    """

    name: str
    status: Literal["moved", "skipped", "error"]
    category: Category
    destination: Optional[Path] = None
    error: Optional[str] = None


class RunSummary(BaseModel):
    """Counters accumulated over one relocation pass."""

    moved: int = 0
    skipped: int = 0
    errors: int = 0
    outcomes: List[EntryOutcome] = Field(default_factory=list)

    def counts(self) -> dict[str, int]:
        """Return the three counters in reporting order."""
        return {"moved": self.moved, "skipped": self.skipped, "errors": self.errors}


__all__ = ["EntryOutcome", "FileEntry", "RunSummary"]
