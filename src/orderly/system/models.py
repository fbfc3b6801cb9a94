"""Directory listing records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FileEntry:
    """One element of a directory listing snapshot.

    Attributes:
        name: Entry name without any directory component.
        is_directory: Whether the entry is a directory (or a link to one).
    """

    name: str
    is_directory: bool = False


__all__ = ["FileEntry"]
