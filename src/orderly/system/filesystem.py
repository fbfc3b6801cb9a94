"""Filesystem primitives used by the relocation executor."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import ListingError
from .models import FileEntry


def list_entries(directory: Path) -> list[FileEntry]:
    """Return a snapshot of the immediate entries of ``directory``.

    Args:
        directory: Directory to enumerate.

    Returns:
        list[FileEntry]: Entries in the order reported by the operating system.

    Raises:
        ListingError: If the directory cannot be opened or read.
    """

    try:
        with os.scandir(directory) as iterator:
            return [
                FileEntry(name=entry.name, is_directory=_is_directory(entry))
                for entry in iterator
            ]
    except OSError as exc:
        raise ListingError(f"Failed to open {directory}: {exc}") from exc


def _is_directory(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def path_exists(path: Path) -> bool:
    """Return whether any entry, including a dangling symlink, occupies ``path``."""
    return os.path.lexists(path)


def move_file(source: Path, destination: Path) -> None:
    """Rename ``source`` to ``destination`` without overwriting.

    Args:
        source: File to move.
        destination: Target path, expected to be free.

    Raises:
        FileExistsError: If something already exists at ``destination``.
        OSError: If the rename fails, including moves across filesystems.
    """

    if path_exists(destination):
        raise FileExistsError(f"Destination already exists: {destination}")
    source.rename(destination)


__all__ = ["list_entries", "move_file", "path_exists"]
