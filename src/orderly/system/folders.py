"""Location of the well-known user folders Orderly reads from and writes to."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Callable

from platformdirs import (
    user_documents_dir,
    user_downloads_dir,
    user_pictures_dir,
    user_videos_dir,
)

from .errors import SpecialFolderError

LOGGER = logging.getLogger(__name__)


class SpecialFolder(str, Enum):
    """Well-known per-user directories."""

    DOWNLOADS = "downloads"
    DOCUMENTS = "documents"
    PICTURES = "pictures"
    VIDEOS = "videos"


_LOOKUPS: dict[SpecialFolder, Callable[[], str]] = {
    SpecialFolder.DOWNLOADS: user_downloads_dir,
    SpecialFolder.DOCUMENTS: user_documents_dir,
    SpecialFolder.PICTURES: user_pictures_dir,
    SpecialFolder.VIDEOS: user_videos_dir,
}


def resolve_special_folder(kind: SpecialFolder, override: str | Path | None = None) -> Path:
    """Return the absolute path of a well-known user folder.

    Args:
        kind: Folder to locate.
        override: Explicit path that replaces the platform lookup.

    Returns:
        Path: Resolved directory path.

    Raises:
        SpecialFolderError: If the folder cannot be determined or is not a directory.
    """

    label = kind.value.capitalize()
    if override is not None:
        raw = str(override)
    else:
        try:
            raw = _LOOKUPS[kind]()
        except Exception as exc:
            raise SpecialFolderError(f"Cannot locate {label} folder: {exc}") from exc

    if not raw:
        raise SpecialFolderError(f"Cannot locate {label} folder.")

    path = Path(raw).expanduser().resolve()
    if not path.is_dir():
        raise SpecialFolderError(f"Cannot locate {label} folder: {path} is not a directory.")
    return path


def ensure_directory(path: Path) -> None:
    """Create ``path`` if it is missing, ignoring failures."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        LOGGER.debug("Unable to create %s: %s", path, exc)


__all__ = ["SpecialFolder", "ensure_directory", "resolve_special_folder"]
