"""Category values assigned to downloaded files."""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Destination bucket for a classified file."""

    DOCUMENTS = "Documents"
    PICTURES = "Pictures"
    VIDEOS = "Videos"
    UNKNOWN = "Unknown"


__all__ = ["Category"]
