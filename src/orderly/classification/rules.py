"""Default extension-to-category table."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from .models import Category

PICTURE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp", ".heic")
VIDEO_EXTENSIONS = (".mp4", ".mkv", ".mov", ".avi", ".webm", ".flv")
DOCUMENT_EXTENSIONS = (
    ".pdf",
    ".doc",
    ".docx",
    ".xls",
    ".xlsx",
    ".ppt",
    ".pptx",
    ".txt",
    ".odt",
)


def build_rules(groups: Mapping[Category, Iterable[str]]) -> Mapping[str, Category]:
    """Return a read-only lookup table from lowercase extensions to categories.

    Args:
        groups: Extensions keyed by the category they belong to.

    Returns:
        Mapping[str, Category]: Immutable mapping suitable for exact-match lookup.
    """

    table: dict[str, Category] = {}
    for category, extensions in groups.items():
        for extension in extensions:
            table[extension.lower()] = category
    return MappingProxyType(table)


DEFAULT_EXTENSION_RULES = build_rules(
    {
        Category.PICTURES: PICTURE_EXTENSIONS,
        Category.VIDEOS: VIDEO_EXTENSIONS,
        Category.DOCUMENTS: DOCUMENT_EXTENSIONS,
    }
)


__all__ = [
    "DEFAULT_EXTENSION_RULES",
    "DOCUMENT_EXTENSIONS",
    "PICTURE_EXTENSIONS",
    "VIDEO_EXTENSIONS",
    "build_rules",
]
