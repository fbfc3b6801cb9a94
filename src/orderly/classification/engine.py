"""Extension-based classification of downloaded files.

Classification is a pure lookup: the extension is folded to lowercase and
matched exactly against a rule table. Anything that does not match, including
names without an extension, is reported as ``Category.UNKNOWN``.
"""

from __future__ import annotations

from typing import Mapping, Optional

from .models import Category
from .rules import DEFAULT_EXTENSION_RULES


def split_name(name: str) -> tuple[str, str]:
    """Split a file name at its last dot into base name and extension.

    Args:
        name: File name without any directory component.

    Returns:
        tuple[str, str]: Base name and extension (including the dot, or empty).
    """

    index = name.rfind(".")
    if index < 0:
        return name, ""
    return name[:index], name[index:]


def extension_of(name: str) -> str:
    """Return the substring starting at the last dot of ``name``, or an empty string."""
    return split_name(name)[1]


def classify_extension(
    extension: Optional[str],
    rules: Mapping[str, Category] = DEFAULT_EXTENSION_RULES,
) -> Category:
    """Map a file extension to its category.

    Args:
        extension: Extension including the leading dot, if any.
        rules: Lookup table keyed by lowercase extension.

    Returns:
        Category: Matching category, or ``Category.UNKNOWN``.
    """

    if not extension or len(extension) < 2:
        return Category.UNKNOWN
    return rules.get(extension.lower(), Category.UNKNOWN)


class ExtensionClassifier:
    """Classify files against a fixed extension table."""

    def __init__(self, rules: Mapping[str, Category] = DEFAULT_EXTENSION_RULES) -> None:
        self._rules = rules

    def classify(self, extension: Optional[str]) -> Category:
        """Return the category for ``extension``."""
        return classify_extension(extension, self._rules)
