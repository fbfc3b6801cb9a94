"""Extension classification package."""

from .engine import ExtensionClassifier, classify_extension, extension_of, split_name
from .models import Category
from .rules import DEFAULT_EXTENSION_RULES, build_rules

__all__ = [
    "Category",
    "DEFAULT_EXTENSION_RULES",
    "ExtensionClassifier",
    "build_rules",
    "classify_extension",
    "extension_of",
    "split_name",
]
