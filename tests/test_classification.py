"""Tests for extension classification."""

from __future__ import annotations

import pytest

from orderly.classification import (
    DEFAULT_EXTENSION_RULES,
    Category,
    ExtensionClassifier,
    build_rules,
    classify_extension,
    extension_of,
    split_name,
)
from orderly.classification.rules import (
    DOCUMENT_EXTENSIONS,
    PICTURE_EXTENSIONS,
    VIDEO_EXTENSIONS,
)

_EXPECTED = [
    *[(ext, Category.PICTURES) for ext in PICTURE_EXTENSIONS],
    *[(ext, Category.VIDEOS) for ext in VIDEO_EXTENSIONS],
    *[(ext, Category.DOCUMENTS) for ext in DOCUMENT_EXTENSIONS],
]


def test_default_table_contents() -> None:
    assert PICTURE_EXTENSIONS == (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp", ".heic")
    assert VIDEO_EXTENSIONS == (".mp4", ".mkv", ".mov", ".avi", ".webm", ".flv")
    assert DOCUMENT_EXTENSIONS == (
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
    assert len(DEFAULT_EXTENSION_RULES) == 22


@pytest.mark.parametrize(("extension", "category"), _EXPECTED)
def test_known_extensions_classify_in_any_case(extension: str, category: Category) -> None:
    assert classify_extension(extension) is category
    assert classify_extension(extension.upper()) is category
    assert classify_extension(extension[:2].upper() + extension[2:]) is category


@pytest.mark.parametrize(
    "extension", [None, "", ".", ".xyz", ".zip", ".exe", "jpg", ".jpg.bak", ".tar.gz"]
)
def test_unrecognized_extensions_are_unknown(extension: str | None) -> None:
    assert classify_extension(extension) is Category.UNKNOWN


def test_default_rules_are_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_EXTENSION_RULES[".zip"] = Category.DOCUMENTS  # type: ignore[index]


def test_classifier_accepts_alternate_table() -> None:
    classifier = ExtensionClassifier(build_rules({Category.VIDEOS: [".GIFV"]}))

    assert classifier.classify(".gifv") is Category.VIDEOS
    assert classifier.classify(".jpg") is Category.UNKNOWN
    assert classify_extension(".gifv") is Category.UNKNOWN


@pytest.mark.parametrize(
    ("name", "extension"),
    [
        ("photo.JPG", ".JPG"),
        ("archive.tar.gz", ".gz"),
        ("README", ""),
        (".bashrc", ".bashrc"),
        ("trailing.", "."),
    ],
)
def test_extension_of_uses_last_dot(name: str, extension: str) -> None:
    assert extension_of(name) == extension


def test_classifier_uses_final_extension_of_name() -> None:
    classifier = ExtensionClassifier()

    assert classifier.classify(extension_of("Report.Final.PDF")) is Category.DOCUMENTS
    assert classifier.classify(extension_of("clip.mov")) is Category.VIDEOS
    assert classifier.classify(extension_of("setup.exe")) is Category.UNKNOWN
    assert classifier.classify(extension_of("notes")) is Category.UNKNOWN


def test_split_name() -> None:
    assert split_name("report.txt") == ("report", ".txt")
    assert split_name("archive.tar.gz") == ("archive.tar", ".gz")
    assert split_name("notes") == ("notes", "")
    assert split_name(".hidden") == ("", ".hidden")
