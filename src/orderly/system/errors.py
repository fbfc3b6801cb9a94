"""Errors raised while preparing a relocation run."""


class SetupError(Exception):
    """Base exception for failures that abort a run before files are touched."""


class SpecialFolderError(SetupError):
    """Raised when a well-known user folder cannot be located."""


class ListingError(SetupError):
    """Raised when the source directory cannot be enumerated."""
