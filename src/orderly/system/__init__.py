"""Platform collaborators: special folders and filesystem primitives."""

from .errors import ListingError, SetupError, SpecialFolderError
from .filesystem import list_entries, move_file, path_exists
from .folders import SpecialFolder, ensure_directory, resolve_special_folder
from .models import FileEntry

__all__ = [
    "FileEntry",
    "ListingError",
    "SetupError",
    "SpecialFolder",
    "SpecialFolderError",
    "ensure_directory",
    "list_entries",
    "move_file",
    "path_exists",
    "resolve_special_folder",
]
