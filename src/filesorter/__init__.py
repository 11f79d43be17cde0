"""
FileSorter - sort a flat working directory into category folders.

Files are classified by extension (and HTML reports by size), renamed with
semantic prefixes, and moved without ever silently overwriting an existing
file.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .classifier import Category, FileClassifier, destination_for
from .config import ConfigManager, FileSorterConfig
from .core import Organizer, RunSummary
from .errors import (
    DirectoryCreateFailed,
    FileSorterError,
    MoveFailed,
    SourceMissing,
    WorkingDirectoryError,
)
from .mover import MoveResult, MoveStatus, SafeMover
from .utils.file_scanner import FileEntry, scan_directory
from .utils.logging import get_logger

__all__ = [
    "get_logger",
    # Config
    "ConfigManager",
    "FileSorterConfig",
    # Scanner
    "FileEntry",
    "scan_directory",
    # Classifier
    "Category",
    "FileClassifier",
    "destination_for",
    # Mover
    "SafeMover",
    "MoveResult",
    "MoveStatus",
    # Organizer
    "Organizer",
    "RunSummary",
    # Errors
    "FileSorterError",
    "SourceMissing",
    "MoveFailed",
    "DirectoryCreateFailed",
    "WorkingDirectoryError",
]
