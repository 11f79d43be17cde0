"""Exception types raised or reported by FileSorter components."""

from pathlib import Path


class FileSorterError(Exception):
    """Base error for the project."""


class SourceMissing(FileSorterError):
    """Source file disappeared between scanning and moving."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Source file not found: {self.path}")


class MoveFailed(FileSorterError):
    """Underlying filesystem operation failed while moving a file."""

    def __init__(self, source: Path, destination: Path, reason: str):
        self.source = Path(source)
        self.destination = Path(destination)
        self.reason = reason
        super().__init__(f"Failed to move {self.source} -> {self.destination}: {reason}")


class DirectoryCreateFailed(FileSorterError):
    """A category directory could not be created."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot create directory {self.path}: {reason}")


class WorkingDirectoryError(FileSorterError):
    """The working directory could not be read at all."""
