"""File scanner utility for listing the immediate files of a working directory."""

from dataclasses import dataclass
from pathlib import Path

from ..errors import WorkingDirectoryError
from .logging import get_logger

logger = get_logger(__name__)


def extension_of(name: str) -> str:
    """
    Return the lowercase extension of a file name, without the dot.

    Names without a dot, and dotfiles such as ``.bashrc``, have no extension.
    """
    return Path(name).suffix.lower().lstrip(".")


@dataclass(frozen=True)
class FileEntry:
    """A regular file found directly inside the working directory."""

    path: Path
    name: str
    size: int
    extension: str

    @classmethod
    def from_path(cls, path: Path) -> "FileEntry":
        """Build an entry from a path, reading its size from the filesystem."""
        path = Path(path)
        return cls(
            path=path,
            name=path.name,
            size=path.stat().st_size,
            extension=extension_of(path.name),
        )


class FileScanner:
    """
    Lists regular files directly inside a directory.

    Uses an explicit directory listing rather than glob patterns, so a
    directory with no matching files simply yields nothing.
    """

    def scan(self, directory: Path) -> list[FileEntry]:
        """
        Scan the immediate children of ``directory``.

        Args:
            directory: Directory to scan (not recursive)

        Returns:
            FileEntry objects sorted by name

        Raises:
            WorkingDirectoryError: If the directory cannot be listed
        """
        directory = Path(directory)

        if not directory.exists():
            raise WorkingDirectoryError(f"Working directory does not exist: {directory}")
        if not directory.is_dir():
            raise WorkingDirectoryError(f"Working directory is not a directory: {directory}")

        try:
            children = sorted(directory.iterdir())
        except OSError as e:
            raise WorkingDirectoryError(f"Cannot read working directory {directory}: {e}") from e

        entries: list[FileEntry] = []
        for child in children:
            if not child.is_file():
                continue
            try:
                entries.append(FileEntry.from_path(child))
            except OSError as e:
                # Vanished or unreadable between listing and stat
                logger.debug(f"Skipping {child.name}: {e}")

        logger.debug(f"Scanned {directory}: {len(entries)} file(s)")
        return entries


def scan_directory(directory: Path) -> list[FileEntry]:
    """Convenience function to scan a directory's immediate files."""
    return FileScanner().scan(directory)
