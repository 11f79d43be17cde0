"""Mover component for safe file movement with backup of existing destinations."""

import shutil
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

from ..errors import FileSorterError, MoveFailed, SourceMissing
from ..utils.logging import get_logger

logger = get_logger(__name__)

BACKUP_INFIX = ".backup."


class MoveStatus(str, Enum):
    """Outcome of a single move attempt."""

    MOVED = "moved"
    SKIPPED = "skipped"
    FAILED = "failed"
    PLANNED = "planned"


@dataclass
class MoveResult:
    """Result of a file move operation."""

    source_path: Path
    destination_path: Path
    status: MoveStatus

    # Set when an existing destination was renamed out of the way
    backup_path: Path | None = None
    error: FileSorterError | None = None

    @property
    def success(self) -> bool:
        """Whether the file now lives at destination_path."""
        return self.status is MoveStatus.MOVED

    @property
    def backup_created(self) -> bool:
        return self.backup_path is not None

    @property
    def error_message(self) -> str | None:
        return str(self.error) if self.error else None

    def raise_for_status(self) -> None:
        """Raise the recorded error, if the move was skipped or failed."""
        if self.error is not None:
            raise self.error


def backup_path_for(destination: Path, timestamp: float) -> Path:
    """Name used for an existing destination: ``<dest>.backup.<epoch-seconds>``."""
    return destination.with_name(f"{destination.name}{BACKUP_INFIX}{int(timestamp)}")


class SafeMover:
    """
    Moves files without ever silently overwriting a destination.

    An occupied destination is renamed to ``<dest>.backup.<epoch-seconds>``
    before the move. Two backups of the same destination within one second
    share a name and the later one replaces the earlier.
    """

    def __init__(self, dry_run: bool = False, clock: Callable[[], float] = time.time):
        """
        Initialize the safe mover.

        Args:
            dry_run: Report what would be moved without touching the filesystem
            clock: Source of the current unix time, used for backup names
        """
        self.dry_run = dry_run
        self.clock = clock

    def move(self, source: Path, destination: Path) -> MoveResult:
        """
        Move ``source`` to ``destination``, backing up any existing file there.

        Failures are returned in the MoveResult rather than raised, so a
        caller can log them and continue with the next file.

        Args:
            source: File to move
            destination: Full destination path

        Returns:
            MoveResult with operation status
        """
        source = Path(source)
        destination = Path(destination)

        if not source.is_file():
            error = SourceMissing(source)
            logger.warning(str(error))
            return MoveResult(
                source_path=source,
                destination_path=destination,
                status=MoveStatus.SKIPPED,
                error=error,
            )

        if self.dry_run:
            logger.info(f"Would move {source.name} → {destination}")
            return MoveResult(
                source_path=source,
                destination_path=destination,
                status=MoveStatus.PLANNED,
            )

        backup: Path | None = None
        backed_up = False
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)

            if destination.exists() or destination.is_symlink():
                backup = backup_path_for(destination, self.clock())
                logger.warning(f"Destination exists, creating backup: {backup}")
                destination.replace(backup)
                backed_up = True

            shutil.move(str(source), str(destination))

        except OSError as e:
            error = MoveFailed(source, destination, e.strerror or str(e))
            logger.error(str(error))
            return MoveResult(
                source_path=source,
                destination_path=destination,
                status=MoveStatus.FAILED,
                backup_path=backup if backed_up else None,
                error=error,
            )

        logger.info(f"Moved {source.name} → {destination}")
        return MoveResult(
            source_path=source,
            destination_path=destination,
            status=MoveStatus.MOVED,
            backup_path=backup,
        )
