"""Mover module for safe file movement with backups."""

from .mover import MoveResult, MoveStatus, SafeMover, backup_path_for

__all__ = [
    "SafeMover",
    "MoveResult",
    "MoveStatus",
    "backup_path_for",
]
