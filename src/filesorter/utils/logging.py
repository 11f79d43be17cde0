"""Logging setup: Rich console output plus an optional rotating log file."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from ..config.models import LoggingSettings

ROOT_LOGGER_NAME = "filesorter"
LOG_FILE_NAME = "filesorter.log"
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"

FILESORTER_THEME = Theme(
    {
        "info": "blue",
        "warning": "yellow",
        "error": "red bold",
        "success": "green bold",
    }
)

_console: Optional[Console] = None


def get_console() -> Console:
    """Shared Rich console used by log output and command summaries."""
    global _console
    if _console is None:
        _console = Console(theme=FILESORTER_THEME)
    return _console


def _build_console_handler(level: int) -> RichHandler:
    handler = RichHandler(
        console=get_console(),
        rich_tracebacks=True,
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    return handler


def _build_file_handler(
    log_dir: Path, max_bytes: int, backup_count: int, level: int
) -> RotatingFileHandler:
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=FILE_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.setLevel(level)
    return handler


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    console_enabled: bool = True,
    file_enabled: bool = False,
) -> logging.Logger:
    """
    Replace the handlers on the ``filesorter`` logger.

    Args:
        level: Logging level name
        log_dir: Directory for the rotating log file (defaults to ~/.filesorter/logs)
        max_bytes: Size at which the log file rotates
        backup_count: Number of rotated files kept
        console_enabled: Log to the Rich console
        file_enabled: Log to a rotating file

    Returns:
        The configured package logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    log_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(log_level)
    root.propagate = False

    if console_enabled:
        root.addHandler(_build_console_handler(log_level))
    if file_enabled:
        directory = log_dir if log_dir is not None else Path.home() / ".filesorter" / "logs"
        root.addHandler(_build_file_handler(directory, max_bytes, backup_count, log_level))
    if not root.handlers:
        root.addHandler(logging.NullHandler())

    return root


def configure_logging(settings: LoggingSettings, level: Optional[str] = None) -> logging.Logger:
    """Apply LoggingSettings, optionally overriding the level (e.g. for --verbose)."""
    return setup_logging(
        level=level or settings.level,
        log_dir=settings.log_dir,
        max_bytes=settings.max_bytes,
        backup_count=settings.backup_count,
        console_enabled=settings.console_enabled,
        file_enabled=settings.file_enabled,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get the package logger or one of its children.

    Module names such as ``filesorter.mover.mover`` are used as-is; other
    names become children of the ``filesorter`` logger. Default handlers are
    installed on first use.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        setup_logging()

    if not name or name == ROOT_LOGGER_NAME:
        return root
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return root.getChild(name)
