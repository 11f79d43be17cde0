"""Utility modules for FileSorter."""

from .file_scanner import FileEntry, FileScanner, extension_of, scan_directory
from .logging import configure_logging, get_console, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "configure_logging",
    "get_console",
    "FileEntry",
    "FileScanner",
    "extension_of",
    "scan_directory",
]
