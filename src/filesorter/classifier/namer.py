"""Destination naming for classified files."""

from pathlib import Path

from ..utils.file_scanner import FileEntry
from .classifier import Category

# Prefix prepended to the original file name, per category
NAME_PREFIXES = {
    Category.AUDIO: "audio_",
    Category.REPORTS_EMAIL: "email_",
    Category.REPORTS_WEBSITE: "website_",
    Category.DOCUMENTS: "",
    Category.RESEARCH: "",
}


def destination_for(category: Category, entry: FileEntry | str) -> Path:
    """
    Compute a file's destination, relative to the working directory.

    Prefixes are applied unconditionally, so a file already named
    ``audio_song.mp3`` becomes ``audio/audio_audio_song.mp3``.

    Args:
        category: Category returned by the classifier
        entry: FileEntry or plain file name

    Returns:
        Relative destination path

    Raises:
        ValueError: If the category is not moved anywhere
    """
    if category is Category.UNCLASSIFIED or category.directory is None:
        raise ValueError(f"Category {category.value!r} has no destination")

    name = entry.name if isinstance(entry, FileEntry) else Path(entry).name
    return Path(category.directory) / f"{NAME_PREFIXES[category]}{name}"
