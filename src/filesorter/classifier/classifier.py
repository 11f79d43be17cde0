"""Classifier component mapping file extensions and sizes to categories."""

from enum import Enum
from pathlib import Path

from ..config.models import ClassificationRules
from ..utils.file_scanner import FileEntry, extension_of
from ..utils.logging import get_logger

logger = get_logger(__name__)


class Category(str, Enum):
    """Destination bucket for a file."""

    AUDIO = "audio"
    REPORTS_EMAIL = "reports-email"
    REPORTS_WEBSITE = "reports-website"
    DOCUMENTS = "documents"
    RESEARCH = "research"
    UNCLASSIFIED = "unclassified"

    @property
    def directory(self) -> str | None:
        """Top-level directory files of this category are moved into."""
        return _CATEGORY_DIRECTORIES[self]

    @property
    def is_report(self) -> bool:
        return self in (Category.REPORTS_EMAIL, Category.REPORTS_WEBSITE)


_CATEGORY_DIRECTORIES = {
    Category.AUDIO: "audio",
    Category.REPORTS_EMAIL: "reports",
    Category.REPORTS_WEBSITE: "reports",
    Category.DOCUMENTS: "documents",
    Category.RESEARCH: "research",
    Category.UNCLASSIFIED: None,
}


class ExtensionGroup(str, Enum):
    """Extension group a file belongs to before size is considered."""

    AUDIO = "audio"
    REPORTS = "reports"
    DOCUMENTS = "documents"
    RESEARCH = "research"


# Processing order for groups, and the field each one is configured by
GROUP_ORDER = [
    (ExtensionGroup.AUDIO, "audio_extensions"),
    (ExtensionGroup.REPORTS, "html_extensions"),
    (ExtensionGroup.DOCUMENTS, "document_extensions"),
    (ExtensionGroup.RESEARCH, "research_extensions"),
]


class FileClassifier:
    """
    Classifies files by extension, and HTML reports by size.

    The configured extension lists are flattened into a single lookup table,
    so classification is one dict lookup plus the report size check.
    """

    def __init__(self, rules: ClassificationRules | None = None):
        """
        Initialize the file classifier.

        Args:
            rules: Extension groups and thresholds (defaults if None)
        """
        self.rules = rules or ClassificationRules()
        self.index_files = frozenset(self.rules.index_files)
        self.extension_table: dict[str, ExtensionGroup] = {}
        for group, field_name in GROUP_ORDER:
            for ext in getattr(self.rules, field_name):
                self.extension_table.setdefault(ext, group)

    def group_for(self, name: str) -> ExtensionGroup | None:
        """
        Get the extension group for a file name.

        Index files are excluded from the report group and belong to no group.
        """
        group = self.extension_table.get(extension_of(name))
        if group is ExtensionGroup.REPORTS and name.lower() in self.index_files:
            return None
        return group

    def classify(self, name: str, size: int) -> Category:
        """
        Classify a file by name and size in bytes.

        Args:
            name: File name (a path is accepted; only its name is used)
            size: File size in bytes

        Returns:
            Exactly one Category
        """
        name = Path(name).name
        group = self.group_for(name)

        if group is None:
            return Category.UNCLASSIFIED
        if group is ExtensionGroup.AUDIO:
            return Category.AUDIO
        if group is ExtensionGroup.REPORTS:
            if size < self.rules.email_size_threshold:
                return Category.REPORTS_EMAIL
            return Category.REPORTS_WEBSITE
        if group is ExtensionGroup.DOCUMENTS:
            return Category.DOCUMENTS
        return Category.RESEARCH

    def classify_entry(self, entry: FileEntry) -> Category:
        """Classify a scanned FileEntry."""
        category = self.classify(entry.name, entry.size)
        logger.debug(f"Classified {entry.name} ({entry.size} bytes) as {category.value}")
        return category
