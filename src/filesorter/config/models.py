"""Configuration models using Pydantic for validation."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _normalize_extensions(values: list[str]) -> list[str]:
    """Lowercase extensions and strip any leading dot, keeping order."""
    normalized: list[str] = []
    for value in values:
        ext = str(value).strip().lower().lstrip(".")
        if not ext:
            raise ValueError("Extensions must not be empty")
        if ext not in normalized:
            normalized.append(ext)
    return normalized


class ClassificationRules(BaseModel):
    """Extension groups and thresholds used to pick a category."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    audio_extensions: list[str] = Field(
        default_factory=lambda: ["mp3", "wav", "m4a", "aac", "flac", "ogg", "wma"],
        description="Extensions moved to audio/ with an audio_ prefix",
    )
    html_extensions: list[str] = Field(
        default_factory=lambda: ["html", "htm"],
        description="Extensions treated as email or website reports",
    )
    document_extensions: list[str] = Field(
        default_factory=lambda: ["pdf", "docx", "doc", "txt", "md", "rtf", "odt", "pages"],
        description="Extensions moved to documents/",
    )
    research_extensions: list[str] = Field(
        default_factory=lambda: [
            "png", "jpg", "jpeg", "gif", "svg",
            "csv", "json", "xml", "xlsx", "xls",
            "zip", "rar", "7z",
        ],
        description="Extensions moved to research/",
    )
    index_files: list[str] = Field(
        default_factory=lambda: ["index.html", "enhanced-index.html"],
        description="HTML file names that are never treated as reports",
    )
    email_size_threshold: int = Field(
        default=10240,
        ge=0,
        description="HTML files smaller than this many bytes are email reports",
    )

    @field_validator(
        "audio_extensions", "html_extensions", "document_extensions", "research_extensions"
    )
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Store extensions lowercase without a leading dot."""
        return _normalize_extensions(v)

    @field_validator("index_files")
    @classmethod
    def normalize_index_files(cls, v: list[str]) -> list[str]:
        """Index file names are compared case-insensitively."""
        return [name.strip().lower() for name in v if name.strip()]

    @model_validator(mode="after")
    def groups_are_disjoint(self) -> "ClassificationRules":
        """Ensure an extension belongs to at most one group."""
        seen: dict[str, str] = {}
        for group, extensions in self.extension_groups().items():
            for ext in extensions:
                if ext in seen:
                    raise ValueError(
                        f"Extension '{ext}' listed in both {seen[ext]} and {group}"
                    )
                seen[ext] = group
        return self

    def extension_groups(self) -> dict[str, list[str]]:
        """Extension groups keyed by field name, in precedence order."""
        return {
            "audio_extensions": self.audio_extensions,
            "html_extensions": self.html_extensions,
            "document_extensions": self.document_extensions,
            "research_extensions": self.research_extensions,
        }


class LayoutSettings(BaseModel):
    """Directory layout created inside the working directory."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    directories: list[str] = Field(
        default_factory=lambda: ["audio", "reports", "documents", "research", "assets", "backups"],
        description="Top-level directories created before files are moved",
    )
    report_directories: list[str] = Field(
        default_factory=lambda: ["audio", "reports", "documents", "research", "assets"],
        description="Directories whose file counts are shown in the final report",
    )

    @field_validator("directories", "report_directories")
    @classmethod
    def validate_relative(cls, v: list[str]) -> list[str]:
        """Directories must be plain names relative to the working directory."""
        for name in v:
            if not name or Path(name).is_absolute() or ".." in Path(name).parts:
                raise ValueError(f"Invalid directory name: {name!r}")
        return v


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(
        default=Path.home() / ".filesorter" / "logs", description="Directory for log files"
    )
    max_bytes: int = Field(
        default=10 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=5, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class FileSorterConfig(BaseModel):
    """Main configuration for FileSorter."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    rules: ClassificationRules = Field(
        default_factory=ClassificationRules, description="Classification rules"
    )
    layout: LayoutSettings = Field(
        default_factory=LayoutSettings, description="Directory layout"
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )
