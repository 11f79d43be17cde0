"""Configuration module for FileSorter."""

from .manager import ConfigManager
from .models import (
    ClassificationRules,
    FileSorterConfig,
    LayoutSettings,
    LoggingSettings,
)

__all__ = [
    "FileSorterConfig",
    "ClassificationRules",
    "LayoutSettings",
    "LoggingSettings",
    "ConfigManager",
]
