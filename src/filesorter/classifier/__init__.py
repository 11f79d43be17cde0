"""Classifier module for extension-based file classification."""

from .classifier import GROUP_ORDER, Category, ExtensionGroup, FileClassifier
from .namer import NAME_PREFIXES, destination_for

__all__ = [
    "Category",
    "ExtensionGroup",
    "FileClassifier",
    "GROUP_ORDER",
    "NAME_PREFIXES",
    "destination_for",
]
