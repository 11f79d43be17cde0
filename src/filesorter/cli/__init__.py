"""Command-line interface for FileSorter."""
