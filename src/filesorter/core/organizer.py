"""Organizer orchestrating scan, classification and safe moves for a directory."""

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..classifier import GROUP_ORDER, Category, ExtensionGroup, FileClassifier, destination_for
from ..config.models import FileSorterConfig
from ..errors import DirectoryCreateFailed
from ..mover import MoveResult, MoveStatus, SafeMover
from ..utils.file_scanner import FileEntry, FileScanner
from ..utils.logging import get_console, get_logger

logger = get_logger(__name__)

# Header title and noun used in per-group summaries
GROUP_LABELS = {
    ExtensionGroup.AUDIO: ("🎵 Processing Audio Files", "audio"),
    ExtensionGroup.REPORTS: ("📄 Processing HTML Files", "HTML"),
    ExtensionGroup.DOCUMENTS: ("📋 Processing Document Files", "document"),
    ExtensionGroup.RESEARCH: ("🔬 Processing Research Assets", "research"),
}


@dataclass
class CategorySummary:
    """Counts for one extension group within a run."""

    group: ExtensionGroup
    found: int = 0
    processed: int = 0
    failed: int = 0
    skipped: int = 0
    planned: int = 0

    # Report split by size
    email: int = 0
    website: int = 0


@dataclass
class RunSummary:
    """Aggregate result of one organizer run."""

    working_directory: Path
    dry_run: bool = False

    total_scanned: int = 0
    processed: int = 0
    errors: int = 0
    skipped: int = 0
    unclassified: int = 0

    groups: dict[ExtensionGroup, CategorySummary] = field(
        default_factory=lambda: {group: CategorySummary(group) for group, _ in GROUP_ORDER}
    )
    results: list[MoveResult] = field(default_factory=list)
    directory_errors: list[DirectoryCreateFailed] = field(default_factory=list)
    directory_contents: dict[str, int] = field(default_factory=dict)

    @property
    def success_rate(self) -> int:
        """Processed files as an integer percentage of matched files."""
        if self.total_scanned == 0:
            return 0
        return (self.processed * 100) // self.total_scanned

    @property
    def exit_code(self) -> int:
        return 1 if self.errors > 0 else 0

    def record(self, category: Category, result: MoveResult):
        """Tally one move result under its category."""
        group = self.groups[GROUP_FOR_CATEGORY[category]]
        self.results.append(result)

        if result.status is MoveStatus.MOVED:
            self.processed += 1
            group.processed += 1
        elif result.status is MoveStatus.FAILED:
            self.errors += 1
            group.failed += 1
        elif result.status is MoveStatus.SKIPPED:
            self.skipped += 1
            group.skipped += 1
        elif result.status is MoveStatus.PLANNED:
            group.planned += 1

        # Email/website split counts files that moved, or would move in a dry run
        if category.is_report and result.status in (MoveStatus.MOVED, MoveStatus.PLANNED):
            if category is Category.REPORTS_EMAIL:
                group.email += 1
            else:
                group.website += 1


GROUP_FOR_CATEGORY = {
    Category.AUDIO: ExtensionGroup.AUDIO,
    Category.REPORTS_EMAIL: ExtensionGroup.REPORTS,
    Category.REPORTS_WEBSITE: ExtensionGroup.REPORTS,
    Category.DOCUMENTS: ExtensionGroup.DOCUMENTS,
    Category.RESEARCH: ExtensionGroup.RESEARCH,
}


class Organizer:
    """
    Organizes a flat working directory into category subdirectories.

    Pipeline: create directories -> scan -> classify -> name -> safe move -> report
    """

    def __init__(
        self,
        config: FileSorterConfig | None = None,
        dry_run: bool = False,
        mover: SafeMover | None = None,
        console: Console | None = None,
    ):
        """
        Initialize the organizer.

        Args:
            config: FileSorter configuration (defaults if None)
            dry_run: Show what would be moved without changing anything
            mover: SafeMover to use (one honouring dry_run is created if None)
            console: Rich console for headers and summaries
        """
        self.config = config or FileSorterConfig()
        self.dry_run = dry_run
        self.scanner = FileScanner()
        self.classifier = FileClassifier(self.config.rules)
        self.mover = mover or SafeMover(dry_run=dry_run)
        self.console = console or get_console()

    def create_directory_structure(self, working_directory: Path) -> list[DirectoryCreateFailed]:
        """
        Create the fixed category directories, skipping ones that already exist.

        Returns:
            Errors for directories that could not be created
        """
        self._header("📁 Creating Directory Structure")
        failures: list[DirectoryCreateFailed] = []

        for name in self.config.layout.directories:
            directory = Path(working_directory) / name
            if directory.is_dir():
                logger.debug(f"Directory already exists: {name}/")
                continue
            try:
                directory.mkdir(parents=True, exist_ok=True)
                logger.info(f"Created directory: {name}/")
            except OSError as e:
                failure = DirectoryCreateFailed(directory, e.strerror or str(e))
                logger.warning(str(failure))
                failures.append(failure)

        return failures

    def plan(
        self, working_directory: Path
    ) -> tuple[dict[ExtensionGroup, list[tuple[FileEntry, Category]]], list[FileEntry]]:
        """
        Scan and classify the working directory without moving anything.

        Returns:
            Tuple of (matched files per group in processing order, unclassified files)

        Raises:
            WorkingDirectoryError: If the working directory cannot be read
        """
        planned: dict[ExtensionGroup, list[tuple[FileEntry, Category]]] = {
            group: [] for group, _ in GROUP_ORDER
        }
        unclassified: list[FileEntry] = []

        for entry in self.scanner.scan(working_directory):
            category = self.classifier.classify_entry(entry)
            if category is Category.UNCLASSIFIED:
                unclassified.append(entry)
                continue
            planned[GROUP_FOR_CATEGORY[category]].append((entry, category))

        return planned, unclassified

    def run(self, working_directory: Path) -> RunSummary:
        """
        Organize the immediate files of ``working_directory``.

        Per-file failures are logged and counted; only an unreadable working
        directory aborts the run.

        Args:
            working_directory: Directory to organize

        Returns:
            RunSummary with counts and individual move results

        Raises:
            WorkingDirectoryError: If the working directory cannot be read
        """
        working_directory = Path(working_directory)
        summary = RunSummary(working_directory=working_directory, dry_run=self.dry_run)

        planned, unclassified = self.plan(working_directory)
        summary.unclassified = len(unclassified)

        if not self.dry_run:
            summary.directory_errors = self.create_directory_structure(working_directory)

        for group, _ in GROUP_ORDER:
            title, _noun = GROUP_LABELS[group]
            self._header(title)

            for entry, category in planned[group]:
                summary.total_scanned += 1
                summary.groups[group].found += 1
                destination = working_directory / destination_for(category, entry)
                result = self.mover.move(entry.path, destination)
                summary.record(category, result)

            self._print_group_summary(summary.groups[group])

        summary.directory_contents = self.directory_contents(working_directory)
        self.print_report(summary)
        return summary

    def directory_contents(self, working_directory: Path) -> dict[str, int]:
        """Count regular files, recursively, in each reported directory that exists."""
        contents: dict[str, int] = {}
        for name in self.config.layout.report_directories:
            directory = Path(working_directory) / name
            if directory.is_dir():
                contents[name] = sum(1 for p in directory.rglob("*") if p.is_file())
        return contents

    def _header(self, title: str):
        self.console.rule(f"[bold magenta]{title}[/bold magenta]", style="magenta")

    def _print_group_summary(self, group: CategorySummary):
        """Print the one-line outcome of a group."""
        _title, noun = GROUP_LABELS[group.group]
        split = ""
        if group.group is ExtensionGroup.REPORTS:
            split = f" ({group.email} email, {group.website} website)"

        if group.found == 0:
            self.console.print(f"ℹ No {noun} files found", style="blue")
        elif self.dry_run:
            self.console.print(f"ℹ Would process {group.planned} {noun} files{split}", style="blue")
        else:
            self.console.print(f"✓ Processed {group.processed} {noun} files{split}", style="bold green")
            if group.failed:
                self.console.print(f"✗ {group.failed} {noun} files failed to move", style="bold red")

    def print_report(self, summary: RunSummary):
        """Print the final organization report."""
        self._header("📊 Organization Report")

        table = Table(title="File Processing Statistics", show_header=True, header_style="bold cyan")
        table.add_column("Metric", style="cyan")
        table.add_column("Count", style="green", justify="right")

        table.add_row("Total files found", str(summary.total_scanned))
        if summary.dry_run:
            planned = sum(group.planned for group in summary.groups.values())
            table.add_row("Would be processed", str(planned))
        else:
            table.add_row("Successfully processed", str(summary.processed))
        table.add_row("Errors encountered", str(summary.errors))
        table.add_row("Skipped (source missing)", str(summary.skipped))
        table.add_row("Left in place (unrecognized)", str(summary.unclassified))
        if not summary.dry_run:
            table.add_row("Success rate", f"{summary.success_rate}%")

        self.console.print(table)

        if summary.directory_contents:
            self.console.print("\n📁 Directory Contents:", style="cyan")
            for name, count in summary.directory_contents.items():
                self.console.print(f"  • {name}/: {count} files")

        if summary.errors > 0:
            self.console.print(
                f"\n⚠ Completed with {summary.errors} errors. Check the output above for details.",
                style="yellow",
            )
        elif summary.dry_run:
            self.console.print("\nℹ Dry run complete. No files were moved.", style="blue")
        else:
            self.console.print("\n✓ All files processed successfully!", style="bold green")
