"""Main CLI interface for FileSorter using Click."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.table import Table

from .. import __version__
from ..classifier import Category, FileClassifier, destination_for
from ..config import ConfigManager, FileSorterConfig
from ..core import Organizer
from ..errors import WorkingDirectoryError
from ..utils.logging import configure_logging, get_console, get_logger

console = get_console()
logger = get_logger(__name__)


def load_config(ctx: click.Context) -> FileSorterConfig:
    """Load configuration for a command and apply its logging settings."""
    obj = ctx.ensure_object(dict)
    if "config" not in obj:
        manager = ConfigManager(obj.get("config_path"))
        config = manager.load(create_if_missing=True)

        level = "DEBUG" if obj.get("verbose") else None
        configure_logging(config.logging, level=level)
        obj["config"] = config
        obj["config_manager"] = manager
    return obj["config"]


def run_organizer(ctx: click.Context, path: Path, dry_run: bool):
    """Run the organizer on ``path`` and exit with its status."""
    try:
        config = load_config(ctx)
        console.rule(f"[bold magenta]🚀 FileSorter v{__version__}[/bold magenta]", style="magenta")
        console.print(f"[cyan]Working directory:[/cyan] {path.resolve()}")
        if dry_run:
            console.print("[yellow]DRY RUN - no files will be moved[/yellow]")

        summary = Organizer(config, dry_run=dry_run, console=console).run(path)

    except KeyboardInterrupt:
        console.print("\n[bold red]✗ Interrupted by user[/bold red]")
        sys.exit(1)
    except (WorkingDirectoryError, ValueError, FileNotFoundError) as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        logger.debug("Organize command error", exc_info=True)
        sys.exit(1)

    sys.exit(summary.exit_code)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="FileSorter")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config: Optional[Path], verbose: bool):
    """
    FileSorter - sort a flat directory into category folders.

    Without a subcommand, organizes the current working directory.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose

    if ctx.invoked_subcommand is None:
        run_organizer(ctx, Path("."), dry_run=False)


@cli.command()
@click.argument(
    "path",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
)
@click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    help="Show what would be moved without actually moving anything",
)
@click.pass_context
def organize(ctx, path: Path, dry_run: bool):
    """
    Organize files in PATH (default: current directory).

    \b
    Files are moved by extension:
        audio      -> audio/audio_<name>
        html/htm   -> reports/email_<name> (< 10 KB) or reports/website_<name>
        documents  -> documents/<name>
        research   -> research/<name>

    Existing destinations are renamed to <dest>.backup.<epoch-seconds> first.
    """
    run_organizer(ctx, path, dry_run=dry_run)


@cli.command()
@click.argument("name")
@click.option("--size", type=click.IntRange(min=0), default=0, help="File size in bytes")
@click.pass_context
def classify(ctx, name: str, size: int):
    """Show the category and destination a file NAME would get."""
    try:
        config = load_config(ctx)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    category = FileClassifier(config.rules).classify(name, size)
    console.print(f"[cyan]Category:[/cyan] {category.value}")
    if category is Category.UNCLASSIFIED:
        console.print("[cyan]Destination:[/cyan] (left in place)")
    else:
        console.print(f"[cyan]Destination:[/cyan] {destination_for(category, name).as_posix()}")


@cli.group(name="config")
def config_group():
    """Manage FileSorter configuration."""
    pass


@config_group.command(name="show")
@click.pass_context
def config_show(ctx):
    """Display current configuration."""
    try:
        config = load_config(ctx)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    manager: ConfigManager = ctx.obj["config_manager"]
    rules = config.rules

    table = Table(title="Classification Rules", show_header=True, header_style="bold cyan")
    table.add_column("Group", style="cyan")
    table.add_column("Extensions", style="green")
    table.add_row("Audio", ", ".join(rules.audio_extensions))
    table.add_row("Reports", ", ".join(rules.html_extensions))
    table.add_row("Documents", ", ".join(rules.document_extensions))
    table.add_row("Research", ", ".join(rules.research_extensions))
    console.print(table)

    console.print(f"\n[bold]Email report threshold:[/bold] {rules.email_size_threshold} bytes")
    console.print(f"[bold]Index files:[/bold] {', '.join(rules.index_files)}")
    console.print(f"[bold]Directories:[/bold] {', '.join(config.layout.directories)}")
    console.print(f"[bold]Log level:[/bold] {config.logging.level}")
    console.print(
        f"[bold]File logging:[/bold] {'[green]Enabled[/green]' if config.logging.file_enabled else '[yellow]Disabled[/yellow]'}"
    )
    console.print(f"\n[dim]Config file: {manager.config_path or '(built-in defaults)'}[/dim]")


@config_group.command(name="init")
@click.option(
    "--path",
    "save_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to write the configuration (default: ~/.config/filesorter/config.yaml)",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing file")
def config_init(save_path: Optional[Path], force: bool):
    """Write a default configuration file."""
    manager = ConfigManager()
    target = save_path or ConfigManager.DEFAULT_CONFIG_LOCATIONS[0]

    if target.exists() and not force:
        console.print(f"[yellow]⚠ Config already exists:[/yellow] {target} (use --force)")
        sys.exit(1)

    try:
        written = manager.save(FileSorterConfig(), target)
    except OSError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    console.print(f"✓ Created default configuration: [green]{written}[/green]")


if __name__ == "__main__":
    cli()
