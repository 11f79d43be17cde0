"""Tests for the organizer orchestrator."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from filesorter.classifier import Category, ExtensionGroup
from filesorter.config.models import FileSorterConfig, LayoutSettings
from filesorter.core import Organizer, RunSummary
from filesorter.errors import DirectoryCreateFailed, WorkingDirectoryError
from filesorter.mover import MoveResult, MoveStatus, SafeMover

FIXED_TIME = 1700000000

CATEGORY_DIRECTORIES = ["audio", "reports", "documents", "research", "assets", "backups"]


def quiet_console() -> Console:
    return Console(file=io.StringIO(), width=120)


class VanishingMover(SafeMover):
    """SafeMover whose sources disappear just before the move."""

    def move(self, source, destination):
        Path(source).unlink()
        return super().move(source, destination)


@pytest.fixture
def organizer():
    """Create an Organizer with a fixed backup clock."""
    return Organizer(mover=SafeMover(clock=lambda: FIXED_TIME), console=quiet_console())


def write_bytes(path: Path, size: int) -> Path:
    path.write_bytes(b"x" * size)
    return path


class TestRunSummary:
    """Tests for RunSummary."""

    def test_success_rate_empty(self, tmp_path):
        """Test that an empty run has a 0% success rate."""
        assert RunSummary(working_directory=tmp_path).success_rate == 0

    def test_success_rate_rounds_down(self, tmp_path):
        """Test integer percentage."""
        summary = RunSummary(working_directory=tmp_path, total_scanned=3, processed=2)
        assert summary.success_rate == 66

    def test_exit_code(self, tmp_path):
        """Test exit code follows the error count."""
        assert RunSummary(working_directory=tmp_path).exit_code == 0
        assert RunSummary(working_directory=tmp_path, errors=1).exit_code == 1

    def test_report_split_counts_only_moved_or_planned(self, tmp_path):
        """Test that failed and skipped reports are left out of the email/website split."""
        summary = RunSummary(working_directory=tmp_path)
        source, dest = tmp_path / "a.html", tmp_path / "reports" / "email_a.html"

        summary.record(Category.REPORTS_EMAIL, MoveResult(source, dest, MoveStatus.MOVED))
        summary.record(Category.REPORTS_EMAIL, MoveResult(source, dest, MoveStatus.FAILED))
        summary.record(Category.REPORTS_WEBSITE, MoveResult(source, dest, MoveStatus.SKIPPED))
        summary.record(Category.REPORTS_WEBSITE, MoveResult(source, dest, MoveStatus.PLANNED))
        summary.record(Category.AUDIO, MoveResult(source, dest, MoveStatus.MOVED))

        reports = summary.groups[ExtensionGroup.REPORTS]
        assert (reports.email, reports.website) == (1, 1)
        assert (reports.processed, reports.failed, reports.skipped) == (1, 1, 1)
        assert summary.groups[ExtensionGroup.AUDIO].email == 0


class TestCreateDirectoryStructure:
    """Tests for category directory creation."""

    def test_creates_all_directories(self, organizer, tmp_path):
        """Test that all six directories are created."""
        failures = organizer.create_directory_structure(tmp_path)

        assert failures == []
        for name in CATEGORY_DIRECTORIES:
            assert (tmp_path / name).is_dir()

    def test_existing_directories_are_fine(self, organizer, tmp_path):
        """Test that creation is idempotent."""
        (tmp_path / "audio").mkdir()
        organizer.create_directory_structure(tmp_path)

        assert organizer.create_directory_structure(tmp_path) == []

    def test_blocked_directory_is_reported(self, organizer, tmp_path):
        """Test that a file in the way yields DirectoryCreateFailed."""
        (tmp_path / "assets").write_text("not a directory")

        failures = organizer.create_directory_structure(tmp_path)

        assert len(failures) == 1
        assert isinstance(failures[0], DirectoryCreateFailed)
        assert failures[0].path == tmp_path / "assets"
        assert (tmp_path / "audio").is_dir()


class TestOrganizerRun:
    """Tests for Organizer.run."""

    @pytest.mark.parametrize("ext", ["mp3", "wav", "m4a", "aac", "flac", "ogg", "wma"])
    def test_audio_files_are_prefixed(self, organizer, tmp_path, ext):
        """Test that name.E ends at audio/audio_name.E."""
        (tmp_path / f"name.{ext}").write_text("audio")

        summary = organizer.run(tmp_path)

        assert (tmp_path / "audio" / f"audio_name.{ext}").exists()
        assert not (tmp_path / f"name.{ext}").exists()
        assert summary.processed == 1

    def test_small_html_becomes_email_report(self, organizer, tmp_path):
        """Test that a 5000 byte report is an email report."""
        write_bytes(tmp_path / "report.html", 5000)

        summary = organizer.run(tmp_path)

        assert (tmp_path / "reports" / "email_report.html").exists()
        assert summary.groups[ExtensionGroup.REPORTS].email == 1

    def test_large_html_becomes_website_report(self, organizer, tmp_path):
        """Test that a 20000 byte report is a website report."""
        write_bytes(tmp_path / "report.html", 20000)

        summary = organizer.run(tmp_path)

        assert (tmp_path / "reports" / "website_report.html").exists()
        assert summary.groups[ExtensionGroup.REPORTS].website == 1

    def test_html_boundary_is_website(self, organizer, tmp_path):
        """Test that exactly 10240 bytes is a website report."""
        write_bytes(tmp_path / "report.html", 10240)

        organizer.run(tmp_path)

        assert (tmp_path / "reports" / "website_report.html").exists()

    @pytest.mark.parametrize("name", ["index.html", "enhanced-index.html"])
    @pytest.mark.parametrize("size", [100, 50000])
    def test_index_files_stay_in_place(self, organizer, tmp_path, name, size):
        """Test that index files are never moved."""
        write_bytes(tmp_path / name, size)

        summary = organizer.run(tmp_path)

        assert (tmp_path / name).exists()
        assert summary.processed == 0
        assert list((tmp_path / "reports").iterdir()) == []

    def test_existing_destination_is_backed_up(self, organizer, tmp_path):
        """Test that no data is lost when a destination is occupied."""
        (tmp_path / "documents").mkdir()
        (tmp_path / "documents" / "report.pdf").write_text("old")
        (tmp_path / "report.pdf").write_text("new")

        summary = organizer.run(tmp_path)

        backup = tmp_path / "documents" / f"report.pdf.backup.{FIXED_TIME}"
        assert backup.read_text() == "old"
        assert (tmp_path / "documents" / "report.pdf").read_text() == "new"
        assert summary.results[0].backup_path == backup
        assert summary.exit_code == 0

    def test_second_run_is_idempotent(self, organizer, tmp_path):
        """Test that re-running on an organized tree moves nothing."""
        (tmp_path / "song.mp3").write_text("a")
        (tmp_path / "paper.pdf").write_text("b")
        (tmp_path / "chart.png").write_text("c")

        first = organizer.run(tmp_path)
        second = organizer.run(tmp_path)

        assert first.processed == 3
        assert second.total_scanned == 0
        assert second.processed == 0
        assert second.exit_code == 0
        assert (tmp_path / "audio" / "audio_song.mp3").exists()

    def test_unrecognized_file_left_in_place(self, organizer, tmp_path):
        """Test that data.xyz is not moved or counted as processed."""
        (tmp_path / "data.xyz").write_text("?")

        summary = organizer.run(tmp_path)

        assert (tmp_path / "data.xyz").exists()
        assert summary.processed == 0
        assert summary.total_scanned == 0
        assert summary.unclassified == 1

    def test_mixed_directory(self, organizer, tmp_path):
        """Test a directory with every kind of file."""
        (tmp_path / "Song.MP3").write_text("a")
        write_bytes(tmp_path / "small.htm", 10)
        write_bytes(tmp_path / "big.html", 30000)
        (tmp_path / "notes.md").write_text("# notes")
        (tmp_path / "data.json").write_text("{}")
        (tmp_path / "index.html").write_text("<html></html>")
        (tmp_path / "script.sh").write_text("echo")

        summary = organizer.run(tmp_path)

        assert summary.total_scanned == 5
        assert summary.processed == 5
        assert summary.errors == 0
        assert summary.unclassified == 2
        assert summary.success_rate == 100
        assert (tmp_path / "audio" / "audio_Song.MP3").exists()
        assert (tmp_path / "reports" / "email_small.htm").exists()
        assert (tmp_path / "reports" / "website_big.html").exists()
        assert (tmp_path / "documents" / "notes.md").exists()
        assert (tmp_path / "research" / "data.json").exists()
        assert summary.directory_contents == {
            "audio": 1,
            "reports": 2,
            "documents": 1,
            "research": 1,
            "assets": 0,
        }

    def test_processing_order(self, organizer, tmp_path):
        """Test that groups are processed audio, reports, documents, research."""
        (tmp_path / "a.png").write_text("r")
        (tmp_path / "b.txt").write_text("d")
        (tmp_path / "c.html").write_text("h")
        (tmp_path / "d.wav").write_text("a")

        summary = organizer.run(tmp_path)

        names = [r.source_path.name for r in summary.results]
        assert names == ["d.wav", "c.html", "b.txt", "a.png"]

    def test_subdirectory_files_untouched(self, organizer, tmp_path):
        """Test that only immediate children are organized."""
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "deep.mp3").write_text("a")

        summary = organizer.run(tmp_path)

        assert (nested / "deep.mp3").exists()
        assert summary.total_scanned == 0

    def test_move_failure_counts_error_and_continues(self, organizer, tmp_path):
        """Test that a blocked category directory fails its moves only."""
        (tmp_path / "documents").write_text("not a directory")
        (tmp_path / "paper.pdf").write_text("d")
        (tmp_path / "song.mp3").write_text("a")

        summary = organizer.run(tmp_path)

        assert len(summary.directory_errors) == 1
        assert summary.errors == 1
        assert summary.processed == 1
        assert summary.exit_code == 1
        assert summary.groups[ExtensionGroup.DOCUMENTS].failed == 1
        assert (tmp_path / "paper.pdf").exists()
        assert (tmp_path / "audio" / "audio_song.mp3").exists()

    def test_failed_report_not_counted_in_split(self, organizer, tmp_path):
        """Test that a report that could not be moved is not counted as email or website."""
        (tmp_path / "reports").write_text("not a directory")
        write_bytes(tmp_path / "note.html", 100)

        summary = organizer.run(tmp_path)

        reports = summary.groups[ExtensionGroup.REPORTS]
        assert reports.failed == 1
        assert (reports.email, reports.website) == (0, 0)
        assert (tmp_path / "note.html").exists()

    def test_vanished_source_is_skipped_not_error(self, tmp_path):
        """Test that a source disappearing mid-run is a warning only."""
        (tmp_path / "song.mp3").write_text("a")
        organizer = Organizer(mover=VanishingMover(), console=quiet_console())

        summary = organizer.run(tmp_path)

        assert summary.skipped == 1
        assert summary.errors == 0
        assert summary.exit_code == 0
        assert summary.results[0].status == MoveStatus.SKIPPED

    def test_dry_run_changes_nothing(self, tmp_path):
        """Test that a dry run plans moves without creating anything."""
        (tmp_path / "song.mp3").write_text("a")
        write_bytes(tmp_path / "report.html", 20000)
        organizer = Organizer(dry_run=True, console=quiet_console())

        summary = organizer.run(tmp_path)

        assert (tmp_path / "song.mp3").exists()
        assert (tmp_path / "report.html").exists()
        assert not (tmp_path / "audio").exists()
        assert summary.processed == 0
        assert summary.total_scanned == 2
        assert summary.groups[ExtensionGroup.REPORTS].planned == 1
        assert summary.groups[ExtensionGroup.REPORTS].website == 1
        assert [r.status for r in summary.results] == [MoveStatus.PLANNED, MoveStatus.PLANNED]

    def test_missing_working_directory(self, organizer, tmp_path):
        """Test that an unreadable working directory is fatal."""
        with pytest.raises(WorkingDirectoryError):
            organizer.run(tmp_path / "missing")
        assert not (tmp_path / "missing").exists()

    def test_custom_layout(self, tmp_path):
        """Test that configured directories are created."""
        config = FileSorterConfig(
            layout=LayoutSettings(directories=["audio", "extra"], report_directories=["audio"])
        )
        organizer = Organizer(config, console=quiet_console())

        summary = organizer.run(tmp_path)

        assert (tmp_path / "extra").is_dir()
        assert not (tmp_path / "backups").exists()
        assert summary.directory_contents == {"audio": 0}


class TestPlan:
    """Tests for Organizer.plan."""

    def test_plan_groups_files(self, organizer, tmp_path):
        """Test that plan classifies without moving."""
        (tmp_path / "a.mp3").write_text("a")
        (tmp_path / "b.xyz").write_text("b")

        planned, unclassified = organizer.plan(tmp_path)

        assert [(e.name, c) for e, c in planned[ExtensionGroup.AUDIO]] == [
            ("a.mp3", Category.AUDIO)
        ]
        assert [e.name for e in unclassified] == ["b.xyz"]
        assert (tmp_path / "a.mp3").exists()
