"""Tests for the command-line interface."""

from datetime import datetime

import pytest
from click.testing import CliRunner

from studio_planner.cli import main
from studio_planner.commands.base import format_table
from studio_planner.commands.classes import describe_schedule
from studio_planner.settings import get_settings


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CLI runner against a fresh data directory."""
    monkeypatch.setenv("STUDIO_PLANNER_DATA_DIR", str(tmp_path))
    get_settings.cache_clear()
    yield CliRunner()
    get_settings.cache_clear()


class TestFormatTable:
    """Tests for table formatting."""

    def test_format_table(self):
        """Test columns are padded to the widest cell."""
        table = format_table(["ID", "Name"], [["1", "The Hundred"], ["22", "Elephant"]])
        lines = table.splitlines()

        assert lines[0] == "ID  Name"
        assert lines[1] == "--  -----------"
        assert lines[2] == "1   The Hundred"
        assert lines[3] == "22  Elephant"

    def test_format_table_empty(self):
        """Test no rows gives an empty string."""
        assert format_table(["ID"], []) == ""


class TestDescribeSchedule:
    """Tests for schedule summaries."""

    def test_one_off(self, one_off_class):
        """Test one-off summary."""
        assert describe_schedule(one_off_class) == "Mon 2024-03-04 at 09:00 (60 min)"

    def test_recurring(self, weekly_class):
        """Test recurring summary with an end date."""
        limited = weekly_class.apply_update({"recurrenceEndDate": "2024-06-30"})
        assert describe_schedule(limited) == (
            "Every Mon, Wed at 18:00 (55 min) from 2024-03-04 until 2024-06-30"
        )
        assert weekly_class.start == datetime(2024, 3, 4, 18, 0)


class TestCommands:
    """Tests for CLI commands against a temporary database."""

    def test_requires_init(self, runner):
        """Test commands refuse to run before init."""
        result = runner.invoke(main, ["movements", "list"])
        assert result.exit_code == 1
        assert "studio-planner init" in result.output

    def test_init_and_list(self, runner):
        """Test init seeds the library and list shows it."""
        result = runner.invoke(main, ["init"])
        assert result.exit_code == 0
        assert "10 movements" in result.output

        result = runner.invoke(main, ["init"])
        assert "already populated" in result.output

        result = runner.invoke(main, ["movements", "list", "--category", "Core"])
        assert result.exit_code == 0
        assert "Single Leg Stretch" in result.output
        assert "Footwork Series" not in result.output

    def test_unknown_ids(self, runner):
        """Test unknown ids print an error and exit 1."""
        runner.invoke(main, ["init"])
        for args in (
            ["movements", "show", "nope"],
            ["classes", "show", "nope"],
            ["classes", "copy", "nope"],
            ["templates", "from-class", "nope"],
            ["classes", "from-template", "nope"],
        ):
            result = runner.invoke(main, args)
            assert result.exit_code == 1, args
            assert "[ERROR]" in result.output

    def test_empty_calendar(self, runner):
        """Test the calendar with nothing scheduled."""
        runner.invoke(main, ["init"])
        result = runner.invoke(main, ["calendar", "week", "2024-03-06"])
        assert result.exit_code == 0
        assert "Week of Sun 2024-03-03" in result.output
        assert "No classes scheduled" in result.output

    def test_bad_date(self, runner):
        """Test invalid dates are reported as errors."""
        runner.invoke(main, ["init"])
        result = runner.invoke(main, ["calendar", "week", "someday"])
        assert result.exit_code == 1
        assert "[ERROR]" in result.output
