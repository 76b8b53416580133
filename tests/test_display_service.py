"""Tests for DisplayService"""
import io

import pytest
from rich.console import Console

from git_recent.services.display_service import DisplayService
from tests.conftest import make_snapshot


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def display(output):
    return DisplayService(Console(file=output, width=120, color_system=None))


class TestDisplayService:
    """Test the --list table."""

    def test_empty_list(self, display, output):
        display.display_branch_table([])
        assert "No local branches found" in output.getvalue()

    def test_rows_in_given_order(self, display, output, sample_snapshots):
        display.display_branch_table(sample_snapshots)
        text = output.getvalue()
        assert text.index("main *") < text.index("feature-x") < text.index("feature-y")
        assert "ahead 1" in text

    def test_table_columns(self, display):
        table = display.build_branch_table([make_snapshot("main", 1_700_000_100)])
        assert [str(c.header) for c in table.columns] == ["Branch", "Date", "Last Change", "Upstream"]
        assert table.row_count == 1

    def test_missing_upstream_shown_as_dash(self, display, output):
        display.display_branch_table([make_snapshot("topic", 1_700_000_100)])
        row = next(line for line in output.getvalue().splitlines() if "topic" in line)
        cells = [cell.strip() for cell in row.split("│")]
        assert cells[-2] == "-"
