"""Widgets for the git-recent branch switcher."""

from rich.text import Text
from textual.widgets import DataTable, Static

from git_recent.constants import STATUS_ERROR_COLOR, SYMBOL_FILTER_CURSOR, SYMBOL_FILTER_PROMPT
from git_recent.formatters import format_counts


def format_filter_line(query: str, editing: bool) -> str:
    """Filter prompt while editing, the committed filter otherwise."""
    if editing:
        return f"{SYMBOL_FILTER_PROMPT}{query}{SYMBOL_FILTER_CURSOR}"
    if query:
        return f"filter: {query}  (backspace to edit)"
    return ""


def format_status_line(shown: int, total: int, message: str = "", is_error: bool = False) -> Text:
    """Branch counter followed by the current status message."""
    line = Text(format_counts(shown, total), style="bold")
    if message:
        line.append("  ")
        line.append(message, style=STATUS_ERROR_COLOR if is_error else "")
    return line


class BranchTable(DataTable, can_focus=False):
    """Branch table that never takes focus, so every key reaches the app."""


class FilterBar(Static):
    """One line showing the filter being typed, or the one in effect."""

    DEFAULT_CSS = """
    FilterBar {
        height: 1;
        padding: 0 1;
    }
    """

    def show_filter(self, query: str, editing: bool) -> None:
        self.update(format_filter_line(query, editing))


class StatusBar(Static):
    """Counter and status message docked at the bottom of the screen."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: auto;
        background: $panel;
        padding: 0 1;
    }
    """

    def show_status(self, shown: int, total: int, message: str, is_error: bool) -> None:
        self.update(format_status_line(shown, total, message, is_error))
