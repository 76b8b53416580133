"""Shared constants for git-recent."""

from dataclasses import dataclass
from typing import List


DEFAULT_TICK_RATE_MS = 250
DEFAULT_PAGE_SIZE = 10


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


# Unified column definitions for both the --list table and the TUI
COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("branch", "Branch", 40),
    ColumnDefinition("date", "Date", 10),
    ColumnDefinition("age", "Last Change", 18),
    ColumnDefinition("upstream", "Upstream", 20),
]


# Symbol constants
SYMBOL_CURRENT_BRANCH = " *"
SYMBOL_FILTER_PROMPT = "/"
SYMBOL_FILTER_CURSOR = "█"


# Upstream summaries
UPSTREAM_UP_TO_DATE = "up to date"


# Colors (Rich color names, shared by CLI and TUI)
CURRENT_BRANCH_COLOR = "green"
AHEAD_COLOR = "cyan"
BEHIND_COLOR = "yellow"
STATUS_ERROR_COLOR = "red"


# Help text shown in the footer area
KEY_HELP_TEXT = (
    "enter: switch  /: filter  D: delete  j/k: move  "
    "g/G: first/last  pgup/pgdn: page  ←: deselect  q: quit"
)
