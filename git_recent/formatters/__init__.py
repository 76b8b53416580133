"""Formatting utilities for git-recent.

This package provides formatting functions for displaying branch information:
- date: Date and relative age formatting
- branch: Branch name and upstream formatting
"""

# Date formatters
from .date import format_date, format_relative_age

# Branch formatters
from .branch import (
    format_branch_name,
    format_counts,
    format_upstream_display,
    format_upstream_status,
)

__all__ = [
    # Date
    "format_date",
    "format_relative_age",
    # Branch
    "format_branch_name",
    "format_counts",
    "format_upstream_display",
    "format_upstream_status",
]
