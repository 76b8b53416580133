"""Branch name and upstream formatting utilities."""

from typing import Optional

from git_recent.constants import SYMBOL_CURRENT_BRANCH, UPSTREAM_UP_TO_DATE


def format_branch_name(name: str, is_current: bool = False) -> str:
    """
    Format branch name with optional current branch indicator.

    Args:
        name: Branch name
        is_current: Whether this is the current branch

    Returns:
        Formatted branch name
    """
    return name + (SYMBOL_CURRENT_BRANCH if is_current else "")


def format_upstream_status(ahead: int, behind: int) -> str:
    """
    Summarize ahead/behind counts against the upstream branch.

    Example:
        "up to date", "ahead 2", "behind 1", "ahead 2, behind 1"
    """
    parts = []
    if ahead:
        parts.append(f"ahead {ahead}")
    if behind:
        parts.append(f"behind {behind}")
    return ", ".join(parts) if parts else UPSTREAM_UP_TO_DATE


def format_upstream_display(upstream_status: Optional[str]) -> str:
    """Display text for an optional upstream summary."""
    return upstream_status if upstream_status is not None else "-"


def format_counts(shown: int, total: int) -> str:
    """Format the shown/total branch counter."""
    return f"{shown}/{total}"
