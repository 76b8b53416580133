"""Display service for the non-interactive branch listing"""
from datetime import datetime
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from git_recent.constants import COLUMNS, CURRENT_BRANCH_COLOR
from git_recent.formatters import format_branch_name, format_date, format_upstream_display
from git_recent.models.branch import BranchSnapshot
from git_recent.utils.logging import get_logger

logger = get_logger(__name__)


class DisplayService:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def build_branch_table(self, branches: List[BranchSnapshot]) -> Table:
        """Build a table of branches in the order given."""
        table = Table()

        for col in COLUMNS:
            table.add_column(col.label)

        for branch in branches:
            row_style = CURRENT_BRANCH_COLOR if branch.is_current else None
            # Match COLUMNS order: Branch, Date, Last Change, Upstream
            table.add_row(
                format_branch_name(branch.name, branch.is_current),
                format_date(datetime.fromtimestamp(branch.last_change_time)),
                branch.relative_age,
                format_upstream_display(branch.upstream_status),
                style=row_style,
            )

        return table

    def display_branch_table(self, branches: List[BranchSnapshot]) -> None:
        """Print the branch table, or a notice when there are no branches."""
        if not branches:
            self.console.print("[yellow]No local branches found[/yellow]")
            return

        logger.debug(f"Displaying {len(branches)} branches")
        self.console.print(self.build_branch_table(branches))
