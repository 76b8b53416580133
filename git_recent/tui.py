"""Interactive TUI for git-recent using Textual."""

from datetime import datetime
from typing import Optional

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Header, Static

from .__version__ import __version__
from .constants import (
    AHEAD_COLOR,
    BEHIND_COLOR,
    COLUMNS,
    CURRENT_BRANCH_COLOR,
    KEY_HELP_TEXT,
    UPSTREAM_UP_TO_DATE,
)
from .core import BranchController, ControllerView, KeyEvent, LoopAction, RunOutcome
from .formatters import (
    format_branch_name,
    format_date,
    format_relative_age,
    format_upstream_display,
)
from .models.branch import BranchSnapshot
from .ui.widgets import BranchTable, FilterBar, StatusBar
from .utils.logging import get_logger

logger = get_logger(__name__)


def upstream_style(upstream_status: Optional[str]) -> Optional[str]:
    """Color for an upstream summary: behind wins over ahead."""
    if not upstream_status or upstream_status == UPSTREAM_UP_TO_DATE:
        return None
    if "behind" in upstream_status:
        return BEHIND_COLOR
    return AHEAD_COLOR


class BranchSwitcherApp(App[RunOutcome]):
    """Branch picker. Draws the controller's view and feeds it keys and ticks.

    Textual owns the terminal: raw mode and the alternate screen are entered
    once when the app starts and restored on every way out, including
    unhandled exceptions.
    """

    ENABLE_COMMAND_PALETTE = False
    TITLE = "git-recent"
    SUB_TITLE = f"v{__version__}"

    CSS = """
    Screen {
        background: $surface;
    }

    BranchTable {
        height: 1fr;
    }

    #help-bar {
        dock: bottom;
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    def __init__(self, controller: BranchController, tick_interval: float = 0.25):
        super().__init__()
        self.controller = controller
        self.tick_interval = tick_interval
        controller.renderer = self

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header(icon="")
        yield BranchTable(id="branch-table", cursor_type="row", zebra_stripes=True)
        yield FilterBar()
        yield Static(KEY_HELP_TEXT, id="help-bar")
        yield StatusBar()

    def on_mount(self) -> None:
        """Set up the table and start the tick timer."""
        table = self.query_one(BranchTable)
        for col in COLUMNS:
            table.add_column(col.label, width=None, key=col.key)

        self.set_interval(self.tick_interval, self.controller.tick)
        self.controller.redraw()

    def on_key(self, event: events.Key) -> None:
        """Route every key through the controller."""
        event.stop()
        event.prevent_default()

        key_event = KeyEvent.from_textual(event.key, event.character, event.is_printable)
        logger.debug(f"Key {event.key!r} -> {key_event}")
        # Git calls run synchronously here, so a frame drawn mid-handler (the
        # "switching to" status) is only painted if the handler returns first
        if self.controller.handle_key(key_event) is LoopAction.EXIT:
            self.exit(self.controller.outcome)

    def _build_row(self, branch: BranchSnapshot) -> tuple:
        name_style = CURRENT_BRANCH_COLOR if branch.is_current else None
        # Match COLUMNS order: Branch, Date, Last Change, Upstream
        return (
            Text(format_branch_name(branch.name, branch.is_current), style=name_style or ""),
            format_date(datetime.fromtimestamp(branch.last_change_time)),
            # Recomputed on every draw so ticks keep ages current
            format_relative_age(branch.last_change_time),
            Text(
                format_upstream_display(branch.upstream_status),
                style=upstream_style(branch.upstream_status) or "",
            ),
        )

    def render_view(self, view: ControllerView) -> None:
        """Draw one frame of the controller's state."""
        table = self.query_one(BranchTable)
        table.clear()
        for branch in view.rows:
            table.add_row(*self._build_row(branch), key=branch.name)

        table.show_cursor = view.cursor is not None
        if view.cursor is not None:
            table.move_cursor(row=view.cursor)

        self.query_one(FilterBar).show_filter(view.query, view.editing)
        self.query_one(StatusBar).show_status(
            len(view.rows), view.total, view.status, view.status_is_error
        )
