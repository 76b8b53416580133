"""Interactive controller: turns key events into navigation, filtering, switch and delete."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Sequence

from git_recent.constants import DEFAULT_PAGE_SIZE
from git_recent.core.confirmation import ConfirmationChoice, ConfirmationFlow
from git_recent.core.filter_state import FilterEdit, FilterState
from git_recent.core.keys import KeyCode, KeyEvent
from git_recent.core.selectable_list import SelectableList
from git_recent.core.status import StatusMessage
from git_recent.exceptions import GitRecentError
from git_recent.models.branch import BranchSnapshot
from git_recent.utils.logging import get_logger

logger = get_logger(__name__)


class BranchRepository(Protocol):
    """What the controller needs from the repository."""

    def list_branches(self) -> List[BranchSnapshot]: ...

    def switch(self, name: str) -> None: ...

    def delete(self, name: str) -> None: ...


class Mode(Enum):
    """Input modes, in priority order."""
    CONFIRMING_DELETE = "confirming_delete"
    FILTER_EDITING = "filter_editing"
    NORMAL = "normal"


class LoopAction(Enum):
    CONTINUE = "continue"
    EXIT = "exit"


@dataclass(frozen=True)
class RunOutcome:
    """How the run ended. ``switched_to`` is None when the user quit."""
    switched_to: Optional[str] = None


@dataclass(frozen=True)
class ControllerView:
    """Everything a renderer needs to draw one frame."""
    rows: Sequence[BranchSnapshot]
    cursor: Optional[int]
    total: int
    query: str
    editing: bool
    pending_delete: Optional[str]
    status: str
    status_is_error: bool
    mode: Mode


class Renderer(Protocol):
    def render_view(self, view: ControllerView) -> None: ...


class BranchController:
    """Owns the list, filter, confirmation and status state for one run.

    Keys are routed by mode: a pending delete takes every key, then filter
    editing, then normal navigation. Every handled key and every tick ends
    in exactly one redraw.
    """

    def __init__(
        self,
        repository: BranchRepository,
        snapshots: Sequence[BranchSnapshot] = (),
        renderer: Optional[Renderer] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.repository = repository
        self.renderer = renderer
        self.page_size = page_size
        self.filter = FilterState()
        self.branches = SelectableList(snapshots, self.filter.query)
        self.confirmation = ConfirmationFlow()
        self.status = StatusMessage()
        self.outcome: Optional[RunOutcome] = None

    @property
    def mode(self) -> Mode:
        if self.confirmation.is_pending:
            return Mode.CONFIRMING_DELETE
        if self.filter.editing:
            return Mode.FILTER_EDITING
        return Mode.NORMAL

    def view(self) -> ControllerView:
        return ControllerView(
            rows=tuple(self.branches.filtered_view),
            cursor=self.branches.cursor,
            total=self.branches.total,
            query=self.filter.query,
            editing=self.filter.editing,
            pending_delete=self.confirmation.pending_target,
            status=self.status.text,
            status_is_error=self.status.is_error,
            mode=self.mode,
        )

    def redraw(self) -> None:
        if self.renderer is not None:
            self.renderer.render_view(self.view())

    def tick(self) -> None:
        """The input wait expired: redraw so relative ages stay current."""
        self.redraw()

    def handle_key(self, event: KeyEvent) -> LoopAction:
        """Process one key event and redraw."""
        mode = self.mode
        if mode is Mode.CONFIRMING_DELETE:
            action = self._handle_confirmation_key(event)
        elif mode is Mode.FILTER_EDITING:
            action = self._handle_filter_key(event)
        else:
            action = self._handle_normal_key(event)
        self.redraw()
        return action

    def _handle_confirmation_key(self, event: KeyEvent) -> LoopAction:
        choice = ConfirmationFlow.classify(event)
        if choice is ConfirmationChoice.CONFIRM:
            self.confirm_delete()
        elif choice is ConfirmationChoice.CANCEL:
            logger.debug(f"Delete of {self.confirmation.pending_target} cancelled")
            self.confirmation.reset()
            self.status.clear()
        return LoopAction.CONTINUE

    def _handle_filter_key(self, event: KeyEvent) -> LoopAction:
        if self.filter.handle_key(event) is FilterEdit.QUERY_CHANGED:
            self.branches.recompute_filtered(self.filter.query)
        return LoopAction.CONTINUE

    def _handle_normal_key(self, event: KeyEvent) -> LoopAction:
        if event.code is KeyCode.ESCAPE or event.is_char("q", "Q"):
            self.outcome = RunOutcome()
            return LoopAction.EXIT
        if event.code is KeyCode.ENTER:
            return self.switch_selected()
        if event.is_char("/"):
            self.filter.start_editing()
        elif event.is_char("D"):
            self.request_delete()
        elif event.code is KeyCode.BACKSPACE:
            # Recomputes even on an empty query, which reselects the first row
            self.filter.pop()
            self.branches.recompute_filtered(self.filter.query)
        elif event.code is KeyCode.DOWN or event.is_char("j"):
            self.branches.next()
        elif event.code is KeyCode.UP or event.is_char("k"):
            self.branches.previous()
        elif event.code is KeyCode.PAGE_DOWN:
            self.branches.page_down(self.page_size)
        elif event.code is KeyCode.PAGE_UP:
            self.branches.page_up(self.page_size)
        elif event.code is KeyCode.HOME or event.is_char("g"):
            self.branches.go_to_first()
        elif event.code is KeyCode.END or event.is_char("G"):
            self.branches.go_to_last()
        elif event.code is KeyCode.LEFT:
            self.branches.unselect()
        return LoopAction.CONTINUE

    def switch_selected(self) -> LoopAction:
        """Check out the selected branch. EXIT only when the switch succeeded."""
        selected = self.branches.selected()
        if selected is None:
            self.status.set("no selection, nothing to do!")
            return LoopAction.CONTINUE

        if selected.is_current:
            self.status.set(f"already on branch '{selected.name}'")
            return LoopAction.CONTINUE

        self.status.set(f"switching to branch: {selected.name}")
        self.redraw()
        try:
            self.repository.switch(selected.name)
        except GitRecentError as e:
            logger.warning(f"Switch to {selected.name} failed: {e}")
            self.status.set(f"couldn't change branch: {e}", is_error=True)
            return LoopAction.CONTINUE

        logger.info(f"Switched to {selected.name}")
        self.outcome = RunOutcome(switched_to=selected.name)
        return LoopAction.EXIT

    def request_delete(self) -> None:
        """Ask for confirmation before deleting the selected branch."""
        selected = self.branches.selected()
        if selected is None:
            self.status.set("no selection, nothing to delete!")
            return

        if selected.is_current:
            self.status.set(f"can't delete '{selected.name}': it is the current branch")
            return

        self.confirmation.request(selected.name)
        self.status.set(
            f"confirm deleting branch {selected.name}? press Y to delete or N to cancel"
        )

    def confirm_delete(self) -> None:
        """Delete the pending branch, then refresh the list from the repository."""
        branch_name = self.confirmation.pending_target
        self.confirmation.reset()
        if branch_name is None:
            return

        previous_cursor = self.branches.cursor
        try:
            self.repository.delete(branch_name)
        except GitRecentError as e:
            logger.warning(f"Delete of {branch_name} failed: {e}")
            self.status.set(f"couldn't delete branch {branch_name}: {e}", is_error=True)
            return

        logger.info(f"Deleted {branch_name}")
        try:
            snapshots = self.repository.list_branches()
        except GitRecentError as e:
            logger.error(f"Refresh after deleting {branch_name} failed: {e}")
            self.status.set(
                f"deleted branch but failed to refresh list: {e}", is_error=True
            )
            return

        self.branches.set_full_set(snapshots, self.filter.query)
        if previous_cursor is not None:
            self.branches.select_clamped(previous_cursor)
        self.status.set(f"deleted branch: {branch_name}")
