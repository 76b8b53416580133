"""Interactive branch selection state for git-recent.

- keys: terminal-independent key events
- selectable_list: recency ordering, filtered view and cursor
- filter_state: filter query and editing mode
- confirmation: delete confirmation
- status: status line
- controller: key dispatch tying the above together
"""

from .keys import KeyCode, KeyEvent
from .selectable_list import SelectableList
from .filter_state import FilterState
from .confirmation import ConfirmationFlow
from .status import StatusMessage
from .controller import (
    BranchController,
    BranchRepository,
    ControllerView,
    LoopAction,
    Mode,
    Renderer,
    RunOutcome,
)

__all__ = [
    "BranchController",
    "BranchRepository",
    "ConfirmationFlow",
    "ControllerView",
    "FilterState",
    "KeyCode",
    "KeyEvent",
    "LoopAction",
    "Mode",
    "Renderer",
    "RunOutcome",
    "SelectableList",
    "StatusMessage",
]
