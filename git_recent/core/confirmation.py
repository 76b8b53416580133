"""Two-step confirmation for deleting a branch."""

from enum import Enum
from typing import Optional

from git_recent.core.keys import KeyCode, KeyEvent


class ConfirmationChoice(Enum):
    """Outcome of a key pressed while a delete is pending."""
    CONFIRM = "confirm"
    CANCEL = "cancel"
    SWALLOWED = "swallowed"


class ConfirmationFlow:
    """Idle, or waiting for a yes/no on deleting ``pending_target``."""

    def __init__(self):
        self.pending_target: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.pending_target is not None

    def request(self, branch_name: str) -> None:
        """Enter PendingDelete for ``branch_name``.

        Callers must have already rejected the current branch.
        """
        self.pending_target = branch_name

    def reset(self) -> None:
        self.pending_target = None

    @staticmethod
    def classify(event: KeyEvent) -> ConfirmationChoice:
        if event.is_char("y", "Y"):
            return ConfirmationChoice.CONFIRM
        if event.is_char("n", "N") or event.code in (KeyCode.ESCAPE, KeyCode.BACKSPACE):
            return ConfirmationChoice.CANCEL
        return ConfirmationChoice.SWALLOWED
