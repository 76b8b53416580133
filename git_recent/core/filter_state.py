"""Filter query and filter-editing mode."""

from enum import Enum

from git_recent.core.keys import KeyCode, KeyEvent


class FilterEdit(Enum):
    """What a key did to the filter while editing."""
    IGNORED = "ignored"
    QUERY_CHANGED = "query_changed"
    COMMITTED = "committed"
    CLEARED = "cleared"  # backspace on an empty query left editing mode


class FilterState:
    """The text filter applied to the branch list.

    ``query`` survives leaving editing mode; only backspacing it away
    removes it.
    """

    def __init__(self, query: str = ""):
        self.query = query
        self.editing = False

    def start_editing(self) -> None:
        self.editing = True

    def stop_editing(self) -> None:
        self.editing = False

    def append(self, char: str) -> None:
        self.query += char

    def pop(self) -> bool:
        """Remove the last character. Returns False if the query was already empty."""
        if not self.query:
            return False
        self.query = self.query[:-1]
        return True

    def handle_key(self, event: KeyEvent) -> FilterEdit:
        """Apply a key pressed while editing.

        The caller recomputes the filtered view when QUERY_CHANGED is returned.
        """
        if event.code in (KeyCode.ENTER, KeyCode.ESCAPE):
            self.stop_editing()
            return FilterEdit.COMMITTED

        if event.code is KeyCode.BACKSPACE:
            if self.pop():
                return FilterEdit.QUERY_CHANGED
            self.stop_editing()
            return FilterEdit.CLEARED

        if event.code is KeyCode.CHAR and event.char:
            self.append(event.char)
            return FilterEdit.QUERY_CHANGED

        return FilterEdit.IGNORED
