"""Recency-ordered branch list with a filtered view and a selection cursor."""

from typing import Iterable, List, Optional

from git_recent.models.branch import BranchSnapshot


def matches_query(snapshot: BranchSnapshot, query: str) -> bool:
    """A snapshot matches if the query is empty or is a case-insensitive substring of its name."""
    if not query:
        return True
    return query.lower() in snapshot.name.lower()


def sort_by_recency(snapshots: Iterable[BranchSnapshot]) -> List[BranchSnapshot]:
    """Most recently changed first; equal timestamps keep enumeration order."""
    # sorted() is stable, and reverse=True preserves the order of equal keys
    return sorted(snapshots, key=lambda s: s.last_change_time, reverse=True)


class SelectableList:
    """Full snapshot set, the view matching the current filter, and a cursor into that view.

    Navigation never touches ``full_set``; every method that replaces the
    filtered view also resets the cursor, so a numeric cursor never survives
    a change of what the indices mean.
    """

    def __init__(self, snapshots: Iterable[BranchSnapshot] = (), query: str = ""):
        self.full_set: List[BranchSnapshot] = sort_by_recency(snapshots)
        self.filtered_view: List[BranchSnapshot] = []
        self.cursor: Optional[int] = None
        self.recompute_filtered(query)

    def __len__(self) -> int:
        return len(self.filtered_view)

    @property
    def total(self) -> int:
        return len(self.full_set)

    def selected(self) -> Optional[BranchSnapshot]:
        """Return the selected snapshot, or None if nothing is selected."""
        if self.cursor is None or not self.filtered_view:
            return None
        return self.filtered_view[self.cursor]

    def next(self) -> None:
        length = len(self.filtered_view)
        if length == 0:
            return
        if self.cursor is None:
            self.cursor = 0
        elif self.cursor >= length - 1:
            self.cursor = 0
        else:
            self.cursor += 1

    def previous(self) -> None:
        length = len(self.filtered_view)
        if length == 0:
            return
        if self.cursor is None:
            self.cursor = 0
        elif self.cursor == 0:
            self.cursor = length - 1
        else:
            self.cursor -= 1

    def page_down(self, page_size: int) -> None:
        length = len(self.filtered_view)
        if length == 0:
            return
        current = self.cursor or 0
        self.cursor = min(current + page_size, length - 1)

    def page_up(self, page_size: int) -> None:
        if not self.filtered_view:
            return
        current = self.cursor or 0
        self.cursor = max(current - page_size, 0)

    def go_to_first(self) -> None:
        if self.filtered_view:
            self.cursor = 0

    def go_to_last(self) -> None:
        if self.filtered_view:
            self.cursor = len(self.filtered_view) - 1

    def unselect(self) -> None:
        self.cursor = None

    def select_clamped(self, index: int) -> None:
        """Select ``index``, clamped to the last row; no-op on an empty view."""
        if self.filtered_view:
            self.cursor = max(0, min(index, len(self.filtered_view) - 1))

    def recompute_filtered(self, query: str) -> None:
        """Rebuild the filtered view for ``query`` and reset the selection."""
        self.filtered_view = [s for s in self.full_set if matches_query(s, query)]
        self.cursor = 0 if self.filtered_view else None

    def set_full_set(self, snapshots: Iterable[BranchSnapshot], query: str) -> None:
        """Replace every snapshot (after a refresh) and re-apply ``query``."""
        self.full_set = sort_by_recency(snapshots)
        self.recompute_filtered(query)
