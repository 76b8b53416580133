"""Branch snapshot model"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BranchSnapshot:
    """One local branch as seen by a single enumeration of the repository."""
    name: str
    last_change_time: int  # Unix timestamp of the tip commit
    relative_age: str  # e.g. "3 minutes ago", computed when the snapshot was built
    is_current: bool = False
    upstream_status: Optional[str] = None  # None = no upstream configured
