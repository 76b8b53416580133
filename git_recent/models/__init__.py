"""Data models for git-recent."""

from .branch import BranchSnapshot

__all__ = ["BranchSnapshot"]
