"""Textual widgets for git-recent."""
