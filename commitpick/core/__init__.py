"""Core modules for commitpick.

This module contains the core functionality including:
- Git operations
- Interactive commit message selection
"""

from .git import GitError, GitOperations
from .selector import REGENERATE, CommitSelector, SelectionState

__all__ = [
    "GitOperations",
    "GitError",
    "CommitSelector",
    "SelectionState",
    "REGENERATE",
]
