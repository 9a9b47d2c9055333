"""Interactive commit message selection."""

import logging
from collections.abc import Callable, Sequence
from enum import Enum

from ..services.ai_service import CommitCandidate

logger = logging.getLogger(__name__)

# Returned by the chooser when the user asks for a fresh set of messages.
REGENERATE = object()


class SelectionState(Enum):
    """States of the selection loop."""

    SELECTING = "selecting"
    DONE = "done"


Generator = Callable[[str], list[CommitCandidate]]
Chooser = Callable[[Sequence[CommitCandidate]], object]


class CommitSelector:
    """Lets the user pick a candidate or regenerate the whole list."""

    def __init__(self, generate: Generator, choose: Chooser):
        """
        Args:
            generate: Produces a fresh candidate list for a diff
            choose: Shows candidates and returns the chosen one or REGENERATE
        """
        self.generate = generate
        self.choose = choose

    def select(self, diff: str, candidates: list[CommitCandidate]) -> str:
        """Loop until a real candidate is chosen and return its commit text."""
        state = SelectionState.SELECTING
        selected: CommitCandidate | None = None

        while state is SelectionState.SELECTING:
            choice = self.choose(candidates)
            if choice is REGENERATE:
                logger.debug("Regenerating commit messages")
                candidates = self.generate(diff)
                continue
            selected = choice
            state = SelectionState.DONE

        return selected.commit_text
