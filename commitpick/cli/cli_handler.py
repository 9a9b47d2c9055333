#!/usr/bin/env python3
"""Main CLI module for commitpick."""

import logging
import sys

from ..config.settings import Config
from ..core.git import GitError, GitOperations
from ..core.selector import CommitSelector
from ..services.ai_service import AIService, APIRequestError, APIResponseError, CommitCandidate
from . import console

logger = logging.getLogger(__name__)


class CommitPicker:
    """Main application class."""

    def __init__(self, config: Config):
        """Initialize commitpick for one run."""
        self.config = config
        self.git = GitOperations(config.directory)
        self.ai_service = AIService(config)
        self.selector = CommitSelector(self.generate_candidates, console.select_candidate)

    def generate_candidates(self, diff: str) -> list[CommitCandidate]:
        """Fetch a fresh list of candidates for the diff."""
        with console.spinner("Getting commits from OpenAI..."):
            candidates = self.ai_service.generate_candidates(
                diff, self.config.num_commit_messages
            )
        console.print_success("Commits fetched from OpenAI!")
        return candidates

    def _commit(self, message: str) -> None:
        self.git.stage_all()
        output = self.git.commit(message)
        console.print_git_output(output)
        console.print_success(f'Committed with message: "{message}"')

    def run(self) -> None:
        """Run the main application logic."""
        console.setup_logging(self.config.debug)

        try:
            diff = self.git.get_diff()
            if not self.git.has_changes(diff):
                console.print_warning("No changes detected. Exiting.")
                sys.exit(0)

            candidates = self.generate_candidates(diff)
            message = self.selector.select(diff, candidates)
            console.print_selected(message)

            if not console.confirm_action(f'Do you want to commit with the message "{message}"?'):
                console.print_warning("Commit canceled.")
                sys.exit(0)

            self._commit(message)

        except GitError as e:
            console.print_error(str(e))
            sys.exit(1)
        except APIResponseError as e:
            console.print_error(str(e))
            if self.config.debug:
                console.print_debug_response(e.response)
            sys.exit(1)
        except APIRequestError as e:
            console.print_error(str(e))
            if self.config.debug:
                logger.debug("API request error details", exc_info=True)
            sys.exit(1)
