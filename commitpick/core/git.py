"""Git operations module."""

import logging
import subprocess

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Git operation error."""

    pass


class GitOperations:
    """Git operations run inside a single working directory."""

    def __init__(self, directory: str):
        self.directory = directory

    def _run(self, args: list[str], action: str) -> str:
        """Run a git command to completion and return its stdout."""
        cmd = ["git"] + args
        logger.debug("Running %s in %s", " ".join(cmd), self.directory)
        try:
            result = subprocess.run(
                cmd,
                cwd=self.directory,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr if e.stderr else str(e)
            raise GitError(f"Failed to {action}: {error_msg}")
        except OSError as e:
            raise GitError(f"Failed to {action}: {e}")
        return result.stdout

    @staticmethod
    def has_changes(diff: str) -> bool:
        """Return whether a diff contains anything besides whitespace."""
        return bool(diff.strip())

    def get_diff(self) -> str:
        """Get the zero-context diff of uncommitted changes."""
        return self._run(["diff", "--unified=0"], "get diff")

    def stage_all(self) -> None:
        """Stage every change in the working directory."""
        self._run(["add", "."], "stage changes")

    def commit(self, message: str) -> str:
        """Commit staged changes with the given message and return git's output."""
        return self._run(["commit", "-m", message], "create commit")
