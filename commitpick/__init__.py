"""commitpick - Pick an AI-suggested commit message for your uncommitted changes."""

from .cli.cli_handler import CommitPicker
from .config.settings import Config, ConfigError
from .core.git import GitError, GitOperations
from .core.selector import REGENERATE, CommitSelector, SelectionState
from .services.ai_service import (
    AIService,
    APIRequestError,
    APIResponseError,
    CommitCandidate,
    parse_candidates,
)

__version__ = "0.1.0"

__all__ = [
    "CommitPicker",
    "Config",
    "ConfigError",
    "GitOperations",
    "GitError",
    "CommitSelector",
    "SelectionState",
    "REGENERATE",
    "AIService",
    "APIRequestError",
    "APIResponseError",
    "CommitCandidate",
    "parse_candidates",
]
