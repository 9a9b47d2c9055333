"""Configuration settings for commitpick."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

DEFAULT_ENV_FILE = ".env"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_NUM_COMMIT_MESSAGES = 3


class ConfigError(ValueError):
    """Missing or invalid configuration."""

    pass


@dataclass(frozen=True)
class Config:
    """Settings resolved once at startup for a single run."""

    api_key: str
    model_version: str
    num_commit_messages: int
    directory: str
    debug: bool = False

    @classmethod
    def from_env(
        cls,
        directory: str | None = None,
        model: str | None = None,
        count: int | None = None,
        debug: bool = False,
        env_file: str | os.PathLike = DEFAULT_ENV_FILE,
    ) -> "Config":
        """
        Create configuration from CLI overrides, the environment and a .env file.

        Explicit arguments win over process environment variables, which win
        over keys found in ``env_file``.
        """
        file_values = dotenv_values(env_file) if Path(env_file).is_file() else {}

        def lookup(key: str) -> str | None:
            return os.getenv(key) or file_values.get(key) or None

        api_key = lookup("OPENAI_API_KEY")
        if not api_key:
            raise ConfigError("Error: OPENAI_API_KEY not found in environment or .env file.")

        raw_count = count if count is not None else lookup("NUM_COMMIT_MESSAGES")
        try:
            num_commit_messages = (
                int(raw_count) if raw_count is not None else DEFAULT_NUM_COMMIT_MESSAGES
            )
        except ValueError:
            raise ConfigError(f"Error: NUM_COMMIT_MESSAGES must be an integer, got {raw_count!r}.")
        if num_commit_messages < 1:
            raise ConfigError("Error: NUM_COMMIT_MESSAGES must be at least 1.")

        return cls(
            api_key=api_key,
            model_version=model or lookup("MODEL_VERSION") or DEFAULT_MODEL,
            num_commit_messages=num_commit_messages,
            directory=directory or os.getcwd(),
            debug=debug,
        )
