"""Common test fixtures."""

import pytest

from commitpick.config.settings import Config
from commitpick.services.ai_service import CommitCandidate


@pytest.fixture
def config(tmp_path):
    """Fixture for a resolved run configuration."""
    return Config(
        api_key="sk-test",
        model_version="gpt-4o-mini",
        num_commit_messages=3,
        directory=str(tmp_path),
        debug=False,
    )


@pytest.fixture
def make_candidates():
    """Fixture for building candidate lists from raw lines."""
    def _make(*lines: str) -> list[CommitCandidate]:
        return [CommitCandidate.from_line(line) for line in lines]
    return _make


@pytest.fixture
def clean_env(monkeypatch):
    """Remove commitpick variables from the process environment."""
    for key in ("OPENAI_API_KEY", "MODEL_VERSION", "NUM_COMMIT_MESSAGES"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
