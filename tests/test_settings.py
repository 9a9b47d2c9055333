"""Tests for configuration resolution."""

import os

import pytest

from commitpick.config.settings import (
    DEFAULT_MODEL,
    DEFAULT_NUM_COMMIT_MESSAGES,
    Config,
    ConfigError,
)


@pytest.fixture
def env_file(tmp_path):
    """Write a .env file and return its path."""
    path = tmp_path / ".env"
    path.write_text(
        "OPENAI_API_KEY=sk-from-file\n"
        "MODEL_VERSION=file-model\n"
        "NUM_COMMIT_MESSAGES=7\n"
    )
    return path


def test_values_from_env_file(clean_env, env_file):
    """Test that keys are read from the .env file."""
    config = Config.from_env(env_file=env_file)

    assert config.api_key == "sk-from-file"
    assert config.model_version == "file-model"
    assert config.num_commit_messages == 7


def test_environment_overrides_env_file(clean_env, env_file):
    """Test that process environment wins over the .env file."""
    clean_env.setenv("OPENAI_API_KEY", "sk-from-env")
    clean_env.setenv("MODEL_VERSION", "env-model")
    clean_env.setenv("NUM_COMMIT_MESSAGES", "2")

    config = Config.from_env(env_file=env_file)

    assert config.api_key == "sk-from-env"
    assert config.model_version == "env-model"
    assert config.num_commit_messages == 2


def test_cli_arguments_override_everything(clean_env, env_file, tmp_path):
    """Test that explicit arguments win over environment and file."""
    clean_env.setenv("MODEL_VERSION", "env-model")

    config = Config.from_env(
        directory=str(tmp_path), model="cli-model", count=4, debug=True, env_file=env_file
    )

    assert config.model_version == "cli-model"
    assert config.num_commit_messages == 4
    assert config.directory == str(tmp_path)
    assert config.debug is True


def test_defaults(clean_env, tmp_path):
    """Test defaults when only the API key is provided."""
    clean_env.setenv("OPENAI_API_KEY", "sk-test")

    config = Config.from_env(env_file=tmp_path / "missing.env")

    assert config.model_version == DEFAULT_MODEL
    assert config.num_commit_messages == DEFAULT_NUM_COMMIT_MESSAGES
    assert config.directory == os.getcwd()
    assert config.debug is False


def test_missing_api_key(clean_env, tmp_path):
    """Test error when API key is missing everywhere."""
    with pytest.raises(ConfigError) as exc_info:
        Config.from_env(env_file=tmp_path / "missing.env")

    assert "OPENAI_API_KEY not found" in str(exc_info.value)


@pytest.mark.parametrize("value", ["three", "0", "-1"])
def test_invalid_message_count(clean_env, tmp_path, value):
    """Test rejection of unusable message counts."""
    clean_env.setenv("OPENAI_API_KEY", "sk-test")
    clean_env.setenv("NUM_COMMIT_MESSAGES", value)

    with pytest.raises(ConfigError):
        Config.from_env(env_file=tmp_path / "missing.env")


def test_config_is_immutable(config):
    """Test that configuration cannot be changed after startup."""
    with pytest.raises(AttributeError):
        config.api_key = "other"
