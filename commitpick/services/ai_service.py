"""AI service for generating commit message candidates using OpenAI."""

import logging
import re
from dataclasses import dataclass
from typing import Any

import requests

from ..config.settings import Config, ConfigError

logger = logging.getLogger(__name__)

API_URL = "https://api.openai.com/v1/chat/completions"

_ORDINAL_PREFIX = re.compile(r"^\d+\. ")


class APIResponseError(ValueError):
    """The completion API answered without usable commit messages."""

    def __init__(self, message: str, response: Any = None):
        super().__init__(message)
        self.response = response


class APIRequestError(ValueError):
    """The request to the completion API failed."""

    pass


@dataclass(frozen=True)
class CommitCandidate:
    """A commit message proposed by the model."""

    display_text: str
    commit_text: str

    @classmethod
    def from_line(cls, line: str) -> "CommitCandidate":
        """Build a candidate from one response line, dropping a leading "N. " marker."""
        return cls(display_text=line, commit_text=_ORDINAL_PREFIX.sub("", line, count=1))


def parse_candidates(text: str, count: int) -> list[CommitCandidate]:
    """Split a model response into at most ``count`` candidates, one per non-blank line."""
    lines = (line.strip() for line in text.strip().splitlines())
    candidates = [CommitCandidate.from_line(line) for line in lines if line]
    return candidates[:count]


class AIService:
    """Service for interacting with the OpenAI chat completions API."""

    def __init__(self, config: Config):
        """Initialize the AI service."""
        if not config.api_key:
            raise ConfigError("API key is required")
        self.api_key = config.api_key
        self.model = config.model_version

    @staticmethod
    def generate_prompt(diff: str, count: int) -> str:
        """Generate the prompt for the AI model."""
        return f"Suggest {count} Git commit messages for the following diff:\n\n{diff}"

    def _request_completion(self, prompt: str) -> dict:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        data = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }

        try:
            response = requests.post(API_URL, headers=headers, json=data)

            if response.status_code == 400:
                error_data = response.json()
                error_message = error_data.get("error", {}).get("message", "Unknown error")
                raise APIResponseError(f"API Error: {error_message}", error_data)

            response.raise_for_status()
            return response.json()

        except requests.exceptions.RequestException as e:
            if getattr(e, "response", None) is not None and hasattr(e.response, "text"):
                error_message = e.response.text
            else:
                error_message = str(e)
            raise APIRequestError(f"API Request failed: {error_message}") from e

    def generate_candidates(self, diff: str, count: int) -> list[CommitCandidate]:
        """
        Ask the model for ``count`` commit messages describing ``diff``.

        Args:
            diff: The git diff to describe
            count: Number of messages to request

        Returns:
            Non-empty list of at most ``count`` candidates

        Raises:
            APIResponseError: The response carried no choices or no usable text
            APIRequestError: The HTTP request failed
        """
        logger.debug("Requesting %d commit messages from %s", count, self.model)
        response_data = self._request_completion(self.generate_prompt(diff, count))

        choices = response_data.get("choices") if isinstance(response_data, dict) else None
        if not choices:
            raise APIResponseError(
                "Error: Unexpected response from OpenAI API. "
                "Please try running the tool again.",
                response_data,
            )

        content = (choices[0].get("message") or {}).get("content") or ""
        candidates = parse_candidates(content, count)
        if not candidates:
            raise APIResponseError(
                "Error: OpenAI API returned no commit messages. "
                "Please try running the tool again.",
                response_data,
            )

        logger.debug("Received %d commit message candidates", len(candidates))
        return candidates
