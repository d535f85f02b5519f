"""
Pytest configuration for Local Guide backend tests.

Sets up test environment and global fixtures.
"""
import os
from pathlib import Path
from typing import List, Optional

import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")

from localguide.config import settings  # noqa: E402

FOOD_TEMPLATE = (
    "You are a local guide.\n"
    "Data:\n{CSV_DATA_GOES_HERE}\n"
    "Question: {USER_QUERY_GOES_HERE}\n"
)

FOOD_CSV = (
    "Name;Website;Social_Media;Εύρος_Τιμών\n"
    "Taverna X;http://x.example;;Μη διαθέσιμο\n"
)


class StubGenerator:
    """
    Stand-in for GeminiGenerator.

    Each call pops the next outcome: an Exception is raised, a string is
    returned. The last outcome repeats once the list is exhausted.
    """

    def __init__(self, outcomes: List[object]):
        self.outcomes = list(outcomes)
        self.calls = 0
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.calls += 1
        self.prompts.append(prompt)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def write_category(data_dir: Path, category: str, template: str, table: Optional[str]) -> None:
    """Write <category>.txt and (optionally) <category>.csv into data_dir."""
    (data_dir / f"{category}.txt").write_text(template, encoding="utf-8")
    if table is not None:
        (data_dir / f"{category}.csv").write_text(table, encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path):
    """Data directory holding a single 'food' category."""
    write_category(tmp_path, "food", FOOD_TEMPLATE, FOOD_CSV)
    return tmp_path


@pytest.fixture
def fast_settings(monkeypatch, data_dir):
    """Point settings at the temp data dir and remove backoff delays."""
    monkeypatch.setattr(settings, "DATA_DIR", data_dir)
    monkeypatch.setattr(settings, "INITIAL_RETRY_DELAY_MS", 0)
    monkeypatch.setattr(settings, "REQUEST_TIMEOUT_SECONDS", 5.0)
    monkeypatch.setattr(settings, "KNOWLEDGE_CACHE_ENABLED", False)
    return settings


@pytest.fixture
def make_generator():
    """Factory for StubGenerator instances."""
    return StubGenerator


@pytest.fixture
def make_category():
    """Expose write_category to tests that need extra categories."""
    return write_category
