"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from scriptshot.config import reset_settings

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import clean_runner, cli_invoke  # noqa: F401

FIXTURES_DIR = Path(__file__).parent / "fixtures"
ENV_PREFIX = "SCRIPTSHOT_"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_settings():
    """Keep SCRIPTSHOT_ environment variables and cached settings out of tests.

    The CLI's --verbose and --debug flags write SCRIPTSHOT_ variables straight
    into os.environ, so the environment is restored after every test.
    """
    saved = {k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}
    for key in saved:
        del os.environ[key]
    reset_settings()

    yield

    for key in [k for k in os.environ if k.startswith(ENV_PREFIX)]:
        del os.environ[key]
    os.environ.update(saved)
    reset_settings()


@pytest.fixture
def episode_text() -> str:
    """A complete AI-authored episode screenplay."""
    return (FIXTURES_DIR / "episode.md").read_text(encoding="utf-8")


@pytest.fixture
def episode_file(tmp_path: Path, episode_text: str) -> Path:
    """The sample episode written to a temporary markdown file."""
    path = tmp_path / "episode.md"
    path.write_text(episode_text, encoding="utf-8")
    return path
