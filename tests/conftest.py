"""Shared fixtures for release version check tests."""

import os
import sys
from pathlib import Path

import pytest

# Ensure the package is importable from a source checkout
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


@pytest.fixture(autouse=True)
def clean_actions_env(monkeypatch):
    """Keep the runner's own INPUT_*/GITHUB_* variables out of the tests."""
    for name in list(os.environ):
        if name.startswith("INPUT_") or name in (
            "GITHUB_OUTPUT", "GITHUB_REPOSITORY", "GITHUB_TOKEN",
            "GITHUB_API_URL", "RUNNER_DEBUG",
        ):
            monkeypatch.delenv(name, raising=False)
