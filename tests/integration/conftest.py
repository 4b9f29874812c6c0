"""Pytest configuration for live integration tests.

Loads .env from the project root and skips every test in this directory when
GEMINI_API_KEY is not configured.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


def pytest_configure(config):
    """Load environment variables before test collection."""
    env_path = Path(__file__).parent.parent.parent / ".env"
    load_dotenv(env_path)


def pytest_collection_modifyitems(config, items):
    """Mark integration tests and skip them without an API key."""
    integration_dir = Path(__file__).parent
    skip = pytest.mark.skip(reason="GEMINI_API_KEY not set; add it to .env to run live tests")
    for item in items:
        if integration_dir in Path(item.path).parents:
            item.add_marker(pytest.mark.integration)
            if not os.getenv("GEMINI_API_KEY"):
                item.add_marker(skip)
