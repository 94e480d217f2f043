"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    ├── identity_store/        # Schema, entities and handles
    │   ├── unit/              # Metadata inspection, no database
    │   └── integration/       # In-memory SQLite and Testcontainers PostgreSQL
    ├── identity_config/       # Settings and logging
    │   └── unit/
    └── shared/                # Shared fixtures and factories

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests (PostgreSQL)
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-integration    Run integration tests
    --run-all            Run all tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from identity_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.test for tests, falling back to local development settings
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")
elif (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that need a PostgreSQL container (auto-skipped)",
    )


def _enabled(option: bool, env_var: str) -> bool:
    return option or os.environ.get(env_var, "").lower() in ("1", "true", "yes")


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    if _enabled(config.getoption("--run-all"), "RUN_ALL_TESTS"):
        return

    if _enabled(config.getoption("--run-integration"), "RUN_INTEGRATION"):
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        # Explicit marker only, not folder name
        item_markers = {mark.name for mark in item.iter_markers()}
        if "integration" in item_markers:
            item.add_marker(skip_integration)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Ensure settings are loaded fresh from the environment for tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()
