"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or function-scoped
- Generic enough for reuse across different test categories
- Well-documented with clear purpose
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tessa.config import env as overrides

OVERRIDE_FAMILIES = (
    overrides.NIX_MODE,
    overrides.CLI_NAME,
    overrides.STATE_DIR,
    overrides.CONFIG_PATH,
    overrides.OAUTH_DIR,
    overrides.GATEWAY_PORT,
)


def all_override_names() -> list[str]:
    """Every environment variable the resolvers read."""
    names: list[str] = []
    for family in OVERRIDE_FAMILIES:
        names.extend(family.names)
    return names


# =============================================================================
# Home Directory Fixtures
# =============================================================================

@pytest.fixture
def fake_home(tmp_path: Path) -> Path:
    """Create an empty home directory with no state directories.

    Returns:
        Path to a clean temporary home directory.
    """
    home = tmp_path / "home"
    home.mkdir(parents=True, exist_ok=True)
    return home


@pytest.fixture
def homedir(fake_home: Path) -> Callable[[], Path]:
    """Home directory provider pointing at ``fake_home``."""
    return lambda: fake_home


@pytest.fixture
def make_state_dir(fake_home: Path) -> Callable[[str], Path]:
    """Factory fixture creating ``~/.<name>`` under the fake home.

    Example:
        >>> legacy = make_state_dir("clawdbot")
        >>> assert legacy == fake_home / ".clawdbot"
    """
    def _create(name: str) -> Path:
        state_dir = fake_home / f".{name}"
        state_dir.mkdir(parents=True, exist_ok=True)
        return state_dir

    return _create


# =============================================================================
# Process Environment Fixtures
# =============================================================================

@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, fake_home: Path) -> Path:
    """Point the live process at the fake home with no Tessa overrides set.

    Returns:
        The fake home directory.
    """
    for name in all_override_names():
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(fake_home))
    return fake_home


# =============================================================================
# Output Handler Fixtures
# =============================================================================

@pytest.fixture
def mock_output_handler(mocker: MockerFixture):
    """Create a mock OutputHandler for dependency injection.

    Returns:
        Mock object implementing OutputHandler protocol.
    """
    handler = mocker.MagicMock()
    handler.print = mocker.MagicMock()
    handler.info = mocker.MagicMock()
    handler.warning = mocker.MagicMock()
    handler.error = mocker.MagicMock()
    return handler


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
