"""Basic test to verify test infrastructure is working."""

from __future__ import annotations

import os
from pathlib import Path

from tessa.config import env as overrides


class TestBasicInfrastructure:
    """Basic tests to verify pytest setup and fixtures work."""

    def test_fake_home_fixture(self, fake_home: Path) -> None:
        """Test that fake_home fixture creates an empty directory."""
        assert fake_home.is_dir()
        assert list(fake_home.iterdir()) == []

    def test_homedir_provider(self, homedir, fake_home: Path) -> None:
        assert homedir() == fake_home

    def test_make_state_dir(self, make_state_dir, fake_home: Path) -> None:
        assert make_state_dir("moltbot") == fake_home / ".moltbot"
        assert (fake_home / ".moltbot").is_dir()

    def test_isolated_env(self, isolated_env: Path) -> None:
        """Test that isolated_env clears every override and points HOME at the fake home."""
        assert Path.home() == isolated_env
        names = overrides.STATE_DIR.names + overrides.CONFIG_PATH.names + overrides.GATEWAY_PORT.names
        assert not any(name in os.environ for name in names)

    def test_mock_output_handler_fixture(self, mock_output_handler) -> None:
        assert hasattr(mock_output_handler, "info")
        assert hasattr(mock_output_handler, "warning")
        assert hasattr(mock_output_handler, "error")
