"""Unit tests for CLI app configuration."""

from __future__ import annotations

import typer

from tessa.cli.app import app
from tessa.cli.commands import show


class TestAppConfiguration:
    """Tests for Typer app configuration."""

    def test_app_is_typer_instance(self) -> None:
        assert isinstance(app, typer.Typer)

    def test_app_has_registered_commands(self) -> None:
        command_names = [cmd.name for cmd in app.registered_commands]
        assert command_names == ["show", "candidates", "legacy-dirs", "rewrite"]

    def test_show_command_callback(self) -> None:
        callbacks = {cmd.name: cmd.callback for cmd in app.registered_commands}
        assert callbacks["show"] is show

    def test_app_has_global_callback(self) -> None:
        assert app.registered_callback is not None
        assert app.registered_callback.callback.__name__ == "main"

    def test_main_module_exposes_app(self) -> None:
        from tessa.main import app as main_app
        assert main_app is app
