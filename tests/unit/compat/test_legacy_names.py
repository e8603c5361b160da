"""Tests for product name namespaces and legacy constants."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tessa.compat import legacy_names
from tessa.compat.legacy_names import (
    CONFIG_FILENAME_NAMESPACES,
    CURRENT,
    HISTORICAL,
    LEGACY_1,
    LEGACY_2,
    NAMESPACES,
    Namespace,
)


class TestNamespace:
    """Tests for the Namespace value object."""

    def test_derived_names(self) -> None:
        assert CURRENT.env_prefix == "TESSA"
        assert CURRENT.state_dirname == ".tessa"
        assert CURRENT.config_filename == "tessa.json"
        assert CURRENT.plugin_manifest_filename == "tessa.plugin.json"
        assert LEGACY_2.env_var("STATE_DIR") == "CLAWDBOT_STATE_DIR"

    def test_is_frozen_and_hashable(self) -> None:
        with pytest.raises(ValidationError):
            CURRENT.name = "other"  # type: ignore[misc]
        assert {Namespace(name="tessa"), CURRENT} == {CURRENT}

    def test_precedence_order(self) -> None:
        assert NAMESPACES == (CURRENT, LEGACY_1, LEGACY_2)
        assert CONFIG_FILENAME_NAMESPACES == (CURRENT, LEGACY_1, LEGACY_2, HISTORICAL)
        assert HISTORICAL not in NAMESPACES


class TestLegacyConstants:
    """Tests for exported name constants."""

    def test_project_names(self) -> None:
        assert legacy_names.PROJECT_NAME == "tessa"
        assert legacy_names.LEGACY_PROJECT_NAMES == ("moltbot", "clawdbot")
        assert legacy_names.LEGACY_PROJECT_NAME == "clawdbot"

    def test_manifest_keys(self) -> None:
        assert legacy_names.MANIFEST_KEY == "tessa"
        assert legacy_names.LEGACY_MANIFEST_KEYS == ("moltbot", "clawdbot")
        assert legacy_names.LEGACY_MANIFEST_KEY == "clawdbot"

    def test_plugin_manifest_filenames(self) -> None:
        assert legacy_names.PLUGIN_MANIFEST_FILENAME == "tessa.plugin.json"
        assert legacy_names.LEGACY_PLUGIN_MANIFEST_FILENAMES == (
            "moltbot.plugin.json",
            "clawdbot.plugin.json",
        )
        assert legacy_names.LEGACY_PLUGIN_MANIFEST_FILENAME == "clawdbot.plugin.json"

    def test_canvas_handler(self) -> None:
        assert legacy_names.LEGACY_CANVAS_HANDLER_NAMES == ("clawdbotCanvasA2UIAction",)

    def test_macos_sources_dirs(self) -> None:
        assert legacy_names.MACOS_APP_SOURCES_DIR == "apps/macos/Sources/Tessa"
        assert legacy_names.LEGACY_MACOS_APP_SOURCES_DIRS == (
            "apps/macos/Sources/Clawdbot",
            "apps/macos/Sources/Moltbot",
        )
