"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on lightweight mocks and fast execution.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Config File Creation
# =============================================================================

@pytest.fixture
def write_config():
    """Factory fixture for writing JSON config files.

    Creates parent directories as needed, so writing a config also creates
    the state directory that holds it.

    Returns:
        Callable that writes ``data`` to ``path`` and returns the path.
    """
    def _create(path: Path, data: dict[str, Any] | None = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data or {}), encoding="utf-8")
        return path

    return _create
