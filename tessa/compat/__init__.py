"""Backward compatibility with earlier product names."""
from tessa.compat.legacy_names import (
    CONFIG_FILENAME_NAMESPACES,
    CURRENT,
    HISTORICAL,
    LEGACY_1,
    LEGACY_2,
    NAMESPACES,
    Namespace,
)

__all__ = [
    "Namespace",
    "CURRENT",
    "LEGACY_1",
    "LEGACY_2",
    "HISTORICAL",
    "NAMESPACES",
    "CONFIG_FILENAME_NAMESPACES",
]
