"""Package-wide constants for Tessa."""

VERSION = "0.3.0"
