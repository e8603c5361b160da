"""Base exception classes for Tessa."""


class ConfigError(Exception):
    """Base class for user-facing configuration errors.

    Path resolution itself never raises; these errors come from reading the
    resolved config file and are reported at the CLI edge.
    """
