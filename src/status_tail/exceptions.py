"""Application exception classes."""


class ConfigError(Exception):
    """Raised when display configuration is invalid or incomplete."""
