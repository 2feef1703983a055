"""Exceptions raised by cloudsecure_config.

File read and write failures are not wrapped: they surface as the built-in
``OSError`` family (``FileNotFoundError``, ``PermissionError``, ...).
"""


class ConfigError(Exception):
    """Base class for configuration errors."""


class ConfigParseError(ConfigError, ValueError):
    """The configuration file exists but could not be parsed."""

    def __init__(self, path, reason: str):
        super().__init__(f"Invalid configuration file {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigSerializationError(ConfigError, ValueError):
    """The configuration could not be encoded as JSON."""


class ProfileNotFoundError(ConfigError, KeyError):
    """A profile name is not present in the configuration."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"CloudSecure profile not found: {self.name!r}"
