"""Exception classes for the outer surfaces of the settings package.

The settings model itself never raises for bad values. These exceptions
are used when parsing documents, binding strings and tool configuration.
"""

from __future__ import annotations


class TabletSettingsError(Exception):
    """Base class for all errors raised by tabletsettings."""

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
        """
        super().__init__(message)
        self.message: str = message


class SettingsFormatError(TabletSettingsError):
    """Raised when a settings document cannot be parsed or validated."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """Initialize with parsing error details.

        Args:
            message: Description of the parsing error
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.original_error = original_error


class BindingFormatError(TabletSettingsError):
    """Raised when a binding string is not of the form ``path, value``."""

    pass


class ConfigError(TabletSettingsError):
    """Raised when the tool configuration is missing or invalid."""

    pass
