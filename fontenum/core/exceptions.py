"""Exceptions raised by the plugin and generator."""

from typing import Any


class FontEnumError(Exception):
    """Base exception for all fontenum errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class InvalidArgumentsError(FontEnumError):
    """Generator invoked with too few arguments or an unparseable input path."""


class ConfigurationError(FontEnumError):
    """Target or input files cannot produce a valid enum."""


class MissingInputFilesError(ConfigurationError):
    """Target contains no font files in a supported format."""


class MissingSourceModuleError(ConfigurationError):
    """Target exposes no file list."""


class EmptyIdentifierError(ConfigurationError):
    """Font filename reduces to an empty identifier."""


class DuplicateIdentifierError(ConfigurationError):
    """Several font files map to the same identifier."""


class InvocationError(FontEnumError):
    """Generator tool could not be run."""


class ToolNotFoundError(InvocationError):
    """Named companion tool is not available."""


class GeneratorFailedError(InvocationError):
    """Generator process exited with a nonzero status."""
