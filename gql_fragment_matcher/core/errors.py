"""Exceptions raised while generating fragment matcher artifacts."""

from typing import Any


class FragmentMatcherError(Exception):
    """Base class for all fragment matcher errors."""


class SchemaLoadError(FragmentMatcherError):
    """Raised when a schema source cannot be read or parsed."""


class SchemaIntrospectionError(FragmentMatcherError):
    """Raised when introspecting the schema yields no data."""

    def __init__(self, message: str, errors: list[Any] | None = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class UnsupportedOutputExtension(FragmentMatcherError):
    """Raised when the output file suffix maps to no known encoding."""

    def __init__(self, message: str, extension: str = ""):
        self.message = message
        self.extension = extension
        super().__init__(message)


class InvalidConfigCombination(FragmentMatcherError):
    """Raised when config options conflict or hold unsupported values."""
