"""Exceptions raised while composing documents.

Every failure is fatal for the document being built and is surfaced to
the caller as-is; nothing is retried.
"""


class RtlDocError(Exception):
    """Base class for all rtldoc errors."""


class ConfigurationError(RtlDocError, ValueError):
    """Document attributes are missing or invalid."""


class MarkupError(RtlDocError, ValueError):
    """An inline markup fragment is not well-formed."""


class ResourceError(RtlDocError, OSError):
    """A logo image or font file could not be loaded."""
