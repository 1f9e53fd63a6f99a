"""Typed failures raised while locating classes."""

from __future__ import annotations

COMPILATION_ABORTED_STATUS = 1


class LocatorError(Exception):
    """Base class for locator failures."""


class MalformedArchiveError(LocatorError):
    """Raised by a provider whose match sits in an archive it cannot use.

    Recoverable while later providers may still succeed.
    """

    def __init__(self, class_name: str, archive: str, reason: str | None = None) -> None:
        message = reason or (
            f"Class {class_name} was found in archive {archive}, "
            "but it cannot be read from an archive."
        )
        super().__init__(message)
        self.class_name = class_name
        self.archive = archive
        self.reason = message


class ClasspathResolutionError(LocatorError):
    """Raised when a classpath entry cannot be canonicalized."""

    def __init__(self, entry: str, reason: str) -> None:
        super().__init__(f"Couldn't resolve classpath entry {entry}: {reason}")
        self.entry = entry
        self.reason = reason


class CompilationAbortedError(LocatorError):
    """Fatal failure that ends the current run."""

    def __init__(self, reason: str, status: int = COMPILATION_ABORTED_STATUS) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status = status


class ResourceError(LocatorError):
    """Raised when a located artifact or archive cannot be read."""

    def __init__(self, origin: str, reason: str) -> None:
        super().__init__(f"Caught I/O failure reading {origin}: {reason}")
        self.origin = origin
        self.reason = reason


class ConfigurationError(ValueError):
    """Raised for unsupported or malformed configuration values."""
