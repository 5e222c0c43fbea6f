"""Error types raised or recorded during analysis and export.

Only ContainerOpenError and SerializationError ever reach the caller.
NestedContainerError and EntryReadError are created by the walker, logged
and kept on the report as issues; the walk itself carries on.
"""
from typing import Optional


class TrafexiaError(Exception):
    """Base class for all Trafexia errors."""


class ContainerOpenError(TrafexiaError):
    """The outer package could not be opened as a zip container."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot open container '{source}': {reason}")


class NestedContainerError(TrafexiaError):
    """A nested package inside the container could not be opened or read."""

    def __init__(self, entry_path: str, reason: str):
        self.entry_path = entry_path
        self.reason = reason
        super().__init__(f"Failed to process nested package '{entry_path}': {reason}")


class EntryReadError(TrafexiaError):
    """A single container entry could not be read."""

    def __init__(self, entry_path: str, reason: str):
        self.entry_path = entry_path
        self.reason = reason
        super().__init__(f"Failed to read entry '{entry_path}': {reason}")


class SerializationError(TrafexiaError):
    """A collection document could not be serialized to JSON."""

    def __init__(self, name: str, reason: str, cause: Optional[Exception] = None):
        self.name = name
        self.reason = reason
        self.cause = cause
        super().__init__(f"Cannot serialize collection '{name}': {reason}")
