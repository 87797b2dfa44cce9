"""Exception types shared across tellme."""

from __future__ import annotations


class TellmeError(RuntimeError):
    """Base class for errors reported at the CLI boundary."""


class ConfigurationError(TellmeError):
    """Raised when the shell identity or settings cannot be determined."""


class StorageError(TellmeError):
    """Raised when a filesystem operation on tellme state fails."""


class NoPreviousCaptureError(TellmeError):
    """Raised when the current shell has no captured command to read."""


class InvalidPatternError(TellmeError):
    """Raised when a skip pattern cannot be stored one per line."""


class ClipboardUnavailableError(TellmeError):
    """Raised when the system clipboard cannot be written."""


__all__ = [
    "TellmeError",
    "ConfigurationError",
    "StorageError",
    "NoPreviousCaptureError",
    "ClipboardUnavailableError",
    "InvalidPatternError",
]
