"""Command filtering and capture session lifecycle."""

from .filter import CommandFilter, matches_pattern
from .models import CaptureRecord
from .session import CaptureSession

__all__ = [
    "CaptureRecord",
    "CaptureSession",
    "CommandFilter",
    "matches_pattern",
]
