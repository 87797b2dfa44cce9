"""Persistent state for tellme."""

from .store import (
    DEFAULT_SKIP_COMMANDS,
    STATUS_DISABLED,
    STATUS_ENABLED,
    SessionStore,
    normalize_pattern,
)

__all__ = [
    "DEFAULT_SKIP_COMMANDS",
    "STATUS_DISABLED",
    "STATUS_ENABLED",
    "SessionStore",
    "normalize_pattern",
]
