"""Removal of terminal escape sequences from captured output."""

from __future__ import annotations

import re

# CSI (colors, cursor movement), OSC (titles, hyperlinks) terminated by BEL or ST,
# and the remaining escapes with optional intermediate bytes.
_ANSI_RE = re.compile(
    rb"\x1b\[[0-?]*[ -/]*[@-~]"
    rb"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"
    rb"|\x1b[ -/]*[0-~]"
)


def strip_ansi(data: bytes) -> bytes:
    """Return ``data`` without ANSI escape sequences."""

    return _ANSI_RE.sub(b"", data)


__all__ = ["strip_ansi"]
