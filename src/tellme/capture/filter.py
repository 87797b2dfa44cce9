"""Skip-list filtering of command lines."""

from __future__ import annotations

from typing import Iterable


def matches_pattern(base_command: str, pattern: str) -> bool:
    """Match a base command against an exact or trailing-``*`` prefix pattern."""

    if pattern.endswith("*"):
        return base_command.startswith(pattern[:-1])
    return base_command == pattern


class CommandFilter:
    """Decide whether a command's output should be captured."""

    def __init__(self, skip_commands: Iterable[str]) -> None:
        self._skip_commands = list(skip_commands)

    @property
    def skip_commands(self) -> list[str]:
        return list(self._skip_commands)

    def should_capture(self, command_line: str) -> bool:
        parts = command_line.split()
        if not parts:
            return False
        base_command = parts[0]
        return not any(matches_pattern(base_command, pattern) for pattern in self._skip_commands)


__all__ = ["CommandFilter", "matches_pattern"]
