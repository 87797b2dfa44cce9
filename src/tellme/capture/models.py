"""Data models for captured commands."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class CaptureRecord:
    """The command line and raw output of a shell's last captured command."""

    command: str
    output: bytes

    def decoded_output(self) -> str:
        return self.output.decode("utf-8", errors="replace")


__all__ = ["CaptureRecord"]
