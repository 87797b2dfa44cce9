"""Lifecycle of the per-shell capture buffer files."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import NoPreviousCaptureError, StorageError
from ..storage import SessionStore
from .filter import CommandFilter
from .models import CaptureRecord

logger = logging.getLogger(__name__)


class CaptureSession:
    """Create, expose and remove the command/output file pair of one shell.

    The shell writes command output into the output file directly; this class
    never caches file content, so every read reflects what the shell wrote.
    """

    def __init__(self, store: SessionStore) -> None:
        self._store = store

    @property
    def store(self) -> SessionStore:
        return self._store

    def should_prepare(self, command_line: str) -> bool:
        if not self._store.is_recording_enabled():
            return False
        decision = CommandFilter(self._store.skip_commands()).should_capture(command_line)
        if not decision:
            logger.debug("Skipping capture of %r", command_line)
        return decision

    def prepare_new_command(self, command_line: str) -> Path:
        """Reset the buffer pair for ``command_line`` and return the output path."""

        cmd_path = self._store.cmd_file()
        output_path = self._store.output_file()
        try:
            cmd_path.parent.mkdir(parents=True, exist_ok=True)
            cmd_path.write_bytes(command_line.encode("utf-8", errors="surrogateescape"))
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(b"")
        except OSError as exc:
            raise StorageError(f"Cannot prepare capture files in {cmd_path.parent}: {exc}") from exc
        logger.debug("Prepared capture for shell %s: %s", self._store.shell_pid, output_path)
        return output_path

    def has_previous(self) -> bool:
        return self._store.cmd_file().exists() and self._store.output_file().exists()

    def read_cmd_file(self) -> str:
        path = self._store.cmd_file()
        try:
            return path.read_bytes().decode("utf-8", errors="surrogateescape")
        except OSError as exc:
            raise StorageError(f"Cannot read command file {path}: {exc}") from exc

    def read_output(self) -> bytes:
        path = self._store.output_file()
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StorageError(f"Cannot read output file {path}: {exc}") from exc

    def last_capture(self) -> CaptureRecord:
        """Return the most recent capture for this shell."""

        if not self.has_previous():
            raise NoPreviousCaptureError("No previous command record found.")
        return CaptureRecord(command=self.read_cmd_file(), output=self.read_output())

    def cleanup(self) -> None:
        """Remove the buffer pair; files that are already gone are ignored."""

        for path in self._store.temp_files():
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as exc:
                raise StorageError(f"Cannot remove {path}: {exc}") from exc
        logger.debug("Cleaned up capture files for shell %s", self._store.shell_pid)


__all__ = ["CaptureSession"]
