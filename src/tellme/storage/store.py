"""File-backed session store: paths, recording status and skip list."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable

from ..config import TellmeSettings, get_settings
from ..errors import ConfigurationError, InvalidPatternError, StorageError

logger = logging.getLogger(__name__)

DEFAULT_SKIP_COMMANDS: tuple[str, ...] = (
    "tellme",
    "clear",
    "exit",
    "cd",
    "vim",
    "vi",
    "nano",
    "less",
    "man",
    "htop",
    "top",
    "ssh",
    "tmux",
    "source",
)

STATUS_ENABLED = "enabled"
STATUS_DISABLED = "disabled"

CMD_FILE_PREFIX = ".tellme_cmd"
OUTPUT_FILE_PREFIX = ".tellme_output"


def normalize_pattern(pattern: str) -> str:
    """Strip a skip pattern and check that it survives the one-per-line file format."""

    normalized = pattern.strip()
    if normalized.splitlines() != [normalized]:
        raise InvalidPatternError(f"Invalid skip pattern {pattern!r}: must be non-empty and on one line")
    return normalized


class SessionStore:
    """Own tellme's filesystem locations and per-installation flags.

    Per-shell buffer paths are namespaced by the shell pid. The recording status
    is read once at construction; the skip list is read from disk on every call.
    """

    def __init__(
        self,
        shell_pid: int,
        *,
        config_dir: Path,
        temp_dir: Path,
    ) -> None:
        self._shell_pid = int(shell_pid)
        self._config_dir = Path(config_dir)
        self._temp_dir = Path(temp_dir)

        for directory in (self._config_dir, self._temp_dir):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StorageError(f"Cannot create directory {directory}: {exc}") from exc

        self._recording_enabled = self._load_recording_status()
        logger.debug(
            "Session store for shell %s (config=%s, temp=%s)",
            self._shell_pid,
            self._config_dir,
            self._temp_dir,
        )

    @classmethod
    def from_settings(
        cls,
        settings: TellmeSettings | None = None,
        *,
        shell_pid: int | None = None,
    ) -> "SessionStore":
        """Build a store from settings; an explicit ``shell_pid`` wins over the environment."""

        settings = settings or get_settings()
        pid = shell_pid if shell_pid is not None else settings.shell_pid
        if pid is None:
            raise ConfigurationError(
                "TELLME_SHELL_PID is not set; load the shell integration with `tellme init`"
            )
        return cls(pid, config_dir=settings.config_dir, temp_dir=settings.temp_dir)

    @property
    def shell_pid(self) -> int:
        return self._shell_pid

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def temp_dir(self) -> Path:
        return self._temp_dir

    @property
    def status_file(self) -> Path:
        return self._config_dir / "status"

    @property
    def skip_commands_file(self) -> Path:
        return self._config_dir / "skip_commands"

    def cmd_file(self) -> Path:
        """Path of the file holding the current shell's command line."""

        return self._temp_dir / f"{CMD_FILE_PREFIX}_{self._shell_pid}"

    def output_file(self) -> Path:
        """Path of the file the current shell redirects command output into."""

        return self._temp_dir / f"{OUTPUT_FILE_PREFIX}_{self._shell_pid}"

    def temp_files(self) -> list[Path]:
        return [self.cmd_file(), self.output_file()]

    def _load_recording_status(self) -> bool:
        path = self.status_file
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No status file at %s; recording defaults to disabled", path)
            self._write_atomic(path, STATUS_DISABLED)
            return False
        except OSError as exc:
            raise StorageError(f"Cannot read status file {path}: {exc}") from exc
        return content.strip() == STATUS_ENABLED

    def is_recording_enabled(self) -> bool:
        return self._recording_enabled

    def set_recording_enabled(self, enabled: bool) -> None:
        """Persist the recording flag and update the cached value."""

        self._write_atomic(self.status_file, STATUS_ENABLED if enabled else STATUS_DISABLED)
        self._recording_enabled = bool(enabled)
        logger.debug("Recording %s", STATUS_ENABLED if enabled else STATUS_DISABLED)

    def skip_commands(self) -> list[str]:
        """Return the saved skip list, or the built-in defaults if none was saved."""

        path = self.skip_commands_file
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return list(DEFAULT_SKIP_COMMANDS)
        except OSError as exc:
            raise StorageError(f"Cannot read skip list {path}: {exc}") from exc
        return [line.strip() for line in content.splitlines() if line.strip()]

    def save_skip_commands(self, commands: Iterable[str]) -> None:
        """Overwrite the skip list, one pattern per line in the given order."""

        commands = list(commands)
        for command in commands:
            if normalize_pattern(command) != command:
                raise InvalidPatternError(f"Invalid skip pattern {command!r}: surrounding whitespace")
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create directory {self._config_dir}: {exc}") from exc
        self._write_atomic(self.skip_commands_file, "\n".join(commands))

    def _write_atomic(self, path: Path, content: str) -> None:
        # Readers either see the old file or the new one, never a partial write.
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(content)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc


__all__ = [
    "CMD_FILE_PREFIX",
    "DEFAULT_SKIP_COMMANDS",
    "OUTPUT_FILE_PREFIX",
    "STATUS_DISABLED",
    "STATUS_ENABLED",
    "SessionStore",
    "normalize_pattern",
]
