"""Export of the last capture to a file or the clipboard."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from ..capture import CaptureRecord
from ..errors import ClipboardUnavailableError, StorageError
from .ansi import strip_ansi

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 29


def render_output(record: CaptureRecord, *, raw: bool = False) -> str:
    """Decode the captured output, stripping escape sequences unless ``raw``."""

    content = record.output if raw else strip_ansi(record.output)
    return content.decode("utf-8", errors="replace")


def compose_record(command: str, content: str) -> str:
    return f"Command:\n{command}\n{SEPARATOR}\n\n{content}\n"


def default_export_name(now: datetime | None = None) -> str:
    timestamp = (now or datetime.now()).strftime("%Y-%m-%d_%H-%M-%S")
    return f"tellme_{timestamp}.log"


def export_to_file(
    record: CaptureRecord,
    target: Path | str | None = None,
    *,
    raw: bool = False,
    clock: Callable[[], datetime] | None = None,
) -> Path:
    """Write the composed record to ``target`` (or a timestamped file) and return its path."""

    path = Path(target) if target else Path(default_export_name((clock or datetime.now)()))
    text = compose_record(record.command, render_output(record, raw=raw))
    try:
        path.write_text(text, encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise StorageError(f"Cannot write export file {path}: {exc}") from exc
    logger.debug("Exported capture to %s (raw=%s)", path, raw)
    return path


def _default_clipboard_writer(text: str) -> None:
    import pyperclip

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardUnavailableError(f"Clipboard is unavailable: {exc}") from exc


def export_to_clipboard(
    record: CaptureRecord,
    *,
    raw: bool = False,
    clipboard_writer: Callable[[str], None] | None = None,
) -> str:
    """Place the decoded output on the clipboard and return the copied text."""

    text = render_output(record, raw=raw)
    writer = clipboard_writer or _default_clipboard_writer
    writer(text)
    logger.debug("Copied %d characters to clipboard", len(text))
    return text


__all__ = [
    "compose_record",
    "default_export_name",
    "export_to_clipboard",
    "export_to_file",
    "render_output",
]
