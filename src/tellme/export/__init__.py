"""Retrieval and export of captured output."""

from .ansi import strip_ansi
from .writer import (
    compose_record,
    default_export_name,
    export_to_clipboard,
    export_to_file,
    render_output,
)

__all__ = [
    "compose_record",
    "default_export_name",
    "export_to_clipboard",
    "export_to_file",
    "render_output",
    "strip_ansi",
]
