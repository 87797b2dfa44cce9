"""Command-line interface for tellme."""

from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.markup import escape

from . import __version__
from .capture import CaptureSession
from .config import TellmeSettings, get_settings
from .errors import NoPreviousCaptureError, TellmeError
from .export import export_to_clipboard, export_to_file
from .shell import SUPPORTED_SHELLS, integration_script
from .storage import DEFAULT_SKIP_COMMANDS, SessionStore, normalize_pattern

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def configure_logging(level: str) -> None:
    """Configure root logging; records go to stderr so stdout stays machine-readable."""

    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )


def load_store(settings: TellmeSettings) -> SessionStore:
    return SessionStore.from_settings(settings)


def cmd_on(args: argparse.Namespace, store: SessionStore) -> None:
    store.set_recording_enabled(True)
    console.print("[green]✔[/green] tellme recording is now [bold green]ENABLED[/bold green]")


def cmd_off(args: argparse.Namespace, store: SessionStore) -> None:
    store.set_recording_enabled(False)
    console.print("[green]✔[/green] tellme recording is now [bold yellow]DISABLED[/bold yellow]")


def cmd_status(args: argparse.Namespace, store: SessionStore) -> None:
    if store.is_recording_enabled():
        console.print("tellme recording is [bold green]ENABLED[/bold green]")
    else:
        console.print("tellme recording is [bold yellow]DISABLED[/bold yellow]")


def cmd_internal(args: argparse.Namespace, store: SessionStore) -> None:
    session = CaptureSession(store)

    if args.should_prepare is not None:
        print("true" if session.should_prepare(args.should_prepare) else "false")
    elif args.prepare is not None:
        print(session.prepare_new_command(args.prepare))
    elif args.cleanup:
        session.cleanup()


def cmd_config(args: argparse.Namespace, store: SessionStore) -> None:
    if args.list:
        skip_commands = store.skip_commands()
        if not skip_commands:
            console.print("[dim]No commands in skip list.[/dim]")
            return
        console.print("[bold underline]Commands to skip:[/bold underline]")
        for command in skip_commands:
            console.print(f"  [cyan]•[/cyan] {escape(command)}")
        return

    if args.add is not None:
        pattern = normalize_pattern(args.add)
        skip_commands = store.skip_commands()
        if pattern in skip_commands:
            console.print(f"[yellow]![/yellow] '[bold]{escape(pattern)}[/bold]' is already in skip list")
            return
        skip_commands.append(pattern)
        store.save_skip_commands(skip_commands)
        console.print(f"[green]✔[/green] Added '[bold]{escape(pattern)}[/bold]' to skip list")
        return

    if args.remove is not None:
        pattern = normalize_pattern(args.remove)
        skip_commands = store.skip_commands()
        if pattern not in skip_commands:
            console.print(f"[red]✘[/red] '[bold]{escape(pattern)}[/bold]' is not in skip list")
            return
        store.save_skip_commands([command for command in skip_commands if command != pattern])
        console.print(f"[green]✔[/green] Removed '[bold]{escape(pattern)}[/bold]' from skip list")
        return

    if args.clear:
        store.save_skip_commands([])
        console.print("[green]✔[/green] Cleared all skip commands")
        return

    if args.reset:
        store.save_skip_commands(DEFAULT_SKIP_COMMANDS)
        console.print("[green]✔[/green] Reset skip commands to defaults")


def cmd_export(args: argparse.Namespace, store: SessionStore) -> None:
    session = CaptureSession(store)
    try:
        record = session.last_capture()
    except NoPreviousCaptureError as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
        err_console.print(
            "Maybe recording was disabled? Run 'tellme status' to check, "
            "or last command was skipped."
        )
        return

    if args.clipboard:
        export_to_clipboard(record, raw=args.raw)
        console.print("[green]✔[/green] Output copied to clipboard.")
    else:
        path = export_to_file(record, args.output, raw=args.raw)
        console.print(f"[green]✔[/green] Output saved to [bold]{escape(str(path))}[/bold]")


def cmd_init(args: argparse.Namespace) -> None:
    print(integration_script(args.shell), end="")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tellme",
        description="Captures the output of the last command.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-o",
        "--output",
        help="Output filename (default: a timestamped tellme_*.log in the current directory)",
    )
    parser.add_argument(
        "-c",
        "--clipboard",
        action="store_true",
        help="Copy the output to the clipboard instead of writing a file",
    )
    parser.add_argument(
        "-r",
        "--raw",
        action="store_true",
        help="Keep ANSI colors (default is to strip them)",
    )
    parser.set_defaults(func=cmd_export)
    sub = parser.add_subparsers(dest="cmd")

    p_on = sub.add_parser("on", help="Enable tellme output recording")
    p_on.set_defaults(func=cmd_on)

    p_off = sub.add_parser("off", help="Disable tellme output recording")
    p_off.set_defaults(func=cmd_off)

    p_status = sub.add_parser("status", help="Show the current recording status")
    p_status.set_defaults(func=cmd_status)

    p_internal = sub.add_parser("internal", help="Internal commands for shell integration")
    internal_group = p_internal.add_mutually_exclusive_group(required=True)
    internal_group.add_argument("--should-prepare", metavar="COMMAND")
    internal_group.add_argument("--prepare", metavar="COMMAND")
    internal_group.add_argument("--cleanup", action="store_true")
    p_internal.set_defaults(func=cmd_internal)

    p_config = sub.add_parser("config", help="Configure commands that won't be captured")
    config_group = p_config.add_mutually_exclusive_group(required=True)
    config_group.add_argument("--list", action="store_true", help="List skip commands")
    config_group.add_argument("--add", metavar="COMMAND", help="Add a command or prefix* pattern")
    config_group.add_argument("--remove", metavar="COMMAND", help="Remove a skip command")
    config_group.add_argument("--clear", action="store_true", help="Remove all skip commands")
    config_group.add_argument("--reset", action="store_true", help="Restore the default skip commands")
    p_config.set_defaults(func=cmd_config)

    p_init = sub.add_parser("init", help="Print the shell integration script")
    p_init.add_argument("shell", choices=SUPPORTED_SHELLS)
    p_init.set_defaults(func=cmd_init)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.func is cmd_init:
        cmd_init(args)
        return

    try:
        settings = get_settings()
        configure_logging(settings.log_level)
        store = load_store(settings)
        args.func(args, store)
    except TellmeError as exc:
        logger.debug("tellme failed", exc_info=True)
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
