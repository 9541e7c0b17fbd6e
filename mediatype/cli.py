"""Command-line front end: one-shot commands or an interactive shell."""

from __future__ import annotations

import argparse
import asyncio
import logging
import shlex
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import FileHistory
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import settings
from .media.classify import classify
from .media.extensions import media_type_for_file_extension, media_type_for_path
from .media.media_type import MediaType, parse_media_type

logger = logging.getLogger(__name__)

console = Console()


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mediatype", description="Parse, match and look up media types."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("parse", help="show the parts of a media type string")
    p.add_argument("text")

    p = sub.add_parser("match", help="check whether two media types are compatible")
    p.add_argument("first")
    p.add_argument("second")

    for name, arg, helptext in (
        ("ext", "extension", "look up a file extension (without the dot)"),
        ("file", "path", "look up the media type of a file name"),
    ):
        p = sub.add_parser(name, help=helptext)
        p.add_argument(arg)
        p.add_argument(
            "--fallback",
            action="store_true",
            help="print MEDIATYPE_FALLBACK instead of failing on unknown input",
        )
    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _parse_or_report(text: str) -> MediaType | None:
    result = parse_media_type(text)
    if not result:
        console.print(f"[red]{escape(result.message)}[/red]", highlight=False)
        return None
    return result.value


def _cmd_parse(text: str) -> int:
    media_type = _parse_or_report(text)
    if media_type is None:
        return 1

    table = Table(show_header=False, box=None)
    table.add_row("type", escape(media_type.type))
    table.add_row("subtype", escape(media_type.subtype))
    for key, value in media_type.parameters.items():
        table.add_row(f"param {escape(key)}", escape(value))
    table.add_row("category", classify(media_type))
    console.print(table)
    return 0


def _cmd_match(first: str, second: str) -> int:
    a = _parse_or_report(first)
    b = _parse_or_report(second)
    if a is None or b is None:
        return 1
    if a.matches(b):
        console.print(f"[green]{escape(a.essence)} matches {escape(b.essence)}[/green]", highlight=False)
        return 0
    console.print(f"[yellow]{escape(a.essence)} does not match {escape(b.essence)}[/yellow]", highlight=False)
    return 1


def _report_lookup(label: str, media_type: MediaType | None, fallback: bool) -> int:
    if media_type is not None:
        console.print(escape(str(media_type)), highlight=False)
        return 0
    if fallback:
        logger.info("No media type for %r, using fallback", label)
        console.print(escape(str(settings.cfg.fallback)), highlight=False)
        return 0
    console.print(f"[red]Unknown extension: {escape(label)}[/red]", highlight=False)
    return 1


def run(argv: list[str]) -> int:
    """Execute one command and return its exit status."""
    args = _create_parser().parse_args(argv)
    if args.command == "parse":
        return _cmd_parse(args.text)
    if args.command == "match":
        return _cmd_match(args.first, args.second)
    if args.command == "ext":
        return _report_lookup(
            args.extension, media_type_for_file_extension(args.extension), args.fallback
        )
    return _report_lookup(args.path, media_type_for_path(args.path), args.fallback)


# ---------------------------------------------------------------------------
# Interactive shell
# ---------------------------------------------------------------------------


def handle_line(line: str) -> int:
    """Run one shell line; usage errors are reported instead of exiting."""
    try:
        argv = shlex.split(line)
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        return 2
    try:
        return run(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 2


async def _shell() -> None:
    console.print(
        "[bold green]mediatype[/bold green] shell\n"
        "Commands: [bold]parse[/bold], [bold]match[/bold], [bold]ext[/bold], "
        "[bold]file[/bold]. Type [bold]/quit[/bold] to exit.\n"
    )
    prompt_session: PromptSession[str] = PromptSession(
        history=FileHistory(str(settings.cfg.history_file))
    )

    while True:
        try:
            user_input = await asyncio.to_thread(prompt_session.prompt, HTML("<b>mediatype &gt;</b> "))
        except (EOFError, KeyboardInterrupt):
            break

        text = user_input.strip()
        if not text:
            continue
        if text.lower() in ("/quit", "/exit"):
            break
        handle_line(text)

    console.print("[dim]Goodbye.[/dim]")


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=settings.cfg.log_level,
        format="%(asctime)s  %(name)s  %(levelname)s  %(message)s",
    )
    if not argv:
        try:
            asyncio.run(_shell())
        except KeyboardInterrupt:
            pass
        return
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
