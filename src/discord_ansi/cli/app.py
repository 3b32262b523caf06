"""Typer CLI application."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.table import Table
    from rich.text import Text
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from discord_ansi.core.errors import DiscordAnsiError
from discord_ansi.core.styles import StyleAttribute, StyleKind, list_styles, lookup, lookup_name
from discord_ansi.edit.selection import Selection
from discord_ansi.edit.session import FormattingSession


class OutputFormat(str, Enum):
    """Output formats for rendered documents."""
    ANSI = "ansi"
    HTML = "html"
    TEXT = "text"
    JSON = "json"


def parse_apply_spec(spec: str) -> tuple[StyleKind, str, Selection]:
    """Parse ``kind:style:start-end`` (style is a code or a display name)."""
    try:
        kind_part, rest = spec.split(":", 1)
        style_part, range_part = rest.rsplit(":", 1)
        start_part, end_part = range_part.split("-", 1)
        selection = Selection(int(start_part), int(end_part))
    except ValueError:
        raise ValueError(f"Expected kind:style:start-end, got {spec!r}") from None
    return StyleKind.parse(kind_part), style_part, selection


def _resolve(kind: StyleKind, style: str) -> StyleAttribute:
    if style.isdigit():
        return lookup(kind, int(style)).attribute
    return lookup_name(kind, style).attribute


def _render(session: FormattingSession, output: OutputFormat, fenced: bool) -> str:
    if output is OutputFormat.ANSI:
        return session.clipboard_text() if fenced else session.serialize()
    if output is OutputFormat.HTML:
        from discord_ansi.render.html import HtmlRenderer
        return HtmlRenderer().render(session.document)
    if output is OutputFormat.JSON:
        from discord_ansi.render.json_format import JsonRenderer
        return JsonRenderer().render(session.document)
    return session.plain_text


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: pip install discord-ansi-text[cli]")

    app = typer.Typer(
        name="discord-ansi",
        help="Mark up text with colors and styles for Discord ```ansi code blocks.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.DEBUG)

    @app.command()
    def styles(
        kind: Annotated[Optional[str], typer.Option("--kind", "-k", help="foreground, background or style")] = None,
    ) -> None:
        """List the available colors and text styles."""
        try:
            entries = list_styles(kind)
        except DiscordAnsiError as e:
            err_console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        table = Table(title="Styles")
        table.add_column("Kind")
        table.add_column("Code", justify="right")
        table.add_column("Name")
        table.add_column("Preview")

        for entry in entries:
            if entry.kind is StyleKind.FOREGROUND:
                preview = Text(entry.render_hint, style=entry.render_hint)
            elif entry.kind is StyleKind.BACKGROUND:
                preview = Text(entry.render_hint, style=f"on {entry.render_hint}")
            else:
                preview = Text(entry.name, style=entry.render_hint)
            table.add_row(entry.kind.value, str(entry.code), entry.name, preview)

        console.print(table)

    @app.command()
    def format(
        text: Annotated[str, typer.Argument(help="Plain text to mark up")],
        apply: Annotated[Optional[list[str]], typer.Option("--apply", "-a", help="kind:style:start-end, e.g. fg:red:0-5")] = None,
        output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.ANSI,
        fenced: Annotated[bool, typer.Option("--fence/--no-fence", help="Wrap ANSI output in a code fence")] = True,
    ) -> None:
        """Apply styles to TEXT and print the result."""
        session = FormattingSession(text)

        try:
            for spec in apply or []:
                kind, style, selection = parse_apply_spec(spec)
                session.apply_attribute(selection, _resolve(kind, style))
        except (DiscordAnsiError, ValueError) as e:
            err_console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        print(_render(session, output, fenced))

    @app.command()
    def convert(
        source: Annotated[Path, typer.Argument(help="Saved JSON document")],
        output: Annotated[OutputFormat, typer.Option("--format", "-f", help="Output format")] = OutputFormat.ANSI,
        fenced: Annotated[bool, typer.Option("--fence/--no-fence", help="Wrap ANSI output in a code fence")] = True,
        dest: Annotated[Optional[Path], typer.Option("--dest", "-d", help="Write to file instead of stdout")] = None,
    ) -> None:
        """Render a saved JSON document to ANSI, HTML, or plain text."""
        try:
            session = FormattingSession.load(source)
        except (DiscordAnsiError, OSError) as e:
            err_console.print(f"[red]Could not load {source}: {e}[/]")
            raise typer.Exit(1)

        result = _render(session, output, fenced)
        if dest is None:
            print(result)
        else:
            dest.write_text(result, encoding="utf-8")
            console.print(f"[green]Converted {source} → {dest}[/]")

    return app
