"""
discord-ansi: colored text for Discord ```ansi code blocks

Mark up plain text with foreground colors, background colors, bold and
underline, then serialize it to ANSI SGR escape sequences.

Quick Start:
    >>> import discord_ansi as da
    >>> doc = da.AnnotatedDocument.from_text("hello world")
    >>> doc = da.apply_style(doc, (0, 5), da.StyleAttribute.foreground(31))
    >>> print(da.fence(da.serialize(doc)))

Features:
    - Overlapping color/background/style ranges over plain text
    - Same-kind replacement (a new color replaces the old one)
    - Deterministic run-by-run ANSI serialization
    - HTML preview, plain text and JSON save formats
"""

__version__ = "0.1.0"

# Core types
from discord_ansi.core.document import AnnotatedDocument
from discord_ansi.core.run import Run
from discord_ansi.core.styles import StyleAttribute, StyleEntry, StyleKind, lookup, lookup_name, list_styles
from discord_ansi.core.errors import DiscordAnsiError, DocumentFormatError, InvalidSelection, UnknownStyle

# Editing
from discord_ansi.edit.selection import Selection
from discord_ansi.edit.formatting import apply_style, reset_formatting
from discord_ansi.edit.session import FormattingSession

# Output
from discord_ansi.render.ansi import serialize, fence

__all__ = [
    # Version
    "__version__",
    # Core types
    "AnnotatedDocument",
    "Run",
    "StyleAttribute",
    "StyleEntry",
    "StyleKind",
    "lookup",
    "lookup_name",
    "list_styles",
    # Errors
    "DiscordAnsiError",
    "DocumentFormatError",
    "InvalidSelection",
    "UnknownStyle",
    # Editing
    "Selection",
    "apply_style",
    "reset_formatting",
    "FormattingSession",
    # Output
    "serialize",
    "fence",
]
