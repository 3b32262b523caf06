"""Core data structures for annotated text."""

from discord_ansi.core.errors import (
    DiscordAnsiError,
    DocumentFormatError,
    InvalidSelection,
    UnknownStyle,
)
from discord_ansi.core.styles import StyleAttribute, StyleEntry, StyleKind
from discord_ansi.core.run import Run
from discord_ansi.core.document import AnnotatedDocument

__all__ = [
    "AnnotatedDocument",
    "Run",
    "StyleAttribute",
    "StyleEntry",
    "StyleKind",
    "DiscordAnsiError",
    "DocumentFormatError",
    "InvalidSelection",
    "UnknownStyle",
]
