"""Renderers for outputting annotated documents to various formats."""

from discord_ansi.render.ansi import AnsiSerializer, fence, serialize
from discord_ansi.render.html import HtmlRenderer
from discord_ansi.render.text import TextRenderer
from discord_ansi.render.json_format import JsonParser, JsonRenderer

__all__ = [
    "AnsiSerializer",
    "HtmlRenderer",
    "TextRenderer",
    "JsonRenderer",
    "JsonParser",
    "serialize",
    "fence",
]
