"""Style registry - the catalog of selectable colors and text styles.

Codes are SGR parameters. Render hints are what a preview surface uses to
show the style (a CSS color for colors, a font effect for text styles).
"""

from dataclasses import dataclass
from enum import Enum

from discord_ansi.core.errors import UnknownStyle


class StyleKind(Enum):
    """Attribute kind. Exclusivity applies within a kind, not across kinds."""
    FOREGROUND = "foreground"
    BACKGROUND = "background"
    TEXT_STYLE = "textstyle"

    @classmethod
    def parse(cls, value: "str | StyleKind") -> "StyleKind":
        """Parse a kind from its value or a short alias (fg, bg, style)."""
        if isinstance(value, StyleKind):
            return value
        if not isinstance(value, str):
            raise UnknownStyle(value, None)
        kind = _KIND_ALIASES.get(value.strip().lower())
        if kind is None:
            raise UnknownStyle(value, None)
        return kind


_KIND_ALIASES = {
    "foreground": StyleKind.FOREGROUND,
    "fg": StyleKind.FOREGROUND,
    "background": StyleKind.BACKGROUND,
    "bg": StyleKind.BACKGROUND,
    "textstyle": StyleKind.TEXT_STYLE,
    "style": StyleKind.TEXT_STYLE,
    "styles": StyleKind.TEXT_STYLE,
}


@dataclass(frozen=True)
class StyleAttribute:
    """A style applied to text: a kind plus its SGR code."""
    kind: StyleKind
    code: int

    @classmethod
    def foreground(cls, code: int) -> "StyleAttribute":
        return cls(StyleKind.FOREGROUND, code)

    @classmethod
    def background(cls, code: int) -> "StyleAttribute":
        return cls(StyleKind.BACKGROUND, code)

    @classmethod
    def text_style(cls, code: int) -> "StyleAttribute":
        return cls(StyleKind.TEXT_STYLE, code)

    def to_sgr(self) -> str:
        """Return the SGR parameter for this attribute."""
        return str(self.code)


@dataclass(frozen=True)
class StyleEntry:
    """Registry metadata for one selectable style."""
    kind: StyleKind
    code: int
    name: str
    render_hint: str  # CSS color for colors, font effect for text styles

    @property
    def attribute(self) -> StyleAttribute:
        return StyleAttribute(self.kind, self.code)


# Colors tuned for Discord's dark theme (Solarized-derived palette)
FOREGROUND_STYLES = (
    StyleEntry(StyleKind.FOREGROUND, 31, "Red", "#dc322f"),
    StyleEntry(StyleKind.FOREGROUND, 32, "Green", "#859900"),
    StyleEntry(StyleKind.FOREGROUND, 33, "Gold", "#b58900"),
    StyleEntry(StyleKind.FOREGROUND, 34, "Blue", "#268bd2"),
    StyleEntry(StyleKind.FOREGROUND, 35, "Pink", "#d33682"),
    StyleEntry(StyleKind.FOREGROUND, 36, "Teal", "#2aa198"),
    StyleEntry(StyleKind.FOREGROUND, 37, "White", "#ffffff"),
)

BACKGROUND_STYLES = (
    StyleEntry(StyleKind.BACKGROUND, 40, "Dark", "#002b36"),
    StyleEntry(StyleKind.BACKGROUND, 41, "Red", "#cb4b16"),
    StyleEntry(StyleKind.BACKGROUND, 42, "Gray", "#586e75"),
    StyleEntry(StyleKind.BACKGROUND, 43, "Light Gray", "#657b83"),
    StyleEntry(StyleKind.BACKGROUND, 44, "Blue Gray", "#839496"),
    StyleEntry(StyleKind.BACKGROUND, 45, "Blurple", "#6c71c4"),
)

TEXT_STYLES = (
    StyleEntry(StyleKind.TEXT_STYLE, 1, "Bold", "bold"),
    StyleEntry(StyleKind.TEXT_STYLE, 4, "Underline", "underline"),
)

# Registry of built-in styles, keyed by (kind, code)
STYLES: dict[tuple[StyleKind, int], StyleEntry] = {
    (entry.kind, entry.code): entry
    for entry in FOREGROUND_STYLES + BACKGROUND_STYLES + TEXT_STYLES
}


def lookup(kind: "StyleKind | str", code: int) -> StyleEntry:
    """Get registry metadata for a style, raising UnknownStyle if absent."""
    kind = StyleKind.parse(kind)
    entry = STYLES.get((kind, code))
    if entry is None:
        raise UnknownStyle(kind.value, code)
    return entry


def lookup_name(kind: "StyleKind | str", name: str) -> StyleEntry:
    """Get a style by display name (case-insensitive)."""
    kind = StyleKind.parse(kind)
    wanted = name.strip().lower()
    for entry in list_styles(kind):
        if entry.name.lower() == wanted:
            return entry
    raise UnknownStyle(kind.value, name)


def list_styles(kind: "StyleKind | str | None" = None) -> list[StyleEntry]:
    """Get registry entries in catalog order, optionally for one kind."""
    if kind is None:
        return list(STYLES.values())
    kind = StyleKind.parse(kind)
    return [entry for entry in STYLES.values() if entry.kind is kind]


def validate(attribute: StyleAttribute) -> StyleEntry:
    """Check that an attribute is in the registry."""
    return lookup(attribute.kind, attribute.code)
