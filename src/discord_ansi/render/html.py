"""Render annotated documents to an HTML preview."""

from discord_ansi.core.document import AnnotatedDocument
from discord_ansi.core.run import Run
from discord_ansi.core.styles import StyleKind, lookup


# Discord code block colors
DEFAULT_BACKGROUND = "#2F3136"
DEFAULT_FOREGROUND = "#B9BBBE"


class HtmlRenderer:
    """Render a document to HTML using each style's render hint."""

    def __init__(
        self,
        css_class: str = "discord-ansi",
        font_family: str = "monospace",
        background: str = DEFAULT_BACKGROUND,
        foreground: str = DEFAULT_FOREGROUND,
    ):
        self.css_class = css_class
        self.font_family = font_family
        self.background = background
        self.foreground = foreground

    def render(self, document: AnnotatedDocument) -> str:
        """Render document to HTML string."""
        body = ''.join(self._render_run(run) for run in document.runs)

        css_class = self._escape_html(self.css_class)
        font_family = self._escape_html(self.font_family)
        background = self._escape_html(self.background)
        foreground = self._escape_html(self.foreground)

        return (
            f'<pre class="{css_class}" style="font-family: {font_family}; '
            f'background-color: {background}; color: {foreground}; '
            f'white-space: pre-wrap; padding: 10px;">{body}</pre>'
        )

    def _render_run(self, run: Run) -> str:
        text = self._escape_html(run.text)
        if run.is_plain():
            return text

        style = "; ".join(self._css_for(run))
        return f'<span style="{style}">{text}</span>'

    def _css_for(self, run: Run) -> list[str]:
        """Convert a run's attributes to CSS declarations."""
        declarations: list[str] = []
        for attribute in run.attributes:
            hint = lookup(attribute.kind, attribute.code).render_hint
            if attribute.kind is StyleKind.FOREGROUND:
                declarations.append(f"color: {hint}")
            elif attribute.kind is StyleKind.BACKGROUND:
                declarations.append(f"background-color: {hint}")
            elif hint == "bold":
                declarations.append("font-weight: bold")
            elif hint == "underline":
                declarations.append("text-decoration: underline")
        return declarations

    def _escape_html(self, text: str) -> str:
        """Escape special HTML characters."""
        return (text
            .replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace('"', '&quot;')
        )
