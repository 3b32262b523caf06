"""Render annotated documents to plain text (strip styles)."""

from discord_ansi.core.document import AnnotatedDocument


class TextRenderer:
    """Render a document to plain text without any styling."""

    def render(self, document: AnnotatedDocument) -> str:
        """Render document to plain text."""
        return document.text
