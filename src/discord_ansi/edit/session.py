"""FormattingSession - owns one document on behalf of an editing surface.

The session is the caller the core expects: a single-threaded owner that
feeds selections and style commands in, and pulls serialized output out.
Hosts that share a session across threads must serialize their calls.
"""

from __future__ import annotations

import logging
from pathlib import Path

from discord_ansi.core.document import AnnotatedDocument
from discord_ansi.core.errors import DocumentFormatError, InvalidSelection
from discord_ansi.core.styles import StyleAttribute, StyleKind, lookup, lookup_name
from discord_ansi.edit.formatting import apply_style, reset_formatting
from discord_ansi.edit.selection import Selection
from discord_ansi.render.ansi import FENCE_LANGUAGE, AnsiSerializer, fence

logger = logging.getLogger(__name__)


class FormattingSession:
    """Editing session over a single annotated document.

    Example:
        session = FormattingSession("hello world")
        session.apply(0, 5, "foreground", 31)
        session.apply_named(6, 11, "style", "bold")
        print(session.clipboard_text())
    """

    def __init__(
        self,
        text: str = '',
        fence_language: str = FENCE_LANGUAGE,
    ) -> None:
        """Initialize with plain text.

        Args:
            text: Initial plain text (one unstyled run)
            fence_language: Language tag for clipboard code fences
        """
        self.fence_language = fence_language
        self._document = AnnotatedDocument.from_text(text)
        self._serializer = AnsiSerializer()

    @classmethod
    def from_document(cls, document: AnnotatedDocument, **kwargs) -> FormattingSession:
        """Create a session that takes ownership of an existing document."""
        session = cls(**kwargs)
        session._document = document
        return session

    @classmethod
    def load(cls, path: Path | str, **kwargs) -> FormattingSession:
        """Load a session from a saved JSON document."""
        from discord_ansi.render.json_format import JsonParser
        try:
            text = Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocumentFormatError(f"Document is not valid UTF-8: {e}") from e
        document = JsonParser().parse(text)
        return cls.from_document(document, **kwargs)

    def save(self, path: Path | str) -> None:
        """Save the document as JSON."""
        from discord_ansi.render.json_format import JsonRenderer
        Path(path).write_text(JsonRenderer().render(self._document), encoding="utf-8")

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def document(self) -> AnnotatedDocument:
        return self._document

    @property
    def plain_text(self) -> str:
        return self._document.text

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def load_text(self, text: str) -> None:
        """Replace the document with new plain text, discarding all styles."""
        self._document = AnnotatedDocument.from_text(text)
        logger.debug("Loaded %d chars of plain text", len(text))

    def apply(self, start: int, end: int, kind: StyleKind | str, code: int) -> None:
        """Apply a registry style, by code, to [start, end)."""
        attribute = lookup(kind, code).attribute
        self.apply_attribute(Selection(start, end), attribute)

    def apply_named(self, start: int, end: int, kind: StyleKind | str, name: str) -> None:
        """Apply a registry style, by display name, to [start, end)."""
        attribute = lookup_name(kind, name).attribute
        self.apply_attribute(Selection(start, end), attribute)

    def apply_attribute(self, selection: Selection, attribute: StyleAttribute) -> None:
        apply_style(self._document, selection, attribute)

    def try_apply(self, start: int, end: int, kind: StyleKind | str, code: int) -> bool:
        """Like apply, but treat an invalid selection as a no-op.

        Returns:
            True if the selection was valid and the style was applied
        """
        try:
            self.apply(start, end, kind, code)
        except InvalidSelection as e:
            logger.debug("Ignoring selection: %s", e)
            return False
        return True

    def reset(self) -> None:
        """Strip all formatting."""
        reset_formatting(self._document)
        logger.debug("Formatting reset")

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def serialize(self) -> str:
        """Return the ANSI-escaped text (unfenced)."""
        return self._serializer.render(self._document)

    def clipboard_text(self) -> str:
        """Return the ANSI text wrapped in a code fence, ready to paste."""
        return fence(self.serialize(), self.fence_language)
