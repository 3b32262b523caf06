"""Run - a contiguous slice of text sharing one attribute set."""

from dataclasses import dataclass, field

from discord_ansi.core.styles import StyleAttribute, StyleKind


@dataclass(slots=True)
class Run:
    """
    A slice of document text with the styles active over all of it.

    Attributes keep their insertion order; serialization emits them in
    that order. At most one attribute of each kind is present.
    """
    text: str = ''
    attributes: list[StyleAttribute] = field(default_factory=list)

    def copy(self) -> "Run":
        """Create a copy of this run."""
        return Run(text=self.text, attributes=list(self.attributes))

    def with_text(self, text: str) -> "Run":
        """Create a run with the same attributes over different text."""
        return Run(text=text, attributes=list(self.attributes))

    def is_plain(self) -> bool:
        """Check if this run carries no attributes."""
        return not self.attributes

    def get(self, kind: StyleKind) -> StyleAttribute | None:
        """Get the attribute of the given kind, if any."""
        for attribute in self.attributes:
            if attribute.kind is kind:
                return attribute
        return None

    def upsert(self, attribute: StyleAttribute) -> None:
        """Add an attribute, replacing any existing one of the same kind in place."""
        for i, existing in enumerate(self.attributes):
            if existing.kind is attribute.kind:
                self.attributes[i] = attribute
                return
        self.attributes.append(attribute)

    def __len__(self) -> int:
        return len(self.text)
