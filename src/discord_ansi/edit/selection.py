"""Selection - an end-exclusive offset range into a document's text."""

from dataclasses import dataclass

from discord_ansi.core.errors import InvalidSelection


@dataclass(frozen=True)
class Selection:
    """
    A caret/selection range over the plain text.

    Offsets are Python string indices (code points), end-exclusive.
    A selection with start == end is a caret and selects nothing.
    """
    start: int
    end: int

    @classmethod
    def coerce(cls, value: "Selection | tuple[int, int]") -> "Selection":
        """Accept a Selection or a (start, end) pair."""
        if isinstance(value, Selection):
            return value
        start, end = value
        return cls(start, end)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def __len__(self) -> int:
        return self.end - self.start

    def validate(self, length: int) -> None:
        """Raise InvalidSelection unless 0 <= start <= end <= length."""
        if not 0 <= self.start <= self.end <= length:
            raise InvalidSelection(self.start, self.end, length)
