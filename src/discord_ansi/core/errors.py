"""Exceptions raised by the annotation and serialization engine."""


class DiscordAnsiError(Exception):
    """Base class for all discord-ansi errors."""


class InvalidSelection(DiscordAnsiError, ValueError):
    """Selection offsets are reversed or fall outside the document text."""

    def __init__(self, start: int, end: int, length: int):
        self.start = start
        self.end = end
        self.length = length
        super().__init__(
            f"Invalid selection [{start}, {end}) for text of length {length}"
        )


class UnknownStyle(DiscordAnsiError, LookupError):
    """Style kind/code (or name) is not present in the registry."""

    def __init__(self, kind: object, code: object):
        self.kind = kind
        self.code = code
        super().__init__(f"Unknown style: {kind}={code!r}")


class DocumentFormatError(DiscordAnsiError, ValueError):
    """A serialized document could not be loaded."""
