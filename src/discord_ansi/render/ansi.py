"""Serialize annotated documents to ANSI SGR escape sequences."""

from discord_ansi.core.document import AnnotatedDocument
from discord_ansi.core.run import Run

ESC = '\x1b'
RESET = f"{ESC}[0m"
FENCE_LANGUAGE = "ansi"


class AnsiSerializer:
    """
    Render a document to a single ANSI-escaped string.

    Each styled run is wrapped in its own prefix/suffix pair: one combined
    SGR prefix listing the run's codes in insertion order, then the text,
    then a full reset. Adjacent runs with equal styles are not merged.
    Plain runs are emitted as raw text.
    """

    def render(self, document: AnnotatedDocument) -> str:
        """Render document to ANSI string."""
        return ''.join(self.render_run(run) for run in document.runs)

    def render_run(self, run: Run) -> str:
        """Render a single run."""
        if run.is_plain():
            return run.text
        params = ';'.join(attribute.to_sgr() for attribute in run.attributes)
        return f"{ESC}[{params}m{run.text}{RESET}"


def serialize(document: AnnotatedDocument) -> str:
    """Serialize a document to an ANSI string."""
    return AnsiSerializer().render(document)


def fence(payload: str, language: str = FENCE_LANGUAGE) -> str:
    """Wrap a payload in a fenced code block for chat renderers."""
    return f"```{language}\n{payload}\n```"
