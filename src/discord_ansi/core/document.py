"""AnnotatedDocument - the runs that make up the whole session state."""

from dataclasses import dataclass, field
from typing import Iterator

from discord_ansi.core.run import Run


@dataclass
class AnnotatedDocument:
    """
    Plain text partitioned into styled runs.

    The concatenation of all run texts, in order, is the document text.
    Runs never overlap and leave no gaps. A single run may be empty, and
    then the document text is empty; a document with several runs has no
    empty run.
    """
    runs: list[Run] = field(default_factory=lambda: [Run()])

    @classmethod
    def from_text(cls, text: str = '') -> "AnnotatedDocument":
        """Create a document holding text as one plain run."""
        return cls(runs=[Run(text)])

    @property
    def text(self) -> str:
        """The flattened plain text."""
        return ''.join(run.text for run in self.runs)

    def __len__(self) -> int:
        return sum(len(run) for run in self.runs)

    def __iter__(self) -> Iterator[Run]:
        return iter(self.runs)

    def spans(self) -> Iterator[tuple[int, int, Run]]:
        """Iterate (start, end, run) with end-exclusive offsets."""
        offset = 0
        for run in self.runs:
            yield offset, offset + len(run), run
            offset += len(run)

    def is_plain(self) -> bool:
        """Check if no run carries any attribute."""
        return all(run.is_plain() for run in self.runs)

    def copy(self) -> "AnnotatedDocument":
        """Create a deep copy of this document."""
        return AnnotatedDocument(runs=[run.copy() for run in self.runs])

    def check_partition(self) -> None:
        """Raise ValueError if the runs do not form a valid partition."""
        if not self.runs:
            raise ValueError("document has no runs")
        if len(self.runs) > 1 and not all(run.text for run in self.runs):
            raise ValueError("empty run in multi-run document")
        for run in self.runs:
            kinds = [attribute.kind for attribute in run.attributes]
            if len(kinds) != len(set(kinds)):
                raise ValueError(f"duplicate attribute kind in {run!r}")
