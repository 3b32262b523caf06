"""Formatting operations: apply a style to a selection, or clear all styles.

Both operations mutate the document in place and return it. A failed call
leaves the document exactly as it was: every check happens before the run
list is replaced.
"""

import logging

from discord_ansi.core.document import AnnotatedDocument
from discord_ansi.core.run import Run
from discord_ansi.core.styles import StyleAttribute, validate
from discord_ansi.edit.selection import Selection

logger = logging.getLogger(__name__)


def apply_style(
    document: AnnotatedDocument,
    selection: Selection | tuple[int, int],
    attribute: StyleAttribute,
) -> AnnotatedDocument:
    """Apply a style to exactly the selected text.

    Runs overlapping the selection are split at its boundaries, giving up
    to three pieces (before, inside, after). Pieces inside the selection
    keep their existing attributes and gain ``attribute``, replacing any
    attribute of the same kind. Runs outside the selection are untouched.

    Args:
        document: Document to modify
        selection: End-exclusive (start, end) range into the document text
        attribute: Style to apply

    Returns:
        The same document, modified in place

    Raises:
        UnknownStyle: If the attribute is not in the style registry
        InvalidSelection: If the range is reversed or out of bounds
    """
    validate(attribute)
    selection = Selection.coerce(selection)
    selection.validate(len(document))

    if selection.is_empty:
        logger.debug("Empty selection at %d, nothing to format", selection.start)
        return document

    start, end = selection.start, selection.end
    runs: list[Run] = []

    for run_start, run_end, run in document.spans():
        if run_end <= start or run_start >= end:
            runs.append(run)
            continue

        cut_start = max(start, run_start) - run_start
        cut_end = min(end, run_end) - run_start

        before = run.text[:cut_start]
        inside = run.text[cut_start:cut_end]
        after = run.text[cut_end:]

        if before:
            runs.append(run.with_text(before))

        styled = run.with_text(inside)
        styled.upsert(attribute)
        runs.append(styled)

        if after:
            runs.append(run.with_text(after))

    logger.debug(
        "Applied %s=%d to [%d, %d): %d runs -> %d runs",
        attribute.kind.value, attribute.code, start, end,
        len(document.runs), len(runs),
    )
    document.runs = runs
    return document


def reset_formatting(document: AnnotatedDocument) -> AnnotatedDocument:
    """Strip all styles, leaving one plain run over the full text."""
    document.runs = [Run(document.text)]
    return document
