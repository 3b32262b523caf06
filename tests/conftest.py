"""Shared fixtures for document tests."""

import pytest

from discord_ansi.core.document import AnnotatedDocument
from discord_ansi.core.styles import StyleAttribute
from discord_ansi.edit.formatting import apply_style

RED = StyleAttribute.foreground(31)
GREEN = StyleAttribute.foreground(32)
RED_BG = StyleAttribute.background(41)
BLURPLE_BG = StyleAttribute.background(45)
BOLD = StyleAttribute.text_style(1)
UNDERLINE = StyleAttribute.text_style(4)


@pytest.fixture
def hello() -> AnnotatedDocument:
    """Plain 'hello world' document."""
    return AnnotatedDocument.from_text("hello world")


@pytest.fixture
def styled_hello() -> AnnotatedDocument:
    """'hello' in red, ' ' plain, 'world' in bold."""
    doc = AnnotatedDocument.from_text("hello world")
    apply_style(doc, (0, 5), RED)
    apply_style(doc, (6, 11), BOLD)
    return doc


def assert_partition(doc: AnnotatedDocument, text: str) -> None:
    """Check the runs cover text exactly."""
    doc.check_partition()
    assert ''.join(run.text for run in doc.runs) == text
