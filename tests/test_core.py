"""Tests for core data structures."""

import pytest

from discord_ansi.core.document import AnnotatedDocument
from discord_ansi.core.errors import InvalidSelection, UnknownStyle
from discord_ansi.core.run import Run
from discord_ansi.core.styles import (
    StyleAttribute,
    StyleKind,
    list_styles,
    lookup,
    lookup_name,
    validate,
)


class TestStyleRegistry:
    """Tests for the style catalog."""

    def test_lookup_foreground(self) -> None:
        entry = lookup(StyleKind.FOREGROUND, 31)
        assert entry.name == "Red"
        assert entry.render_hint == "#dc322f"
        assert entry.attribute == StyleAttribute.foreground(31)

    def test_lookup_by_alias(self) -> None:
        assert lookup("bg", 45).name == "Blurple"
        assert lookup("style", 4).render_hint == "underline"
        assert lookup("Foreground", 37).name == "White"

    def test_same_name_different_kinds(self) -> None:
        assert lookup_name("fg", "red").code == 31
        assert lookup_name("bg", "RED").code == 41
        assert lookup_name("bg", "light gray").code == 43

    def test_unknown_code(self) -> None:
        with pytest.raises(UnknownStyle):
            lookup(StyleKind.FOREGROUND, 41)
        with pytest.raises(UnknownStyle):
            lookup(StyleKind.TEXT_STYLE, 3)

    def test_unknown_name_and_kind(self) -> None:
        with pytest.raises(UnknownStyle):
            lookup_name("fg", "Purple")
        with pytest.raises(UnknownStyle):
            lookup("sparkle", 1)

    def test_unknown_style_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            validate(StyleAttribute.background(49))

    def test_list_styles(self) -> None:
        assert len(list_styles()) == 15
        assert [e.code for e in list_styles("fg")] == [31, 32, 33, 34, 35, 36, 37]
        assert [e.code for e in list_styles("bg")] == [40, 41, 42, 43, 44, 45]
        assert [e.name for e in list_styles(StyleKind.TEXT_STYLE)] == ["Bold", "Underline"]

    def test_attribute_sgr(self) -> None:
        assert StyleAttribute.text_style(1).to_sgr() == "1"
        assert StyleAttribute.background(44).to_sgr() == "44"


class TestRun:
    """Tests for Run."""

    def test_default_run(self) -> None:
        run = Run()
        assert run.text == ''
        assert run.is_plain()
        assert len(run) == 0

    def test_upsert_adds_other_kinds(self) -> None:
        run = Run("abc")
        run.upsert(StyleAttribute.foreground(31))
        run.upsert(StyleAttribute.background(41))
        assert run.attributes == [
            StyleAttribute.foreground(31),
            StyleAttribute.background(41),
        ]

    def test_upsert_replaces_same_kind_in_place(self) -> None:
        run = Run("abc", [StyleAttribute.foreground(31), StyleAttribute.background(41)])
        run.upsert(StyleAttribute.foreground(36))
        assert run.attributes == [
            StyleAttribute.foreground(36),
            StyleAttribute.background(41),
        ]
        assert run.get(StyleKind.FOREGROUND).code == 36
        assert run.get(StyleKind.TEXT_STYLE) is None

    def test_copy_is_independent(self) -> None:
        run = Run("abc", [StyleAttribute.foreground(31)])
        copy = run.copy()
        copy.upsert(StyleAttribute.text_style(1))
        assert len(run.attributes) == 1
        assert copy is not run

    def test_with_text(self) -> None:
        run = Run("abc", [StyleAttribute.foreground(31)])
        other = run.with_text("xy")
        assert other.text == "xy"
        assert other.attributes == run.attributes
        assert other.attributes is not run.attributes


class TestAnnotatedDocument:
    """Tests for AnnotatedDocument."""

    def test_default_document(self) -> None:
        doc = AnnotatedDocument()
        assert doc.text == ''
        assert len(doc) == 0
        assert len(doc.runs) == 1
        doc.check_partition()

    def test_from_text(self) -> None:
        doc = AnnotatedDocument.from_text("hello")
        assert doc.text == "hello"
        assert len(doc) == 5
        assert doc.is_plain()

    def test_spans(self) -> None:
        doc = AnnotatedDocument(runs=[Run("ab"), Run("cde"), Run("f")])
        assert [(s, e) for s, e, _ in doc.spans()] == [(0, 2), (2, 5), (5, 6)]

    def test_copy_is_deep(self) -> None:
        doc = AnnotatedDocument(runs=[Run("ab", [StyleAttribute.foreground(31)])])
        copy = doc.copy()
        copy.runs[0].upsert(StyleAttribute.foreground(32))
        assert doc.runs[0].attributes[0].code == 31
        assert copy == AnnotatedDocument(runs=[Run("ab", [StyleAttribute.foreground(32)])])

    def test_check_partition_rejects_empty_run(self) -> None:
        doc = AnnotatedDocument(runs=[Run("ab"), Run("")])
        with pytest.raises(ValueError):
            doc.check_partition()

    def test_check_partition_rejects_missing_runs_and_duplicate_kinds(self) -> None:
        with pytest.raises(ValueError):
            AnnotatedDocument(runs=[]).check_partition()
        doc = AnnotatedDocument(runs=[Run("ab", [StyleAttribute.foreground(31), StyleAttribute.foreground(32)])])
        with pytest.raises(ValueError):
            doc.check_partition()

    def test_lone_empty_run_is_the_empty_document(self) -> None:
        doc = AnnotatedDocument(runs=[Run("")])
        doc.check_partition()
        assert doc.text == ""
        assert len(doc) == 0


class TestErrors:
    """Tests for error types."""

    def test_invalid_selection_is_value_error(self) -> None:
        error = InvalidSelection(4, 2, 10)
        assert isinstance(error, ValueError)
        assert "[4, 2)" in str(error)
