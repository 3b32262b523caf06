"""Render annotated documents to a JSON format and parse them back.

The JSON form is the saved representation of a formatting session:
run boundaries and attribute order survive a round trip, so the
serialized ANSI output is identical before and after.

Example output:
{
  "version": 1,
  "text": "hello world",
  "runs": [
    {"text": "hello", "attributes": [{"kind": "foreground", "code": 31, "name": "Red"}]},
    {"text": " world", "attributes": []}
  ]
}
"""

import json
import logging
from typing import Any

from discord_ansi.core.document import AnnotatedDocument
from discord_ansi.core.errors import DocumentFormatError
from discord_ansi.core.run import Run
from discord_ansi.core.styles import StyleAttribute, StyleKind, lookup, lookup_name

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class JsonRenderer:
    """Render a document to JSON."""

    def __init__(self, indent: int | None = 2, include_names: bool = True):
        """
        Args:
            indent: JSON indentation (None for compact)
            include_names: Add each style's display name next to its code
        """
        self.indent = indent
        self.include_names = include_names

    def render(self, document: AnnotatedDocument) -> str:
        """Render document to JSON string."""
        data = self.to_dict(document)
        return json.dumps(data, indent=self.indent, ensure_ascii=False)

    def to_dict(self, document: AnnotatedDocument) -> dict[str, Any]:
        """Convert document to dictionary."""
        return {
            "version": FORMAT_VERSION,
            "text": document.text,
            "runs": [self._run_to_dict(run) for run in document.runs],
        }

    def _run_to_dict(self, run: Run) -> dict[str, Any]:
        attributes = []
        for attribute in run.attributes:
            data: dict[str, Any] = {"kind": attribute.kind.value, "code": attribute.code}
            if self.include_names:
                data["name"] = lookup(attribute.kind, attribute.code).name
            attributes.append(data)
        return {"text": run.text, "attributes": attributes}


class JsonParser:
    """
    Parse JSON format back to an AnnotatedDocument.

    Every attribute is checked against the style registry, and the runs
    must reproduce the stored text.
    """

    def parse(self, json_str: str) -> AnnotatedDocument:
        """Parse JSON string to AnnotatedDocument."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise DocumentFormatError(f"Invalid JSON: {e}") from e
        return self.from_dict(data)

    def from_dict(self, data: dict[str, Any]) -> AnnotatedDocument:
        """Convert dictionary to AnnotatedDocument."""
        if not isinstance(data, dict):
            raise DocumentFormatError("Document must be a JSON object")

        version = data.get("version", FORMAT_VERSION)
        if version != FORMAT_VERSION:
            raise DocumentFormatError(f"Unsupported document version: {version}")

        raw_runs = data.get("runs")
        if not isinstance(raw_runs, list):
            raise DocumentFormatError("Document is missing its 'runs' list")

        runs = [self._parse_run(raw) for raw in raw_runs]
        # Empty runs only arise from hand-edited files; drop them
        runs = [run for run in runs if run.text] or [Run()]

        document = AnnotatedDocument(runs=runs)
        text = data.get("text")
        if text is not None and text != document.text:
            raise DocumentFormatError("Run texts do not match document text")

        logger.debug("Loaded document: %d chars, %d runs", len(document), len(runs))
        return document

    def _parse_run(self, raw: Any) -> Run:
        if not isinstance(raw, dict) or not isinstance(raw.get("text"), str):
            raise DocumentFormatError(f"Malformed run: {raw!r}")

        raw_attributes = raw.get("attributes", [])
        if not isinstance(raw_attributes, list):
            raise DocumentFormatError(f"Run attributes must be a list: {raw!r}")

        run = Run(raw["text"])
        for raw_attribute in raw_attributes:
            attribute = self._parse_attribute(raw_attribute)
            if run.get(attribute.kind) is not None:
                raise DocumentFormatError(
                    f"Run has two {attribute.kind.value} attributes: {raw!r}"
                )
            run.attributes.append(attribute)
        return run

    def _parse_attribute(self, raw: Any) -> StyleAttribute:
        """Parse an attribute given by code or by display name."""
        if not isinstance(raw, dict) or not isinstance(raw.get("kind"), str):
            raise DocumentFormatError(f"Malformed attribute: {raw!r}")

        kind = StyleKind.parse(raw["kind"])
        if "code" in raw:
            code = raw["code"]
            # bool is an int subclass; true must not load as Bold
            if not isinstance(code, int) or isinstance(code, bool):
                raise DocumentFormatError(f"Attribute code must be an integer: {raw!r}")
            return lookup(kind, code).attribute
        if "name" in raw:
            if not isinstance(raw["name"], str):
                raise DocumentFormatError(f"Attribute name must be a string: {raw!r}")
            return lookup_name(kind, raw["name"]).attribute
        raise DocumentFormatError(f"Attribute needs a code or name: {raw!r}")


def document_to_dict(document: AnnotatedDocument) -> dict[str, Any]:
    """Convert a document to a JSON-compatible dictionary."""
    return JsonRenderer().to_dict(document)


def document_from_dict(data: dict[str, Any]) -> AnnotatedDocument:
    """Load a document from a dictionary produced by document_to_dict."""
    return JsonParser().from_dict(data)
