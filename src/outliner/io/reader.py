"""Outline reader for loading traced outlines.

This module provides the OutlineReader class for loading outline files
and converting them into domain shapes.
"""

import json
from pathlib import Path

from outliner.config import CleanupMode
from outliner.domain import Shape
from outliner.exceptions import OutlineFormatError, OutlineLoadError
from outliner.io.document import OutlineDocument, document_to_shape, parse_outline_document


class OutlineReader:
    """Loads outline JSON files and exposes them as shapes.

    Example:
        reader = OutlineReader(Path("trace.json"))
        reader.load()
        print(reader.point_count)
    """

    def __init__(self, outline_path: Path) -> None:
        """Initialize the outline reader.

        Args:
            outline_path: Path to the outline JSON file
        """
        self._outline_path = outline_path
        self._document: OutlineDocument | None = None

    def load(self) -> None:
        """Load and validate the outline file.

        Raises:
            FileNotFoundError: If outline file does not exist
            OutlineLoadError: If the file cannot be read
            OutlineFormatError: If the file is not valid outline JSON
        """
        if not self._outline_path.exists():
            raise FileNotFoundError(f"Outline file not found: {self._outline_path}")

        try:
            text = self._outline_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise OutlineLoadError(str(self._outline_path), str(e)) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise OutlineFormatError(str(self._outline_path), f"not valid JSON: {e.msg}") from e

        self._document = parse_outline_document(data, str(self._outline_path))

    def _require_document(self) -> OutlineDocument:
        if self._document is None:
            raise RuntimeError("Outline not loaded. Call load() first.")
        return self._document

    @property
    def shape(self) -> Shape:
        """Loaded outline as a shape.

        Raises:
            RuntimeError: If outline has not been loaded yet
        """
        return document_to_shape(self._require_document())

    @property
    def point_count(self) -> int:
        """Number of points in the loaded outline.

        Raises:
            RuntimeError: If outline has not been loaded yet
        """
        return len(self._require_document().points)

    @property
    def mode(self) -> CleanupMode | None:
        """Cleanup mode recorded in the file, if any.

        Raises:
            RuntimeError: If outline has not been loaded yet
        """
        return self._require_document().mode
