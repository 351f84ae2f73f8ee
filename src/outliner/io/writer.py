"""Outline writer for saving cleaned outlines.

This module provides the OutlineWriter class for writing cleaned outlines
with the cleaned naming convention.
"""

from datetime import datetime
from pathlib import Path

from outliner.config import CleanupMode
from outliner.domain import Shape
from outliner.exceptions import OutlineSaveError
from outliner.io.document import shape_to_document


class OutlineWriter:
    """Writes cleaned outlines as JSON.

    Example:
        writer = OutlineWriter(Path("trace-cleaned.json"))
        writer.save(shape, mode=CleanupMode.NORMAL)
    """

    def __init__(self, output_path: Path, indent: int = 2) -> None:
        """Initialize the outline writer.

        Args:
            output_path: Path where the outline will be saved
            indent: JSON indentation
        """
        self._output_path = output_path
        self._indent = indent

    @property
    def output_path(self) -> Path:
        return self._output_path

    def save(self, shape: Shape, mode: CleanupMode | None = None) -> None:
        """Save the shape with its cleanup mode and a timestamp.

        Args:
            shape: Outline to write
            mode: Cleanup mode that produced the shape

        Raises:
            OutlineSaveError: If file cannot be written
        """
        document = shape_to_document(shape, mode=mode, generated=datetime.now())
        try:
            self._output_path.write_text(
                document.model_dump_json(indent=self._indent) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            raise OutlineSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_cleaned_path(input_path: Path) -> Path:
        """Generate output path with cleaned naming convention.

        Converts: trace.json -> trace-cleaned.json
                  logo.svg.json -> logo.svg-cleaned.json

        Args:
            input_path: Original outline file path

        Returns:
            Path with -cleaned suffix and a .json extension
        """
        return input_path.parent / f"{input_path.stem}-cleaned.json"
