"""Unit tests for the outline I/O layer.

Tests for OutlineReader, OutlineWriter, and document conversion.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from outliner.config import CleanupMode
from outliner.domain import Point, Shape
from outliner.exceptions import OutlineFormatError, OutlineLoadError, OutlineSaveError
from outliner.io import OutlineDocument, OutlineReader, OutlineWriter, parse_outline_document
from outliner.io.document import document_to_shape, shape_to_document


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestParseOutlineDocument:
    """Tests for parse_outline_document."""

    def test_bare_point_list(self):
        """Test a plain list of pairs is accepted."""
        document = parse_outline_document([[0, 0], [1, 0.5]], "trace.json")
        assert document.points == [(0.0, 0.0), (1.0, 0.5)]
        assert document.mode is None

    def test_object_with_mode(self):
        """Test the object layout with a mode name."""
        document = parse_outline_document(
            {"points": [[0, 0], [1, 1]], "mode": "aggressive"}, "trace.json"
        )
        assert document.mode is CleanupMode.AGGRESSIVE

    def test_numeric_mode(self):
        """Test integer modes are accepted."""
        document = parse_outline_document({"points": [], "mode": 0}, "trace.json")
        assert document.mode is CleanupMode.NONE

    def test_empty_list(self):
        """Test an empty outline is valid."""
        assert parse_outline_document([], "trace.json").points == []

    def test_invalid_mode(self):
        """Test unknown mode names are rejected with the field name."""
        with pytest.raises(OutlineFormatError, match="mode"):
            parse_outline_document({"points": [], "mode": "extreme"}, "trace.json")

    def test_wrong_arity(self):
        """Test points must be pairs."""
        with pytest.raises(OutlineFormatError) as exc_info:
            parse_outline_document([[0, 0], [1, 2, 3]], "trace.json")
        assert exc_info.value.path == "trace.json"
        assert "points.1" in exc_info.value.details

    def test_non_numeric_coordinate(self):
        """Test coordinates must be numbers."""
        with pytest.raises(OutlineFormatError):
            parse_outline_document([[0, "a"]], "trace.json")

    def test_non_finite_coordinate(self):
        """Test NaN and infinity are rejected."""
        with pytest.raises(OutlineFormatError, match="non-finite"):
            parse_outline_document([[0, 0], [float("nan"), 1]], "trace.json")
        with pytest.raises(OutlineFormatError, match="non-finite"):
            parse_outline_document([[float("inf"), 0]], "trace.json")

    def test_wrong_top_level_type(self):
        """Test a scalar document is rejected."""
        with pytest.raises(OutlineFormatError):
            parse_outline_document(42, "trace.json")


class TestDocumentConversion:
    """Tests for document/shape conversion."""

    def test_document_to_shape(self):
        """Test a document converts to a shape."""
        document = OutlineDocument(points=[(1.0, 2.0), (3.0, 4.0)])
        assert document_to_shape(document) == Shape((Point(1.0, 2.0), Point(3.0, 4.0)))

    def test_shape_to_document(self):
        """Test a shape converts to a document."""
        shape = Shape.from_points([(1, 2), (3, 4)])
        document = shape_to_document(shape, mode=CleanupMode.NORMAL)
        assert document.points == [(1.0, 2.0), (3.0, 4.0)]
        assert document.mode is CleanupMode.NORMAL
        assert document.generated is None

    def test_mode_serialized_as_label(self):
        """Test the mode is written as its label."""
        document = OutlineDocument(points=[], mode=CleanupMode.AGGRESSIVE)
        assert json.loads(document.model_dump_json())["mode"] == "aggressive"


class TestOutlineReader:
    """Tests for OutlineReader class."""

    def test_load_nonexistent_file(self, tmp_path):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = OutlineReader(tmp_path / "missing.json")
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_shape_before_load(self):
        """Test accessing shape before loading raises RuntimeError."""
        reader = OutlineReader(Path("trace.json"))
        with pytest.raises(RuntimeError, match="Outline not loaded"):
            _ = reader.shape

    def test_point_count_before_load(self):
        """Test accessing point_count before loading raises RuntimeError."""
        reader = OutlineReader(Path("trace.json"))
        with pytest.raises(RuntimeError, match="Outline not loaded"):
            _ = reader.point_count

    def test_mode_before_load(self):
        """Test accessing mode before loading raises RuntimeError."""
        reader = OutlineReader(Path("trace.json"))
        with pytest.raises(RuntimeError, match="Outline not loaded"):
            _ = reader.mode

    def test_load_point_list(self, tmp_path):
        """Test loading a bare point list."""
        path = write_json(tmp_path / "trace.json", [[0, 0], [4, 0], [4, 2]])
        reader = OutlineReader(path)
        reader.load()

        assert reader.point_count == 3
        assert reader.mode is None
        assert reader.shape.to_tuples() == [(0.0, 0.0), (4.0, 0.0), (4.0, 2.0)]

    def test_load_with_mode(self, tmp_path):
        """Test the recorded mode is exposed."""
        path = write_json(tmp_path / "trace.json", {"points": [[0, 0]], "mode": "none"})
        reader = OutlineReader(path)
        reader.load()
        assert reader.mode is CleanupMode.NONE

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises OutlineFormatError."""
        path = tmp_path / "trace.json"
        path.write_text("[[0, 0], [1,", encoding="utf-8")
        with pytest.raises(OutlineFormatError, match="not valid JSON"):
            OutlineReader(path).load()

    def test_json_nan_rejected(self, tmp_path):
        """Test NaN written by lenient encoders is rejected."""
        path = tmp_path / "trace.json"
        path.write_text("[[0, 0], [NaN, 1]]", encoding="utf-8")
        with pytest.raises(OutlineFormatError, match="non-finite"):
            OutlineReader(path).load()

    def test_unreadable_file(self, tmp_path):
        """Test OS errors while reading become OutlineLoadError."""
        path = write_json(tmp_path / "trace.json", [])
        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            with pytest.raises(OutlineLoadError, match="denied"):
                OutlineReader(path).load()


class TestOutlineWriter:
    """Tests for OutlineWriter class."""

    def test_init(self):
        """Test OutlineWriter initialization."""
        path = Path("output.json")
        writer = OutlineWriter(path)
        assert writer.output_path == path

    def test_get_cleaned_path(self):
        """Test cleaned path generation."""
        result = OutlineWriter.get_cleaned_path(Path("/data/trace.json"))
        assert result == Path("/data/trace-cleaned.json")

    def test_get_cleaned_path_double_suffix(self):
        """Test only the last suffix is replaced."""
        result = OutlineWriter.get_cleaned_path(Path("logo.svg.json"))
        assert result == Path("logo.svg-cleaned.json")

    def test_get_cleaned_path_other_extension(self):
        """Test output always uses .json."""
        result = OutlineWriter.get_cleaned_path(Path("trace.txt"))
        assert result == Path("trace-cleaned.json")

    def test_save(self, tmp_path):
        """Test written file layout."""
        path = tmp_path / "out.json"
        OutlineWriter(path).save(Shape.from_points([(-0.5, 0), (0.5, 0.25)]), CleanupMode.NORMAL)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["points"] == [[-0.5, 0.0], [0.5, 0.25]]
        assert data["mode"] == "normal"
        assert data["generated"] is not None

    def test_save_without_mode(self, tmp_path):
        """Test a shape saved without a mode writes null."""
        path = tmp_path / "out.json"
        OutlineWriter(path).save(Shape.from_points([(1, 1)]))
        assert json.loads(path.read_text(encoding="utf-8"))["mode"] is None

    def test_save_then_load(self, tmp_path):
        """Test a written file can be read back."""
        path = tmp_path / "out.json"
        shape = Shape.from_points([(0.1, 0.2), (0.3, -0.4), (-0.5, 0.6)])
        OutlineWriter(path).save(shape, CleanupMode.AGGRESSIVE)

        reader = OutlineReader(path)
        reader.load()
        assert reader.shape == shape
        assert reader.mode is CleanupMode.AGGRESSIVE

    def test_save_missing_directory(self, tmp_path):
        """Test unwritable destination raises OutlineSaveError."""
        path = tmp_path / "missing" / "out.json"
        with pytest.raises(OutlineSaveError) as exc_info:
            OutlineWriter(path).save(Shape())
        assert exc_info.value.path == str(path)
