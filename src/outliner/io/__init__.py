"""Outline I/O layer for outliner.

This module handles reading and writing outline files. It provides a clean
abstraction layer between JSON documents and the domain models.

Key responsibilities:
- Load and validate outline JSON (pydantic)
- Convert documents to domain shapes and back
- Write cleaned outlines with proper naming convention

Key classes:
- OutlineReader: Load outlines
- OutlineWriter: Save cleaned outlines
- OutlineDocument: Validated file content
"""

from outliner.io.document import OutlineDocument, parse_outline_document
from outliner.io.reader import OutlineReader
from outliner.io.writer import OutlineWriter

__all__ = [
    "OutlineDocument",
    "OutlineReader",
    "OutlineWriter",
    "parse_outline_document",
]
