"""Timberborn map generator."""

from .archive import DOCUMENT_NAME, encode_document, read_document, write_archive
from .document import GAME_VERSION, MapDocument, Outflow, TemplateID
from .exceptions import (
    EncodingError,
    MapGenError,
    OutOfRangeError,
    SourceNotFoundError,
)
from .grid import Grid
from .types import Vector2, Vector3

__all__ = [
    # Types
    "Vector2",
    "Vector3",
    "Grid",
    # Document
    "GAME_VERSION",
    "MapDocument",
    "Outflow",
    "TemplateID",
    # Archive
    "DOCUMENT_NAME",
    "encode_document",
    "read_document",
    "write_archive",
    # Exceptions
    "MapGenError",
    "OutOfRangeError",
    "SourceNotFoundError",
    "EncodingError",
]
