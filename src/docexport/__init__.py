"""Serialize extracted documents to JSON or XML."""

from .core import (
    Character,
    Color,
    DocExportError,
    Document,
    Figure,
    Font,
    FontFace,
    InvalidFormatError,
    Page,
    Position,
    Rectangle,
    SerializationError,
    Shape,
)
from .serializers import ElementClass, OutputFormat, SerializerConfig, serialize_document

__version__ = "0.1.0"

__all__ = [
    "Character",
    "Color",
    "DocExportError",
    "Document",
    "Figure",
    "Font",
    "FontFace",
    "InvalidFormatError",
    "Page",
    "Position",
    "Rectangle",
    "SerializationError",
    "Shape",
    "ElementClass",
    "OutputFormat",
    "SerializerConfig",
    "serialize_document",
]
