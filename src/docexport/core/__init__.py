"""Document model and exceptions."""

from .exceptions import DocExportError, InvalidFormatError, SerializationError
from .models import (
    Character,
    Color,
    Document,
    Figure,
    Font,
    FontFace,
    Page,
    Position,
    Rectangle,
    Shape,
)

__all__ = [
    "Character",
    "Color",
    "Document",
    "Figure",
    "Font",
    "FontFace",
    "Page",
    "Position",
    "Rectangle",
    "Shape",
    "DocExportError",
    "InvalidFormatError",
    "SerializationError",
]
