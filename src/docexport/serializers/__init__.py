"""
Format Serializers for extracted documents.

This package renders a document's pages and elements, plus the fonts and
colors they reference, as JSON or XML bytes.

Usage:
    from docexport.serializers import serialize_document

    content = serialize_document(doc, "xml", ["characters", "shapes"])

    # or, with an explicit serializer instance
    serializer = SerializerFactory.create(OutputFormat.JSON)
    content = serializer.serialize(doc)
"""

from .base import (
    ElementClass,
    FormatSerializer,
    OutputFormat,
    SerializerConfig,
)
from .factory import SerializerFactory, serialize_document
from .registry import ResourceRegistry
from .schemas import SerializationRequest

# Import serializers to trigger registration via decorators
from . import json_serializer  # noqa: F401
from . import xml_serializer  # noqa: F401

__all__ = [
    "ElementClass",
    "FormatSerializer",
    "OutputFormat",
    "SerializerConfig",
    "SerializerFactory",
    "ResourceRegistry",
    "SerializationRequest",
    "serialize_document",
]
