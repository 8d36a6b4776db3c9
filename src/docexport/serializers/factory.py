"""
Serializer Factory with decorator-based registration.

This module provides a factory for creating format serializers.
Serializers register themselves using the @SerializerFactory.register decorator.

Usage:
    from docexport.serializers import SerializerFactory, OutputFormat

    # Serializers auto-register on import
    serializer = SerializerFactory.create(OutputFormat.XML)
    content = serializer.serialize(doc, ["characters"])

Extension:
    To add a new format, create a new serializer class decorated with:

    @SerializerFactory.register(OutputFormat.NEW_FORMAT)
    class NewFormatSerializer(FormatSerializer):
        ...
"""

from typing import Iterable, Optional, Type, Union

from ..core.exceptions import InvalidFormatError
from ..core.models import Document
from .base import ElementClass, FormatSerializer, OutputFormat, SerializerConfig
from .schemas import SerializationRequest


class SerializerFactory:
    """
    Factory for creating format serializers.

    Uses decorator-based registration to allow pluggable format support.
    No changes needed to factory when adding new formats.
    """

    _registry: dict[OutputFormat, Type[FormatSerializer]] = {}

    @classmethod
    def register(cls, format_type: OutputFormat):
        """
        Decorator to register a serializer class for a format.

        Usage:
            @SerializerFactory.register(OutputFormat.XML)
            class XMLSerializer(FormatSerializer):
                ...

        Args:
            format_type: The output format this serializer handles

        Returns:
            Decorator function
        """
        def decorator(serializer_class: Type[FormatSerializer]) -> Type[FormatSerializer]:
            if format_type in cls._registry:
                existing = cls._registry[format_type].__name__
                raise ValueError(
                    f"Format {format_type.value} already registered by {existing}"
                )
            cls._registry[format_type] = serializer_class
            return serializer_class
        return decorator

    @classmethod
    def create(
        cls,
        format_type: Union[OutputFormat, str],
        config: Optional[SerializerConfig] = None
    ) -> FormatSerializer:
        """
        Create a serializer for the specified format.

        Args:
            format_type: The output format (or its name) to serialize to
            config: Configuration for the serializer

        Returns:
            Configured serializer instance

        Raises:
            InvalidFormatError: If format is unknown or not registered
        """
        format_type = OutputFormat.from_string(format_type)
        if format_type not in cls._registry:
            available = [f.value for f in cls._registry.keys()]
            raise InvalidFormatError(
                f"Unknown format: {format_type.value}. "
                f"Available: {available}"
            )
        return cls._registry[format_type](config)

    @classmethod
    def get_available_formats(cls) -> list[OutputFormat]:
        """Get list of registered output formats."""
        return list(cls._registry.keys())

    @classmethod
    def is_registered(cls, format_type: OutputFormat) -> bool:
        """Check if a format has a registered serializer."""
        return format_type in cls._registry

    @classmethod
    def clear_registry(cls) -> None:
        """
        Clear all registered serializers.

        Primarily for testing purposes.
        """
        cls._registry.clear()


def serialize_document(
    doc: Optional[Document],
    output_format: Optional[Union[OutputFormat, str]] = None,
    element_classes: Optional[Iterable[Union[ElementClass, str]]] = None,
    config: Optional[SerializerConfig] = None
) -> Optional[bytes]:
    """
    Serialize a document in the given format.

    Args:
        doc: Document to serialize
        output_format: Format or case-insensitive format name; None uses
            the DEFAULT_OUTPUT_FORMAT setting
        element_classes: Element classes to emit; None selects all.
            Unknown names are ignored.
        config: Serializer configuration

    Returns:
        The serialization as bytes, or None if doc is None

    Raises:
        InvalidFormatError: If the format name is unknown
        SerializationError: If the text cannot be encoded
    """
    request = SerializationRequest.from_names(output_format, element_classes)
    serializer = SerializerFactory.create(request.output_format, config)
    return serializer.serialize(doc, request.element_classes)
