"""
Base classes and types for document serializers.

This module defines the abstract base class FormatSerializer and supporting
types used by all format-specific serializers.

Design Pattern: Strategy Pattern
    - FormatSerializer is the abstract strategy interface
    - Concrete serializers implement format-specific rendering
    - SerializerFactory creates the appropriate strategy based on format
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Union

from ..config.settings import OUTPUT_ENCODING, OUTPUT_INDENT, XML_LINE_DELIMITER
from ..core.exceptions import InvalidFormatError, SerializationError
from ..core.models import Document, Page
from .registry import ResourceRegistry

logger = logging.getLogger(__name__)

# =============================================================================
# Wire vocabulary (JSON keys and XML tags)
# =============================================================================

DOCUMENT = "document"
CHARACTERS = "characters"
CHARACTER = "character"
FIGURES = "figures"
FIGURE = "figure"
SHAPES = "shapes"
SHAPE = "shape"
FONTS = "fonts"
FONT = "font"
COLORS = "colors"
COLOR = "color"
PAGES = "pages"
PAGE = "page"
POSITION = "position"
ID = "id"
TEXT = "text"
NAME = "name"
FONTSIZE = "fontsize"
IS_BOLD = "isBold"
IS_ITALIC = "isItalic"
MIN_X = "minX"
MIN_Y = "minY"
MAX_X = "maxX"
MAX_Y = "maxY"
R = "r"
G = "g"
B = "b"
WIDTH = "width"
HEIGHT = "height"


class OutputFormat(str, Enum):
    """Supported serialization formats."""

    JSON = "json"
    XML = "xml"

    @property
    def file_extension(self) -> str:
        """Get the file extension for this format."""
        return f".{self.value}"

    @property
    def display_name(self) -> str:
        """Get human-readable format name."""
        names = {
            OutputFormat.JSON: "JSON (JavaScript Object Notation)",
            OutputFormat.XML: "XML (Extensible Markup Language)",
        }
        return names.get(self, self.value.upper())

    @classmethod
    def names(cls) -> List[str]:
        """Get the names of all formats."""
        return [f.value for f in cls]

    @classmethod
    def is_valid(cls, name: str) -> bool:
        """Check if a name (case-insensitive) denotes a known format."""
        return isinstance(name, str) and name.strip().lower() in cls.names()

    @classmethod
    def from_string(cls, name: str) -> "OutputFormat":
        """
        Resolve a format from its case-insensitive name.

        Raises:
            InvalidFormatError: If the name denotes no known format
        """
        if isinstance(name, cls):
            return name
        if not cls.is_valid(name):
            raise InvalidFormatError(
                f"{name!r} isn't a valid serialization format.",
                details={"available": cls.names()}
            )
        return cls(name.strip().lower())


class ElementClass(str, Enum):
    """Element kinds that can be selected for serialization.

    Declaration order is the canonical output order.
    """

    CHARACTERS = "characters"
    FIGURES = "figures"
    SHAPES = "shapes"

    @classmethod
    def all(cls) -> List["ElementClass"]:
        return list(cls)

    @classmethod
    def from_values(cls, values: Iterable[Union[str, "ElementClass"]]) -> List["ElementClass"]:
        """Resolve element classes by name, ignoring unknown values.

        Duplicates are collapsed, keeping the first occurrence.
        """
        result: List[ElementClass] = []
        for value in values:
            if isinstance(value, cls):
                clazz = value
            elif isinstance(value, str) and value.strip().lower() in cls._value2member_map_:
                clazz = cls(value.strip().lower())
            else:
                continue
            if clazz not in result:
                result.append(clazz)
        return result

    @classmethod
    def from_strings(cls, *names: str) -> List["ElementClass"]:
        return cls.from_values(names)


@dataclass
class SerializerConfig:
    """Configuration for format serializers."""

    indent: int = OUTPUT_INDENT
    encoding: str = OUTPUT_ENCODING
    line_delimiter: str = XML_LINE_DELIMITER

    def validate(self) -> None:
        """Validate configuration settings."""
        if self.indent < 0:
            raise ValueError("indent must not be negative")
        if not self.line_delimiter:
            raise ValueError("line_delimiter must not be empty")


class FormatSerializer(ABC):
    """
    Abstract base class for all format serializers.

    Subclasses implement format-specific rendering; the resource registry
    is created per serialize call and passed through explicitly, so one
    instance may be reused and shared between threads.
    """

    def __init__(self, config: Optional[SerializerConfig] = None):
        """
        Initialize serializer with configuration.

        Args:
            config: Serializer configuration (defaults from settings)
        """
        self.config = config or SerializerConfig()
        self.config.validate()

    @property
    @abstractmethod
    def format_type(self) -> OutputFormat:
        """Get the output format type this serializer produces."""
        pass

    @property
    def file_extension(self) -> str:
        """Get the file extension for output files (without dot)."""
        return self.format_type.value

    def serialize(
        self,
        doc: Optional[Document],
        element_classes: Optional[Iterable[Union[str, ElementClass]]] = None
    ) -> Optional[bytes]:
        """
        Serialize the selected element classes of a document.

        Args:
            doc: Document to serialize
            element_classes: Element classes to emit; None selects all.
                Unknown names are ignored.

        Returns:
            The serialization as bytes, or None if doc is None

        Raises:
            SerializationError: If the text cannot be encoded
        """
        if doc is None:
            return None

        if element_classes is None:
            clazzes = ElementClass.all()
        else:
            if isinstance(element_classes, str):
                element_classes = [element_classes]
            requested = ElementClass.from_values(element_classes)
            clazzes = [c for c in ElementClass if c in requested]

        logger.debug(
            f"Serializing document as {self.format_type.value}: "
            f"classes={[c.value for c in clazzes]}, pages={doc.page_count}"
        )

        registry = ResourceRegistry()
        text = self._render(doc, clazzes, registry)
        content = self._encode(text)

        logger.debug(
            f"Serialized document as {self.format_type.value}: "
            f"units={registry.unit_counts}, "
            f"fonts={len(registry.fonts)}, colors={len(registry.colors)}, "
            f"bytes={len(content)}"
        )
        return content

    @abstractmethod
    def _render(
        self,
        doc: Document,
        clazzes: List[ElementClass],
        registry: ResourceRegistry
    ) -> str:
        """
        Render the document as text.

        Args:
            doc: Document to render
            clazzes: Element classes to emit, in canonical order
            registry: Call-scoped registry collecting referenced fonts/colors

        Returns:
            The complete serialized text
        """
        pass

    def _encode(self, text: str) -> bytes:
        try:
            return text.encode(self.config.encoding)
        except (UnicodeError, LookupError) as e:
            logger.error(f"Couldn't encode {self.format_type.value} output as {self.config.encoding}: {e}")
            raise SerializationError(
                "Couldn't serialize the document.",
                details={"format": self.format_type.value, "encoding": self.config.encoding}
            ) from e

    @staticmethod
    def _pages(doc: Document) -> Iterator[Page]:
        """Yield the non-null pages of a document."""
        for page in doc.pages:
            if page is not None:
                yield page
