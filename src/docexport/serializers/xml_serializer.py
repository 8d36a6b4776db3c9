"""
XML serializer for extracted documents.

Output is assembled as a flat list of indented lines and joined with the
configured line delimiter; no element tree is built. The indentation level
is passed explicitly to every method, since a section's children sit at a
different absolute level than its siblings.

Example output:
    <document>
      <characters>
        <character>
          <text>A</text>
        </character>
      </characters>
      <pages>
        <page>
          <id>1</id>
          <width>600.0</width>
          <height>800.0</height>
        </page>
      </pages>
    </document>
"""

import re
from typing import Any, Iterable, List, Optional
from xml.sax.saxutils import escape

import numpy as np

from ..core.models import Color, Document, Font, Page
from .base import (
    COLOR,
    COLORS,
    DOCUMENT,
    FONT,
    FONTS,
    PAGE,
    PAGES,
    ElementClass,
    FormatSerializer,
    OutputFormat,
)
from .encoders import (
    Record,
    encode_color,
    encode_elements,
    encode_font,
    encode_page,
    encoder_for,
)
from .factory import SerializerFactory
from .geometry import format_single
from .registry import ResourceRegistry

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}

# Restricted control characters, written as numeric character references.
_RESTRICTED_CHARS = re.compile("[\x01-\x08\x0b\x0c\x0e-\x1f\x7f-\x84\x86-\x9f]")

# Characters XML 1.1 cannot represent at all.
_INVALID_CHARS = re.compile("[\x00\ud800-\udfff\ufffe\uffff]")


def escape_xml(text: str) -> str:
    """Escape text for use as XML 1.1 character data."""
    text = _INVALID_CHARS.sub("", text)
    text = escape(text, _QUOTE_ENTITIES)
    return _RESTRICTED_CHARS.sub(lambda m: f"&#{ord(m.group())};", text)


@SerializerFactory.register(OutputFormat.XML)
class XMLSerializer(FormatSerializer):
    """Serializer that outputs documents as indented XML."""

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.XML

    def _render(
        self,
        doc: Document,
        clazzes: List[ElementClass],
        registry: ResourceRegistry
    ) -> str:
        level = 0
        pages = list(self._pages(doc))
        lines = [self._start(DOCUMENT, level)]

        # Elements first: encoding them fills the registry.
        lines.extend(self._serialize_elements(level + 1, pages, clazzes, registry))

        lines.extend(self._section(FONTS, level + 1, self._serialize_fonts(level + 2, registry.fonts)))
        lines.extend(self._section(COLORS, level + 1, self._serialize_colors(level + 2, registry.colors)))
        lines.extend(self._section(PAGES, level + 1, self._serialize_pages(level + 2, pages)))

        lines.append(self._end(DOCUMENT, level))
        return self.config.line_delimiter.join(lines)

    # =========================================================================
    # Elements
    # =========================================================================

    def _serialize_elements(
        self,
        level: int,
        pages: List[Page],
        clazzes: List[ElementClass],
        registry: ResourceRegistry
    ) -> List[str]:
        lines = []
        for clazz in clazzes:
            encoder = encoder_for(clazz)
            # Requested sections are emitted even when empty.
            lines.append(self._start(clazz.value, level))
            for record in encode_elements(pages, encoder, registry):
                lines.extend(self._serialize_record(level + 1, encoder.unit_name, record))
            lines.append(self._end(clazz.value, level))
        return lines

    def _serialize_record(self, level: int, tag: str, record: Record) -> List[str]:
        """
        Render a record as a tag whose children are the record's fields.

        Nested records recurse one level deeper; scalars become leaf lines.
        """
        lines = [self._start(tag, level)]
        for key, value in record.items():
            if isinstance(value, dict):
                lines.extend(self._serialize_record(level + 1, key, value))
            else:
                lines.append(self._leaf(key, value, level + 1))
        lines.append(self._end(tag, level))
        return lines

    # =========================================================================
    # Fonts, colors and pages
    # =========================================================================

    def _serialize_fonts(self, level: int, fonts: Iterable[Font]) -> List[str]:
        lines = []
        for font in fonts:
            lines.extend(self._serialize_record(level, FONT, encode_font(font)))
        return lines

    def _serialize_colors(self, level: int, colors: Iterable[Color]) -> List[str]:
        lines = []
        for color in colors:
            record = encode_color(color)
            if record is not None:
                lines.extend(self._serialize_record(level, COLOR, record))
        return lines

    def _serialize_pages(self, level: int, pages: Iterable[Page]) -> List[str]:
        lines = []
        for page in pages:
            lines.extend(self._serialize_record(level, PAGE, encode_page(page)))
        return lines

    def _section(self, tag: str, level: int, content: List[str]) -> List[str]:
        """Wrap content lines in a tag pair, or nothing if there is no content."""
        if not content:
            return []
        return [self._start(tag, level), *content, self._end(tag, level)]

    # =========================================================================
    # Line helpers
    # =========================================================================

    def _indent(self, level: int) -> str:
        return " " * (level * self.config.indent)

    def _start(self, tag: str, level: int = 0) -> str:
        return f"{self._indent(level)}<{tag}>"

    def _end(self, tag: str, level: int = 0) -> str:
        return f"{self._indent(level)}</{tag}>"

    def _leaf(self, tag: str, value: Any, level: int) -> str:
        return f"{self._start(tag, level)}{self._text(value)}{self._end(tag)}"

    @staticmethod
    def _text(value: Optional[Any]) -> str:
        if isinstance(value, (bool, np.bool_)):
            text = "true" if value else "false"
        elif isinstance(value, np.floating):
            text = format_single(value)
        else:
            text = str(value)
        return escape_xml(text)
