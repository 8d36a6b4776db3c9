"""
Format-neutral element encoders.

Each encoder turns one document element into an ordered record (a dict of
scalars and nested dicts) and registers the fonts/colors it references.
Writers wrap records under the encoder's unit name and render them.

Usage:
    registry = ResourceRegistry()
    encoder = encoder_for(ElementClass.CHARACTERS)
    for page in doc.pages:
        for character in encoder.elements(page):
            record = encoder.encode(character, registry)
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import numpy as np

from ..core.models import Character, Color, Figure, Font, FontFace, Page, Shape
from .base import (
    B,
    CHARACTER,
    COLOR,
    ElementClass,
    FIGURE,
    FONT,
    FONTSIZE,
    G,
    HEIGHT,
    ID,
    IS_BOLD,
    IS_ITALIC,
    NAME,
    POSITION,
    R,
    SHAPE,
    TEXT,
    WIDTH,
)
from .geometry import encode_position
from .registry import ResourceRegistry

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def encode_font_face(font_face: Optional[FontFace], registry: ResourceRegistry) -> Optional[Record]:
    """Encode a font reference and register its font; None if id or size is missing."""
    if font_face is None or font_face.font is None:
        return None
    font = font_face.font
    if not font.id or not font_face.size > 0:
        return None
    registry.register(font)
    return {ID: font.id, FONTSIZE: np.float32(font_face.size)}


def encode_color_ref(color: Optional[Color], registry: ResourceRegistry) -> Optional[Record]:
    """Encode a color reference and register the color; None if it has no id."""
    if color is None or not color.id:
        return None
    registry.register(color)
    return {ID: color.id}


class ElementEncoder(ABC):
    """Encodes the elements of one element class."""

    element_class: ElementClass
    unit_name: str

    @abstractmethod
    def elements(self, page: Page) -> List[Any]:
        """Get this class's elements on a page (may contain None entries)."""
        pass

    @abstractmethod
    def encode(self, element: Any, registry: ResourceRegistry) -> Optional[Record]:
        """
        Encode one element.

        Args:
            element: Element to encode
            registry: Registry receiving referenced fonts and colors

        Returns:
            The element record (possibly empty), or None for a None element
        """
        pass


class CharacterEncoder(ElementEncoder):
    element_class = ElementClass.CHARACTERS
    unit_name = CHARACTER

    def elements(self, page: Page) -> List[Optional[Character]]:
        return page.characters

    def encode(self, element: Optional[Character], registry: ResourceRegistry) -> Optional[Record]:
        if element is None:
            return None

        record: Record = {}

        position = encode_position(element.position)
        if position:
            record[POSITION] = position

        font = encode_font_face(element.font_face, registry)
        if font:
            record[FONT] = font

        color = encode_color_ref(element.color, registry)
        if color:
            record[COLOR] = color

        # An empty string is a valid text value.
        if element.text is not None:
            record[TEXT] = element.text

        return record


class FigureEncoder(ElementEncoder):
    element_class = ElementClass.FIGURES
    unit_name = FIGURE

    def elements(self, page: Page) -> List[Optional[Figure]]:
        return page.figures

    def encode(self, element: Optional[Figure], registry: ResourceRegistry) -> Optional[Record]:
        if element is None:
            return None

        record: Record = {}
        position = encode_position(element.position)
        if position:
            record[POSITION] = position
        return record


class ShapeEncoder(ElementEncoder):
    element_class = ElementClass.SHAPES
    unit_name = SHAPE

    def elements(self, page: Page) -> List[Optional[Shape]]:
        return page.shapes

    def encode(self, element: Optional[Shape], registry: ResourceRegistry) -> Optional[Record]:
        if element is None:
            return None

        record: Record = {}

        position = encode_position(element.position)
        if position:
            record[POSITION] = position

        color = encode_color_ref(element.color, registry)
        if color:
            record[COLOR] = color

        return record


ENCODERS: Dict[ElementClass, ElementEncoder] = {
    ElementClass.CHARACTERS: CharacterEncoder(),
    ElementClass.FIGURES: FigureEncoder(),
    ElementClass.SHAPES: ShapeEncoder(),
}


def encoder_for(clazz: ElementClass) -> ElementEncoder:
    return ENCODERS[clazz]


def encode_elements(pages: List[Page], encoder: ElementEncoder, registry: ResourceRegistry) -> List[Record]:
    """
    Encode every element of one class across pages, in page order.

    None entries in a page's element list are skipped.
    """
    records = []
    skipped = 0
    for page in pages:
        for element in encoder.elements(page):
            record = encoder.encode(element, registry)
            if record is None:
                skipped += 1
                continue
            records.append(record)

    if skipped:
        logger.debug(f"Skipped {skipped} null {encoder.element_class.value}")
    registry.count_units(encoder.element_class.value, len(records))
    return records


# =============================================================================
# Resource and page metadata records
# =============================================================================

def encode_font(font: Font) -> Record:
    record: Record = {}
    if font.id is not None:
        record[ID] = font.id
    if font.name is not None:
        record[NAME] = font.name
    record[IS_BOLD] = bool(font.is_bold)
    record[IS_ITALIC] = bool(font.is_italic)
    return record


def encode_color(color: Color) -> Optional[Record]:
    """Encode a color definition; None if its RGB is not a triple."""
    rgb = color.rgb
    if color.id is None or rgb is None or len(rgb) != 3:
        logger.debug(f"Skipping color without a valid RGB triple: {color.id!r}")
        return None
    return {ID: color.id, R: int(rgb[0]), G: int(rgb[1]), B: int(rgb[2])}


def encode_page(page: Page) -> Record:
    return {ID: page.number, WIDTH: np.float32(page.width), HEIGHT: np.float32(page.height)}
