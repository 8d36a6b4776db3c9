"""Read-only document model produced by the extraction pipeline.

Geometry and sizes are stored as numpy float32 so serializers can emit
them at single precision without widening to double.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np


def _single(value) -> np.float32:
    return np.float32(value)


@dataclass
class Rectangle:
    """Axis-aligned bounding box in page coordinates."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self):
        self.min_x = _single(self.min_x)
        self.min_y = _single(self.min_y)
        self.max_x = _single(self.max_x)
        self.max_y = _single(self.max_y)


@dataclass(frozen=True)
class Font:
    """A typeface shared by reference across characters."""
    id: Optional[str]
    name: Optional[str] = None
    is_bold: bool = False
    is_italic: bool = False


@dataclass(frozen=True)
class Color:
    """An RGB color shared by reference across elements."""
    id: Optional[str]
    rgb: Optional[Tuple[int, int, int]] = (0, 0, 0)


@dataclass
class FontFace:
    """A font applied at a given point size."""
    font: Optional[Font]
    size: float = 0.0

    def __post_init__(self):
        self.size = _single(self.size)


@dataclass
class Position:
    """Page-relative placement of an element."""
    # Back-reference to the owning page; excluded from repr/eq to avoid cycles.
    page: Optional["Page"] = field(default=None, repr=False, compare=False)
    rectangle: Optional[Rectangle] = None

    @property
    def page_number(self) -> int:
        return self.page.number if self.page is not None else 0


@dataclass
class Character:
    """A single extracted glyph."""
    text: Optional[str] = None
    position: Optional[Position] = None
    font_face: Optional[FontFace] = None
    color: Optional[Color] = None


@dataclass
class Figure:
    """An embedded image or other raster region."""
    position: Optional[Position] = None


@dataclass
class Shape:
    """A vector drawing primitive."""
    position: Optional[Position] = None
    color: Optional[Color] = None


@dataclass
class Page:
    """One numbered page with its elements."""
    number: int
    width: float
    height: float
    characters: List[Optional[Character]] = field(default_factory=list)
    figures: List[Optional[Figure]] = field(default_factory=list)
    shapes: List[Optional[Shape]] = field(default_factory=list)

    def __post_init__(self):
        self.width = _single(self.width)
        self.height = _single(self.height)

    def position(self, min_x: float, min_y: float, max_x: float, max_y: float) -> Position:
        """Build a position on this page for the given bounding box."""
        return Position(page=self, rectangle=Rectangle(min_x, min_y, max_x, max_y))


@dataclass
class Document:
    """An extracted document: an ordered sequence of pages."""
    pages: List[Optional[Page]] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)
