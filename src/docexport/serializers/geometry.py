"""Geometry encoding shared by all element encoders.

Coordinates stay numpy float32 end to end. Both writers render them through
single_to_float: the shortest decimal that round-trips at single precision
(10.0, not 10.000000149...), written in Python float notation so JSON and
XML spell a value the same way (10000000000.0, not 1e+10).
"""

from typing import Any, Dict, Optional

import numpy as np

from ..core.models import Position
from .base import MAX_X, MAX_Y, MIN_X, MIN_Y, PAGE


def single_to_float(value: Any) -> float:
    """Convert a float32 to the Python float with the same shortest decimal."""
    return float(str(np.float32(value)))


def format_single(value: Any) -> str:
    """Render a value at single precision, as json.dumps would."""
    return repr(single_to_float(value))


def encode_position(position: Optional[Position]) -> Optional[Dict[str, Any]]:
    """
    Encode a position into its page/rectangle record.

    Args:
        position: Position to encode

    Returns:
        Record with page, minX, minY, maxX, maxY, or None unless the page
        number is positive and the rectangle is present
    """
    if position is None:
        return None

    page_number = position.page_number
    rect = position.rectangle
    if page_number <= 0 or rect is None:
        return None

    return {
        PAGE: page_number,
        MIN_X: np.float32(rect.min_x),
        MIN_Y: np.float32(rect.min_y),
        MAX_X: np.float32(rect.max_x),
        MAX_Y: np.float32(rect.max_y),
    }
