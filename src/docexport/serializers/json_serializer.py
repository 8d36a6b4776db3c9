"""
JSON serializer for extracted documents.

Builds one nested object and dumps it pretty-printed.
"""

import json
from typing import Any, Dict, List

import numpy as np

from ..core.models import Document
from .base import COLORS, FONTS, PAGES, ElementClass, FormatSerializer, OutputFormat
from .encoders import encode_color, encode_elements, encode_font, encode_page, encoder_for
from .factory import SerializerFactory
from .geometry import single_to_float
from .registry import ResourceRegistry


def _to_json(value: Any) -> Any:
    # float32 is not a float subclass; json hands it here
    if isinstance(value, np.floating):
        return single_to_float(value)
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.bool_):
        return bool(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


@SerializerFactory.register(OutputFormat.JSON)
class JSONSerializer(FormatSerializer):
    """Serializer that outputs documents as JSON."""

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.JSON

    def _render(
        self,
        doc: Document,
        clazzes: List[ElementClass],
        registry: ResourceRegistry
    ) -> str:
        pages = list(self._pages(doc))
        result: Dict[str, Any] = {}

        # Elements first: encoding them fills the registry.
        for clazz in clazzes:
            encoder = encoder_for(clazz)
            records = encode_elements(pages, encoder, registry)
            result[clazz.value] = [{encoder.unit_name: record} for record in records]

        fonts = [encode_font(font) for font in registry.fonts]
        if fonts:
            result[FONTS] = fonts

        colors = [c for c in (encode_color(color) for color in registry.colors) if c]
        if colors:
            result[COLORS] = colors

        pages_json = [encode_page(page) for page in pages]
        if pages_json:
            result[PAGES] = pages_json

        return json.dumps(result, indent=self.config.indent, ensure_ascii=False, default=_to_json)
