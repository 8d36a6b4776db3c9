"""Call-scoped index of the fonts and colors referenced by encoded elements."""

from typing import Dict, List, Union

from ..core.models import Color, Font


class ResourceRegistry:
    """
    Collects fonts and colors while elements are encoded.

    Entries are keyed by identifier; re-registering an id is a no-op.
    Iteration follows first-registration order so output is reproducible.
    Unit counts per element class are kept alongside for logging.
    """

    def __init__(self):
        self._fonts: Dict[str, Font] = {}
        self._colors: Dict[str, Color] = {}
        self._units: Dict[str, int] = {}

    def register(self, resource: Union[Font, Color]) -> None:
        """
        Register a font or color.

        Args:
            resource: The font or color referenced by an encoded element

        Raises:
            TypeError: If resource is neither a Font nor a Color
        """
        if isinstance(resource, Font):
            self._fonts.setdefault(resource.id, resource)
        elif isinstance(resource, Color):
            self._colors.setdefault(resource.id, resource)
        else:
            raise TypeError(f"Cannot register resource of type {type(resource).__name__}")

    def count_units(self, element_class: str, count: int) -> None:
        """Record how many units of an element class were encoded."""
        self._units[element_class] = self._units.get(element_class, 0) + count

    @property
    def fonts(self) -> List[Font]:
        return list(self._fonts.values())

    @property
    def colors(self) -> List[Color]:
        return list(self._colors.values())

    @property
    def unit_counts(self) -> Dict[str, int]:
        return dict(self._units)
