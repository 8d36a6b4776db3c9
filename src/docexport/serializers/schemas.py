"""Pydantic v2 schemas for serialization requests.

Using modern Pydantic v2 patterns:
- ConfigDict instead of Config class
- field_validator instead of validator
"""

from typing import Any, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import settings
from .base import ElementClass, OutputFormat


class SerializationRequest(BaseModel):
    """A resolved output format plus the element classes to emit."""
    model_config = ConfigDict(frozen=True)

    output_format: OutputFormat = Field(
        default_factory=lambda: OutputFormat.from_string(settings.DEFAULT_OUTPUT_FORMAT)
    )
    element_classes: List[ElementClass] = Field(default_factory=ElementClass.all)

    @field_validator("output_format", mode="before")
    @classmethod
    def normalize_format(cls, v: Any) -> Any:
        if isinstance(v, str) and not isinstance(v, OutputFormat):
            return v.strip().lower()
        return v

    @field_validator("element_classes", mode="before")
    @classmethod
    def drop_unknown_classes(cls, v: Any) -> Any:
        if v is None:
            return ElementClass.all()
        if isinstance(v, str):
            v = [v]
        return ElementClass.from_values(v)

    @classmethod
    def from_names(
        cls,
        format_name: Optional[Union[OutputFormat, str]] = None,
        class_names: Optional[Iterable[Union[ElementClass, str]]] = None
    ) -> "SerializationRequest":
        """
        Build a request from user-facing names.

        A format_name of None selects the configured DEFAULT_OUTPUT_FORMAT.

        Raises:
            InvalidFormatError: If the format name is unknown
        """
        if format_name is None:
            format_name = settings.DEFAULT_OUTPUT_FORMAT
        output_format = OutputFormat.from_string(format_name)
        element_classes = None if class_names is None else list(class_names)
        return cls(output_format=output_format, element_classes=element_classes)
