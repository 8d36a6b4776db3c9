"""Tests for format selection, the serializer factory and request schemas."""

import json

import pytest
from pydantic import ValidationError

from docexport.core.exceptions import DocExportError, InvalidFormatError
from docexport.core.models import Document, Page
from docexport.serializers import (
    ElementClass,
    FormatSerializer,
    OutputFormat,
    SerializationRequest,
    SerializerFactory,
    serialize_document,
)
from docexport.serializers.json_serializer import JSONSerializer
from docexport.serializers.xml_serializer import XMLSerializer


class TestOutputFormat:
    """Test format name resolution."""

    @pytest.mark.parametrize("name, expected", [
        ("json", OutputFormat.JSON),
        ("JSON", OutputFormat.JSON),
        (" Xml ", OutputFormat.XML),
        (OutputFormat.XML, OutputFormat.XML),
    ])
    def test_from_string(self, name, expected):
        assert OutputFormat.from_string(name) is expected

    @pytest.mark.parametrize("name", ["pdf", "", None])
    def test_from_string_invalid(self, name):
        with pytest.raises(InvalidFormatError) as exc_info:
            OutputFormat.from_string(name)

        assert exc_info.value.error_code == "InvalidFormatError"
        assert exc_info.value.details["available"] == ["json", "xml"]
        assert isinstance(exc_info.value, DocExportError)

    def test_names(self):
        assert OutputFormat.names() == ["json", "xml"]
        assert OutputFormat.is_valid("XML")
        assert not OutputFormat.is_valid("yaml")

    def test_properties(self):
        assert OutputFormat.JSON.file_extension == ".json"
        assert OutputFormat.XML.display_name.startswith("XML")


class TestElementClass:
    """Test permissive element class resolution."""

    def test_all_in_canonical_order(self):
        assert ElementClass.all() == [ElementClass.CHARACTERS, ElementClass.FIGURES, ElementClass.SHAPES]

    def test_from_strings_ignores_unknown(self):
        assert ElementClass.from_strings("Shapes", "tables", "characters") == [
            ElementClass.SHAPES,
            ElementClass.CHARACTERS,
        ]

    def test_from_values_collapses_duplicates(self):
        values = ["figures", ElementClass.FIGURES, " FIGURES ", 42]
        assert ElementClass.from_values(values) == [ElementClass.FIGURES]


class TestSerializerFactory:
    """Test serializer registration and creation."""

    def test_builtin_formats_registered(self):
        assert set(SerializerFactory.get_available_formats()) == {OutputFormat.JSON, OutputFormat.XML}
        assert SerializerFactory.is_registered(OutputFormat.XML)

    def test_create(self, config):
        assert isinstance(SerializerFactory.create(OutputFormat.JSON, config), JSONSerializer)
        assert isinstance(SerializerFactory.create("XML", config), XMLSerializer)

    def test_create_passes_config(self, config):
        serializer = SerializerFactory.create(OutputFormat.XML, config)
        assert serializer.config is config

    def test_create_unknown_format(self):
        with pytest.raises(InvalidFormatError):
            SerializerFactory.create("csv")

    def test_duplicate_registration(self):
        class OtherJSONSerializer(FormatSerializer):
            format_type = OutputFormat.JSON

            def _render(self, doc, clazzes, registry):
                return "{}"

        with pytest.raises(ValueError, match="already registered by JSONSerializer"):
            SerializerFactory.register(OutputFormat.JSON)(OtherJSONSerializer)

        assert isinstance(SerializerFactory.create(OutputFormat.JSON), JSONSerializer)

    def test_clear_registry(self):
        saved = dict(SerializerFactory._registry)
        try:
            SerializerFactory.clear_registry()
            assert SerializerFactory.get_available_formats() == []
            with pytest.raises(InvalidFormatError):
                SerializerFactory.create(OutputFormat.JSON)
        finally:
            SerializerFactory._registry.update(saved)

        assert SerializerFactory.is_registered(OutputFormat.JSON)


class TestSerializationRequest:
    """Test request validation."""

    def test_defaults(self):
        request = SerializationRequest()
        assert request.output_format == OutputFormat.JSON
        assert request.element_classes == ElementClass.all()

    def test_normalizes_format(self):
        assert SerializationRequest(output_format=" XML ").output_format is OutputFormat.XML

    def test_from_names_uses_configured_default(self, reload_settings):
        reload_settings(DEFAULT_OUTPUT_FORMAT="XML")

        assert SerializationRequest.from_names().output_format is OutputFormat.XML
        assert SerializationRequest().output_format is OutputFormat.XML

    def test_invalid_format(self):
        with pytest.raises(ValidationError):
            SerializationRequest(output_format="pdf")

    def test_element_classes(self):
        request = SerializationRequest(element_classes=["shapes", "bogus", "Shapes", "figures"])
        assert request.element_classes == [ElementClass.SHAPES, ElementClass.FIGURES]

    def test_single_class_name(self):
        assert SerializationRequest(element_classes="figures").element_classes == [ElementClass.FIGURES]

    def test_none_selects_all(self):
        assert SerializationRequest(element_classes=None).element_classes == ElementClass.all()

    def test_frozen(self):
        request = SerializationRequest()
        with pytest.raises(ValidationError):
            request.output_format = OutputFormat.XML

    def test_from_names(self):
        request = SerializationRequest.from_names("Xml", ("characters",))
        assert request.output_format is OutputFormat.XML
        assert request.element_classes == [ElementClass.CHARACTERS]

    def test_from_names_invalid_format(self):
        with pytest.raises(InvalidFormatError):
            SerializationRequest.from_names("docx")


class TestSerializeDocument:
    """Test the top-level dispatcher."""

    def test_none_document(self):
        assert serialize_document(None, "json") is None
        assert serialize_document(None, "xml") is None

    def test_json(self, single_char_document, config):
        content = serialize_document(single_char_document, "JSON", ["characters"], config)
        data = json.loads(content)

        assert list(data) == ["characters", "fonts", "colors", "pages"]
        assert data["characters"][0]["character"]["text"] == "A"

    def test_xml(self, single_char_document, config):
        content = serialize_document(single_char_document, OutputFormat.XML, ["figures"], config)

        assert content.startswith(b"<document>\n  <figures>\n  </figures>\n  <pages>")
        assert content.endswith(b"</document>")

    def test_all_classes_by_default(self, config):
        data = json.loads(serialize_document(Document(), config=config))
        assert data == {"characters": [], "figures": [], "shapes": []}

    def test_unknown_format(self, single_char_document):
        with pytest.raises(InvalidFormatError):
            serialize_document(single_char_document, "yaml")

    def test_configured_default_format(self, reload_settings, single_char_document, config):
        reload_settings(DEFAULT_OUTPUT_FORMAT="xml")
        content = serialize_document(single_char_document, config=config)

        assert content.startswith(b"<document>\n  <characters>")

    def test_unknown_configured_default_format(self, reload_settings, single_char_document):
        reload_settings(DEFAULT_OUTPUT_FORMAT="yaml")

        with pytest.raises(InvalidFormatError):
            serialize_document(single_char_document)

    def test_formats_render_numbers_alike(self, config):
        page = Page(number=1, width=1e10, height=0.1)
        doc = Document(pages=[page])

        data = json.loads(serialize_document(doc, "json", [], config))
        xml = serialize_document(doc, "xml", [], config).decode("utf-8")

        assert f"<width>{data['pages'][0]['width']!r}</width>" in xml
        assert "<width>10000000000.0</width>" in xml
        assert "<height>0.1</height>" in xml

    def test_same_document_same_bytes(self, mixed_document, config):
        for output_format in OutputFormat:
            first = serialize_document(mixed_document, output_format, config=config)
            second = serialize_document(mixed_document, output_format, config=config)
            assert first == second
