"""Pytest configuration and shared document fixtures."""

import sys
from pathlib import Path

# Add src before any test imports so "docexport.*" resolves without install
project_root = Path(__file__).parent.parent
src_dir = project_root / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

import importlib

import pytest

from docexport.config import settings
from docexport.core.models import Character, Color, Document, Figure, Font, FontFace, Page, Shape
from docexport.serializers import SerializerConfig


@pytest.fixture
def config():
    """Explicit config so tests don't depend on the environment."""
    return SerializerConfig(indent=2, encoding="utf-8", line_delimiter="\n")


@pytest.fixture
def reload_settings(monkeypatch):
    """Reload settings from a patched environment; restore them afterwards."""
    def _reload(**env):
        for name in ("DEFAULT_OUTPUT_FORMAT", "OUTPUT_INDENT", "OUTPUT_ENCODING", "XML_LINE_ENDING"):
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(settings)

    yield _reload
    monkeypatch.undo()
    importlib.reload(settings)


@pytest.fixture
def arial():
    return Font(id="f1", name="Arial", is_bold=False, is_italic=False)


@pytest.fixture
def black():
    return Color(id="c1", rgb=(0, 0, 0))


@pytest.fixture
def single_char_document(arial, black):
    """One 600x800 page holding the character "A" in 12pt Arial, black."""
    page = Page(number=1, width=600, height=800)
    page.characters.append(Character(
        text="A",
        position=page.position(10, 20, 30, 40),
        font_face=FontFace(arial, 12),
        color=black,
    ))
    return Document(pages=[page])


@pytest.fixture
def mixed_document(arial, black):
    """Two pages with characters, figures and shapes sharing fonts/colors."""
    bold = Font(id="f2", name="Times", is_bold=True)
    red = Color(id="c2", rgb=(255, 0, 0))

    page1 = Page(number=1, width=612, height=792)
    page1.characters.extend([
        Character("H", page1.position(1, 2, 3, 4), FontFace(bold, 10), red),
        Character("i", page1.position(3, 2, 5, 4), FontFace(arial, 10), black),
    ])
    page1.figures.append(Figure(page1.position(100, 100, 200, 150)))
    page1.shapes.append(Shape(page1.position(0, 700, 612, 701), black))

    page2 = Page(number=2, width=612, height=792)
    page2.characters.append(Character("!", page2.position(5, 5, 6, 6), FontFace(bold, 14), red))
    page2.shapes.append(Shape(page2.position(10, 10, 20, 20), Color(id="c3", rgb=(0, 0, 255))))

    return Document(pages=[page1, page2])
