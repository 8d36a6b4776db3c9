#!/usr/bin/env python
"""Quick export test - serializes a sample document as JSON or XML."""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from docexport.config import settings
from docexport.core.exceptions import DocExportError
from docexport.core.models import Character, Color, Document, Figure, Font, FontFace, Page, Shape
from docexport.serializers import ElementClass, OutputFormat, serialize_document


def build_sample_document() -> Document:
    """One page holding a character, a figure and a shape."""
    page = Page(number=1, width=600, height=800)
    arial = Font(id="f1", name="Arial")
    black = Color(id="c1", rgb=(0, 0, 0))
    red = Color(id="c2", rgb=(255, 0, 0))

    page.characters.append(Character(
        text="A",
        position=page.position(10, 20, 30, 40),
        font_face=FontFace(arial, 12),
        color=black,
    ))
    page.figures.append(Figure(position=page.position(50, 60, 250, 200)))
    page.shapes.append(Shape(position=page.position(10, 300, 590, 301.5), color=red))
    return Document(pages=[page])


def main() -> int:
    parser = argparse.ArgumentParser(description="Quick export test")
    parser.add_argument("--format", "-f", default=settings.DEFAULT_OUTPUT_FORMAT,
                        help=f"Output format, one of {OutputFormat.names()} "
                             f"(default: {settings.DEFAULT_OUTPUT_FORMAT})")
    parser.add_argument("--classes", "-c", nargs="*",
                        help=f"Element classes to export (default: all of {[c.value for c in ElementClass]})")
    parser.add_argument("--output", "-o", help="Output path (default: stdout)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        content = serialize_document(build_sample_document(), args.format, args.classes)
    except DocExportError as e:
        print(f"[FAIL] Error: {e.message}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(content)
        print(f"[OK] Wrote {len(content)} bytes to {output_path}", file=sys.stderr)
    else:
        sys.stdout.buffer.write(content + b"\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
