"""Shared fixtures: a small TrueType font built in memory.

Glyphs (1000 UPM, typo ascender 800, descender -200, so one line advance is
1000 units):

- .notdef, space: no contours
- A, V: 500x700 boxes, advance 600, kern pair A/V = -80
- I: box x 100..300 spanning exactly one line advance (y -200..800)
- O: 500x700 box with a 300x500 hole
- o: rounded glyph drawn with consecutive off-curve points
"""

import logging
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import newTable
from fontTools.ttLib.tables._k_e_r_n import KernTable_format_0

from textshape.io import FontReader, load_font

UPM = 1000
ASCENT = 800
DESCENT = -200
LINE_HEIGHT = ASCENT - DESCENT

GLYPH_ORDER = [".notdef", "space", "A", "I", "O", "V", "o"]
CMAP = {ord(" "): "space", ord("A"): "A", ord("I"): "I", ord("O"): "O", ord("V"): "V", ord("o"): "o"}
ADVANCES = {".notdef": 500, "space": 250, "A": 600, "I": 400, "O": 600, "V": 600, "o": 500}
KERN_PAIRS = {("A", "V"): -80}


def draw_box(pen: TTGlyphPen, x0: float, y0: float, x1: float, y1: float, hole: bool = False) -> None:
    """Draw a rectangle; outer boxes clockwise, holes counter-clockwise."""
    if hole:
        corners = [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]
    else:
        corners = [(x0, y0), (x0, y1), (x1, y1), (x1, y0)]
    pen.moveTo(corners[0])
    for corner in corners[1:]:
        pen.lineTo(corner)
    pen.closePath()


def _glyph(draw=None):
    pen = TTGlyphPen(None)
    if draw is not None:
        draw(pen)
    return pen.glyph()


def _draw_round(pen: TTGlyphPen) -> None:
    pen.moveTo((250, 0))
    pen.qCurveTo((0, 0), (0, 500), (250, 500))
    pen.qCurveTo((500, 500), (500, 0), (250, 0))
    pen.closePath()


def _draw_o_with_hole(pen: TTGlyphPen) -> None:
    draw_box(pen, 0, 0, 500, 700)
    draw_box(pen, 100, 100, 400, 600, hole=True)


def build_test_font(with_vmtx: bool = False) -> FontBuilder:
    """Build the test font and return its FontBuilder."""
    glyphs = {
        ".notdef": _glyph(),
        "space": _glyph(),
        "A": _glyph(lambda pen: draw_box(pen, 0, 0, 500, 700)),
        "I": _glyph(lambda pen: draw_box(pen, 100, DESCENT, 300, ASCENT)),
        "O": _glyph(_draw_o_with_hole),
        "V": _glyph(lambda pen: draw_box(pen, 0, 0, 500, 700)),
        "o": _glyph(_draw_round),
    }

    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap(CMAP)
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (ADVANCES[name], 0) for name in GLYPH_ORDER})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({"familyName": "TextShape Test", "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=DESCENT,
        usWinAscent=ASCENT,
        usWinDescent=-DESCENT,
    )
    fb.setupPost()

    kern = newTable("kern")
    kern.version = 0
    subtable = KernTable_format_0()
    subtable.coverage = 1
    subtable.kernTable = dict(KERN_PAIRS)
    kern.kernTables = [subtable]
    fb.font["kern"] = kern

    if with_vmtx:
        fb.setupVerticalHeader(ascent=600, descent=-600)
        fb.setupVerticalMetrics({name: (1200, 0) for name in GLYPH_ORDER})

    return fb


@pytest.fixture
def test_font_path(tmp_path: Path) -> Path:
    """Write the test font to a temporary TTF file."""
    path = tmp_path / "TextShapeTest-Regular.ttf"
    build_test_font().save(str(path))
    return path


@pytest.fixture
def font_reader(test_font_path: Path):
    """Load the test font from disk."""
    reader = load_font(test_font_path)
    yield reader
    reader.close()


@pytest.fixture
def memory_reader() -> FontReader:
    """Wrap the in-memory test font without saving it."""
    return FontReader.from_ttfont(build_test_font().font)


@pytest.fixture
def vmtx_reader() -> FontReader:
    """In-memory test font with vertical metrics (advance height 1200)."""
    return FontReader.from_ttfont(build_test_font(with_vmtx=True).font)


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """Put the root logger's handlers back after each test."""
    root = logging.getLogger()
    before = list(root.handlers)
    yield
    for handler in root.handlers:
        if handler not in before:
            handler.close()
    root.handlers[:] = before


@pytest.fixture
def font_builder() -> FontBuilder:
    """A fresh test font builder whose tables a test may edit before wrapping."""
    return build_test_font()
