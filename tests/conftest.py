"""Shared fixtures: small TrueType fonts built in memory.

All test fonts use 1000 units per em, ascender 800 and descender -200, so
in em units the font height is 1.0 and (without line gap) the line height
is 1.0. Box glyphs span exactly their advance horizontally.

Glyphs:
    A  box 600 x 700           advance 600
    B  box 500 x 700           advance 500
    H  box 700 x 700           advance 700
    i  box 300 x 500           advance 300
    Y  box 600 x 700           advance 600
    o  box 600 x 500           advance 600
    u  box 600 x 500           advance 600
    O  800 x 700 ring with a 400 x 300 hole   advance 800
    c  quadratic curve glyph   advance 500
    -  zero-area outline       advance 300
    space (optional)           advance 250, no outline
    U+200B                     advance 0, no outline
    Aring (U+00C5)             composite of A and i, i shifted to (150, 750)   advance 600

The CFF test font (build_test_cff_font) holds a single cubic glyph O: an
ellipse spanning 800 x 700 with a 200 x 200 square hole, advance 800.
"""

import io
from collections.abc import Callable, Iterator

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

from textmesh.io import Font

UPM = 1000
ASCENT = 800
DESCENT = -200


def _box(width: int, height: int):
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, height))
    pen.lineTo((width, height))
    pen.lineTo((width, 0))
    pen.closePath()
    return pen.glyph()


def _ring():
    pen = TTGlyphPen(None)
    # Outer contour, clockwise
    pen.moveTo((0, 0))
    pen.lineTo((0, 700))
    pen.lineTo((800, 700))
    pen.lineTo((800, 0))
    pen.closePath()
    # Hole, counter-clockwise
    pen.moveTo((200, 200))
    pen.lineTo((600, 200))
    pen.lineTo((600, 500))
    pen.lineTo((200, 500))
    pen.closePath()
    return pen.glyph()


def _curve():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.qCurveTo((500, 0), (500, 500))
    pen.lineTo((0, 500))
    pen.closePath()
    return pen.glyph()


def _flat():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((150, 0))
    pen.lineTo((300, 0))
    pen.closePath()
    return pen.glyph()


def _empty():
    return TTGlyphPen(None).glyph()


def _composite():
    # fontTools checks component names against the pen's glyph set.
    pen = TTGlyphPen({"A": None, "i": None})
    pen.addComponent("A", (1, 0, 0, 1, 0, 0))
    pen.addComponent("i", (1, 0, 0, 1, 150, 750))
    return pen.glyph()


def build_test_font(with_space: bool = True, line_gap: int = 0) -> bytes:
    """Build the test font and return its TTF bytes."""
    glyphs = {
        ".notdef": (_empty(), 500),
        "A": (_box(600, 700), 600),
        "B": (_box(500, 700), 500),
        "H": (_box(700, 700), 700),
        "i": (_box(300, 500), 300),
        "Y": (_box(600, 700), 600),
        "o": (_box(600, 500), 600),
        "u": (_box(600, 500), 600),
        "O": (_ring(), 800),
        "c": (_curve(), 500),
        "hyphen": (_flat(), 300),
        "uni200B": (_empty(), 0),
        "Aring": (_composite(), 600),
    }
    cmap = {
        ord("A"): "A",
        ord("B"): "B",
        ord("H"): "H",
        ord("i"): "i",
        ord("Y"): "Y",
        ord("o"): "o",
        ord("u"): "u",
        ord("O"): "O",
        ord("c"): "c",
        ord("-"): "hyphen",
        0x200B: "uni200B",
        0x00C5: "Aring",
    }
    if with_space:
        glyphs["space"] = (_empty(), 250)
        cmap[ord(" ")] = "space"

    glyph_order = list(glyphs)

    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf({name: glyph for name, (glyph, _) in glyphs.items()})
    fb.setupHorizontalMetrics({name: (advance, 0) for name, (_, advance) in glyphs.items()})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT, lineGap=line_gap)
    fb.setupNameTable({"familyName": "TextMesh Test", "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=DESCENT,
        usWinAscent=ASCENT,
        usWinDescent=-DESCENT,
    )
    fb.setupPost()

    buffer = io.BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


def _cubic_ring(advance: int):
    pen = T2CharStringPen(width=advance, glyphSet=None)
    # Ellipse centered at (400, 350), counter-clockwise as CFF expects
    pen.moveTo((800, 350))
    pen.curveTo((800, 543), (621, 700), (400, 700))
    pen.curveTo((179, 700), (0, 543), (0, 350))
    pen.curveTo((0, 157), (179, 0), (400, 0))
    pen.curveTo((621, 0), (800, 157), (800, 350))
    pen.closePath()
    # Square hole, clockwise
    pen.moveTo((300, 250))
    pen.lineTo((300, 450))
    pen.lineTo((500, 450))
    pen.lineTo((500, 250))
    pen.closePath()
    return pen.getCharString()


def build_test_cff_font() -> bytes:
    """Build a CFF-flavoured OpenType font with one cubic ring glyph."""
    notdef = T2CharStringPen(width=500, glyphSet=None)
    charstrings = {".notdef": notdef.getCharString(), "O": _cubic_ring(800)}

    fb = FontBuilder(UPM, isTTF=False)
    fb.setupGlyphOrder([".notdef", "O"])
    fb.setupCharacterMap({ord("O"): "O"})
    fb.setupCFF(
        psName="TextMeshTestCFF-Regular",
        fontInfo={"FamilyName": "TextMesh Test CFF", "FullName": "TextMesh Test CFF Regular"},
        charStringsDict=charstrings,
        privateDict={},
    )
    fb.setupHorizontalMetrics({".notdef": (500, 0), "O": (800, 0)})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({"familyName": "TextMesh Test CFF", "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=DESCENT,
        usWinAscent=ASCENT,
        usWinDescent=-DESCENT,
    )
    fb.setupPost()

    buffer = io.BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def font_bytes() -> bytes:
    """TTF bytes of the default test font."""
    return build_test_font()


@pytest.fixture
def make_font() -> Iterator[Callable[..., Font]]:
    """Factory building and parsing test font variants; closes them afterwards."""
    fonts: list[Font] = []

    def factory(with_space: bool = True, line_gap: int = 0) -> Font:
        font = Font.from_bytes(build_test_font(with_space=with_space, line_gap=line_gap))
        fonts.append(font)
        return font

    yield factory

    for font in fonts:
        font.close()


@pytest.fixture
def font(make_font: Callable[..., Font]) -> Font:
    """Parsed default test font."""
    return make_font()


@pytest.fixture
def cff_font() -> Iterator[Font]:
    """Parsed CFF test font."""
    font = Font.from_bytes(build_test_cff_font())
    yield font
    font.close()


@pytest.fixture
def font_file(tmp_path, font_bytes: bytes):
    """Default test font written to a temporary .ttf file."""
    path = tmp_path / "TextMeshTest-Regular.ttf"
    path.write_bytes(font_bytes)
    return path
