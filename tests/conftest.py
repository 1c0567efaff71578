# -*- coding: utf-8 -*-
"""
Tiny TrueType fonts built on the fly.

Vertical metrics are chosen so that FONT_SCALE (13.5px) maps exactly 128 font
units to one pixel: ascent - descent = 1728 = 13.5 * 128. Most glyphs are
plain rectangles given in pixels, so their raster is exact.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Union

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

PX = 128
UPM = 1024
ASCENT = 1344
DESCENT = -384

# (x0, y0, x1, y1) in pixels, y up from the baseline; None = glyph without contours
Rect = Optional[Tuple[int, int, int, int]]
# or a function drawing the glyph in font units
GlyphDrawing = Union[Rect, Callable[[TTGlyphPen], None]]

DEFAULT_GLYPHS: Dict[str, GlyphDrawing] = {
    "。": (0, 0, 2, 2),
    "你": (1, 0, 9, 8),  # 8x8, bearing 1: ends flush with the 9px edge
    "日": (2, 0, 7, 9),  # 5x9, bearing 2
    " ": None,
}


def draw_round_right(pen: TTGlyphPen) -> None:
    # x 1..6px with a quadratic right edge bulging out to a control point at 8.5px
    pen.moveTo((1 * PX, 0))
    pen.lineTo((1 * PX, 8 * PX))
    pen.lineTo((6 * PX, 8 * PX))
    pen.qCurveTo((int(8.5 * PX), 4 * PX), (6 * PX, 0))
    pen.closePath()


def glyph_name_from_char(ch: str) -> str:
    cp = ord(ch)
    if cp == 0x20:
        return "space"
    return f"uni{cp:04X}"


def build_font(
    path: Path,
    glyphs: Dict[str, GlyphDrawing],
    vertical_bearings: Optional[Dict[str, int]] = None,
    hhea: Tuple[int, int] = (ASCENT, DESCENT),
    typo: Tuple[int, int] = (ASCENT, DESCENT),
    win: Tuple[int, int] = (ASCENT, -DESCENT),
    fs_selection: int = 0,
) -> Path:
    names = [glyph_name_from_char(ch) for ch in glyphs]
    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder([".notdef"] + names)

    glyf: Dict[str, object] = {}
    hmtx: Dict[str, Tuple[int, int]] = {}

    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, 8 * PX))
    pen.lineTo((8 * PX, 8 * PX))
    pen.lineTo((8 * PX, 0))
    pen.closePath()
    glyf[".notdef"] = pen.glyph()
    hmtx[".notdef"] = (10 * PX, 0)

    for ch, rect in glyphs.items():
        name = glyph_name_from_char(ch)
        pen = TTGlyphPen(None)
        if rect is None:
            glyf[name] = pen.glyph()
            hmtx[name] = (10 * PX, 0)
            continue
        if callable(rect):
            rect(pen)
        else:
            x0, y0, x1, y1 = (v * PX for v in rect)
            pen.moveTo((x0, y0))
            pen.lineTo((x0, y1))
            pen.lineTo((x1, y1))
            pen.lineTo((x1, y0))
            pen.closePath()
        glyph = pen.glyph()
        glyf[name] = glyph
        hmtx[name] = (10 * PX, min(x for x, _ in glyph.coordinates))

    fb.setupGlyf(glyf)
    fb.setupHorizontalMetrics(hmtx)
    fb.setupCharacterMap({ord(ch): glyph_name_from_char(ch) for ch in glyphs})
    fb.setupHorizontalHeader(ascent=hhea[0], descent=hhea[1])

    if vertical_bearings is not None:
        vmtx = {".notdef": (UPM, 0)}
        for ch in glyphs:
            vmtx[glyph_name_from_char(ch)] = (UPM, vertical_bearings.get(ch, 0) * PX)
        fb.setupVerticalHeader(ascent=UPM // 2, descent=-(UPM // 2))
        fb.setupVerticalMetrics(vmtx)

    fb.setupOS2(
        version=4,
        fsSelection=fs_selection,
        sTypoAscender=typo[0],
        sTypoDescender=typo[1],
        usWinAscent=win[0],
        usWinDescent=win[1],
    )
    fb.setupNameTable({"familyName": "Test Pixel", "styleName": "Regular"})
    fb.setupPost()

    path.parent.mkdir(parents=True, exist_ok=True)
    fb.save(str(path))
    return path


@pytest.fixture
def font_path(tmp_path: Path) -> Path:
    return build_font(tmp_path / "test.ttf", DEFAULT_GLYPHS)


@pytest.fixture
def font_without_ri(tmp_path: Path) -> Path:
    glyphs = {ch: rect for ch, rect in DEFAULT_GLYPHS.items() if ch != "日"}
    return build_font(tmp_path / "no-ri.ttf", glyphs)
