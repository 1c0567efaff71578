# -*- coding: utf-8 -*-
"""
Glyph lookup, metrics and rasterization on top of fontTools.

Everything is expressed in pixels at one fixed scale: the font height
(ascender - descender) is mapped to `scale` pixels, and the same factor is
applied to both axes. Rasterization goes through fontTools' FreeTypePen, which
returns a coverage mask whose top-left pixel is the top-left corner of the
glyph's pixel bounds.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple, Union

import numpy as np
from fontTools.misc.transform import Transform
from fontTools.pens.boundsPen import ControlBoundsPen
from fontTools.pens.freetypePen import FreeTypePen
from fontTools.ttLib import TTFont

# OS/2 fsSelection bit 7
USE_TYPO_METRICS = 1 << 7

# A pixel is lit when its coverage is strictly above this value.
COVERAGE_THRESHOLD = 0.5


@dataclass(frozen=True)
class PixelBounds:
    # y grows downward, like the canvas
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class OutlinedGlyph:
    name: str
    bounds: PixelBounds
    coverage: np.ndarray  # shape (height, width), values in [0, 1]

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def lit_pixels(self, threshold: float = COVERAGE_THRESHOLD) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) of every lit pixel, row by row, left to right."""
        for y, x in np.argwhere(self.coverage > threshold):
            yield int(x), int(y)


def _fallback(value: int, typo: int, win: int) -> int:
    # each metric falls back on its own: hhea, then OS/2 typo, then OS/2 win
    if value == 0:
        value = typo
    if value == 0:
        value = win
    return value


def font_height_units(font: TTFont) -> int:
    hhea = font["hhea"]
    os2 = font["OS/2"] if "OS/2" in font else None

    if os2 is None:
        return hhea.ascent - hhea.descent

    if os2.fsSelection & USE_TYPO_METRICS:
        return os2.sTypoAscender - os2.sTypoDescender

    ascent = _fallback(hhea.ascent, os2.sTypoAscender, os2.usWinAscent)
    descent = _fallback(hhea.descent, os2.sTypoDescender, -os2.usWinDescent)
    return ascent - descent


class GlyphResolver:
    """
    Read-only view of one font at one pixel scale.

    Outlines are cached per glyph name, so rendering a character in several
    passes rasterizes it only once. A font opened from a path is owned by the
    resolver and closed by `close()` or on leaving a `with` block.
    """

    def __init__(self, font: Union[TTFont, str, Path], scale: float) -> None:
        self._owns_font = not isinstance(font, TTFont)
        self.font = TTFont(str(font), lazy=True) if self._owns_font else font
        self.scale = scale

        height = font_height_units(self.font)
        if height <= 0:
            self.close()
            raise ValueError(f"Font has no usable vertical metrics (ascender - descender = {height})")
        self.factor = scale / height

        self._cmap: Dict[int, str] = self.font.getBestCmap() or {}
        self._glyph_set = self.font.getGlyphSet()
        self._has_vmtx = "vmtx" in self.font
        self._outlines: Dict[str, Optional[OutlinedGlyph]] = {}

    def __enter__(self) -> "GlyphResolver":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_font:
            self.font.close()

    def glyph_for(self, ch: str) -> Optional[str]:
        """Glyph name for `ch`, or None when the font has no glyph for it."""
        name = self._cmap.get(ord(ch))
        if name is None or self.font.getGlyphID(name) == 0:
            return None
        return name

    def h_side_bearing(self, name: str) -> float:
        _, lsb = self.font["hmtx"][name]
        return lsb * self.factor

    def v_side_bearing(self, name: str) -> float:
        if not self._has_vmtx:
            return 0.0
        _, tsb = self.font["vmtx"][name]
        return tsb * self.factor

    def pixel_bounds(self, name: str) -> Optional[PixelBounds]:
        # control-point box, the same rectangle as the glyf header bounds
        pen = ControlBoundsPen(self._glyph_set)
        self._glyph_set[name].draw(pen)
        if pen.bounds is None:
            return None

        x_min, y_min, x_max, y_max = pen.bounds
        s = self.factor
        return PixelBounds(
            min_x=math.floor(x_min * s),
            min_y=math.floor(-y_max * s),
            max_x=math.ceil(x_max * s),
            max_y=math.ceil(-y_min * s),
        )

    def outline(self, name: str) -> Optional[OutlinedGlyph]:
        """Rasterized glyph, or None when the glyph has no contours."""
        if name not in self._outlines:
            self._outlines[name] = self._rasterize(name)
        return self._outlines[name]

    def _rasterize(self, name: str) -> Optional[OutlinedGlyph]:
        bounds = self.pixel_bounds(name)
        if bounds is None:
            return None

        w, h = bounds.width, bounds.height
        if w <= 0 or h <= 0:
            return OutlinedGlyph(name=name, bounds=bounds, coverage=np.zeros((max(h, 0), max(w, 0))))

        pen = FreeTypePen(self._glyph_set)
        self._glyph_set[name].draw(pen)

        # Font units (y up) -> bitmap space whose bottom-left is the bounds' bottom-left.
        # min_y/max_y are flipped, so the bottom edge in y-up space is -max_y.
        s = self.factor
        transform = Transform(s, 0, 0, s, -bounds.min_x, bounds.max_y)
        coverage = pen.array(width=w, height=h, transform=transform, contain=False)
        return OutlinedGlyph(name=name, bounds=bounds, coverage=np.asarray(coverage, dtype=float))
