# -*- coding: utf-8 -*-
"""
Lay characters out on the sheet and drive the renderer over them.

Cells are `font_size` pixels square, filled left to right, `chars_per_line`
per row, in the order given (code point order from the extractor).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from PIL import Image

from chinese_bitmap_font.config import Config
from chinese_bitmap_font.glyphs import GlyphResolver, OutlinedGlyph
from chinese_bitmap_font.placement import glyph_offset
from chinese_bitmap_font.render import ShadowRenderer, renderer_for_size


@dataclass(frozen=True)
class PlacedGlyph:
    index: int
    char: str
    glyph: OutlinedGlyph
    offset: Tuple[int, int]


def sheet_size(char_count: int, chars_per_line: int, font_size: int) -> Tuple[int, int]:
    rows = -(-char_count // chars_per_line)
    return chars_per_line * font_size, rows * font_size


def cell_origin(index: int, chars_per_line: int, font_size: int) -> Tuple[int, int]:
    row, col = divmod(index, chars_per_line)
    return col * font_size, row * font_size


def place_glyphs(chars: Sequence[str], resolver: GlyphResolver, is_zh_hant: bool) -> List[PlacedGlyph]:
    """
    Resolve and position every character once, in order.

    Characters the font has no glyph for are reported and left out; their
    cells stay blank. Glyphs without contours are left out silently.
    """
    placed: List[PlacedGlyph] = []
    for i, ch in enumerate(chars):
        name = resolver.glyph_for(ch)
        if name is None:
            print(f"[Warning] The glyph for '{ch}' (U+{ord(ch):04X}) is not found! (index: {i})")
            continue

        glyph = resolver.outline(name)
        if glyph is None:
            continue

        offset = glyph_offset(ch, name, glyph, resolver, is_zh_hant)
        placed.append(PlacedGlyph(index=i, char=ch, glyph=glyph, offset=offset))
    return placed


def paint_glyphs(
    img: Image.Image,
    placed: Sequence[PlacedGlyph],
    renderer: ShadowRenderer,
    chars_per_line: int,
) -> None:
    pixels = img.load()
    for pass_index in range(renderer.passes):
        for p in placed:
            cx, cy = cell_origin(p.index, chars_per_line, renderer.font_size)
            ox, oy = p.offset
            for x, y in p.glyph.lit_pixels():
                renderer.paint(pixels, cx + x + ox, cy + y + oy, pass_index)


def render_sheet(
    chars: Sequence[str],
    resolver: GlyphResolver,
    font_size: int,
    config: Config,
    is_zh_hant: bool = False,
) -> Image.Image:
    renderer = renderer_for_size(font_size, config)
    if not chars:
        raise ValueError("No characters to render")

    size = sheet_size(len(chars), config.chars_per_line, font_size)
    img = Image.new("RGB", size, config.img_bg_color)

    placed = place_glyphs(chars, resolver, is_zh_hant)
    paint_glyphs(img, placed, renderer, config.chars_per_line)
    return img


def write_png(path: Path, img: Image.Image) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path, format="PNG")
