# -*- coding: utf-8 -*-
"""
Cell renderers: how one lit glyph pixel is painted onto the sheet.

10px sheets use `ShadowRenderer` (one pass, shadow to the right and below).
11px sheets use `HaloRenderer` (two passes: a full 8-neighbour halo for every
character first, then the glyph pixels on top).
"""

from __future__ import annotations

from typing import Tuple

from chinese_bitmap_font.config import Config

RGB = Tuple[int, int, int]

SUPPORTED_SIZES = (10, 11)

# Neighbours painted with the shadow color, relative to the glyph pixel
SHADOW_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, 1),  # bottom
    (1, 1),  # bottom-right
    (1, 0),  # right
)
HALO_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, 1),  # bottom
    (1, 1),  # bottom-right
    (1, 0),  # right
    (1, -1),  # top-right
    (0, -1),  # top
    (-1, -1),  # top-left
    (-1, 0),  # left
    (-1, 1),  # bottom-left
)


class ShadowRenderer:
    font_size = 10
    passes = 1

    def __init__(self, char_color: RGB, shadow_color: RGB) -> None:
        self.char_color = char_color
        self.shadow_color = shadow_color

    def paint(self, pixels, x: int, y: int, pass_index: int) -> None:
        for dx, dy in SHADOW_OFFSETS:
            pixels[x + dx, y + dy] = self.shadow_color
        pixels[x, y] = self.char_color


class HaloRenderer(ShadowRenderer):
    font_size = 11
    passes = 2
    # glyph pixels shift by this much to leave room for the halo
    margin = 1

    def paint(self, pixels, x: int, y: int, pass_index: int) -> None:
        x, y = x + self.margin, y + self.margin
        if pass_index == 0:
            for dx, dy in HALO_OFFSETS:
                pixels[x + dx, y + dy] = self.shadow_color
        else:
            pixels[x, y] = self.char_color


def renderer_for_size(font_size: int, config: Config) -> ShadowRenderer:
    for cls in (ShadowRenderer, HaloRenderer):
        if cls.font_size == font_size:
            return cls(config.char_color, config.char_shadow_color)
    raise ValueError(f"Only support 10px or 11px, got {font_size}px")
