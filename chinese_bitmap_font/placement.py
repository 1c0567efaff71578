# -*- coding: utf-8 -*-
"""
Where a rasterized glyph lands inside its cell.

The numbers here are tuned by eye for Fusion Pixel Font at 9px. Another font
face needs its own values, which is why they are kept as named constants.
"""

from __future__ import annotations

import math
from typing import Dict, Tuple

from chinese_bitmap_font.charset import CHINESE_PUNCTUATION_MARKS, is_punctuation
from chinese_bitmap_font.glyphs import GlyphResolver, OutlinedGlyph

# -----------------------------
# Policy constants
# -----------------------------
# Fusion Pixel Font 10px = 9px glyph + 1px padding
CHAR_SIZE = 9
# 6.75pt = 9px, doubled to get the font height in pixels
FONT_SCALE = CHAR_SIZE * 0.75 * 2.0
# Thin glyphs whose bearing puts them flush against the right edge move this far left
THIN_GLYPH_NUDGE = 1

# -----------------------------
# Punctuation offsets (Fusion Pixel Font 10px only)
# -----------------------------
# (h, v) for marks drawn the same way in both scripts
_SHARED_OFFSETS: Dict[str, Tuple[int, int]] = {
    "·": (3, 4),
    "—": (0, 4),
    "‘": (5, 0),
    "’": (0, 0),
    "“": (2, 0),
    "”": (0, 0),
    "…": (0, 4),
    "〈": (4, 0),
    "〉": (0, 0),
    "《": (1, 0),
    "》": (0, 0),
    "「": (4, 0),
    "」": (0, 2),
    "『": (2, 0),
    "』": (0, 2),
    "【": (3, 0),
    "】": (0, 0),
    "〔": (4, 0),
    "〕": (0, 0),
    "︰": (3, 1),
    "（": (4, 0),
    "）": (0, 0),
    "［": (4, 0),
    "］": (0, 0),
}

# (zh-hant, zh-hans) for marks centered in traditional fonts, cornered in simplified ones
_VARIANT_OFFSETS: Dict[str, Tuple[Tuple[int, int], Tuple[int, int]]] = {
    "、": ((3, 3), (0, 6)),
    "。": ((2, 3), (0, 5)),
    "！": ((3, 0), (1, 0)),
    "，": ((3, 3), (0, 5)),
    "．": ((3, 4), (0, 6)),
    "：": ((3, 1), (0, 1)),
    "；": ((3, 1), (0, 1)),
    "？": ((1, 0), (0, 0)),
}


def _build_offset_table() -> Dict[Tuple[str, bool], Tuple[int, int]]:
    table: Dict[Tuple[str, bool], Tuple[int, int]] = {}
    for ch, offset in _SHARED_OFFSETS.items():
        table[(ch, True)] = offset
        table[(ch, False)] = offset
    for ch, (hant, hans) in _VARIANT_OFFSETS.items():
        table[(ch, True)] = hant
        table[(ch, False)] = hans
    return table


# (char, is_zh_hant) -> (h_offset, v_offset)
PUNCTUATION_OFFSETS: Dict[Tuple[str, bool], Tuple[int, int]] = _build_offset_table()


def check_offset_table() -> None:
    """Raise RuntimeError unless the table covers exactly the punctuation set, both scripts."""
    expected = {(ch, flag) for ch in CHINESE_PUNCTUATION_MARKS for flag in (True, False)}
    actual = set(PUNCTUATION_OFFSETS)
    if actual != expected:
        missing = sorted(ch for ch, _ in expected - actual)
        extra = sorted(ch for ch, _ in actual - expected)
        raise RuntimeError(
            f"Punctuation offset table out of sync with punctuation set (missing: {missing}, extra: {extra})"
        )


check_offset_table()


# -----------------------------
# Policy
# -----------------------------
def punctuation_offset(ch: str, is_zh_hant: bool) -> Tuple[int, int]:
    try:
        return PUNCTUATION_OFFSETS[(ch, is_zh_hant)]
    except KeyError:
        raise RuntimeError(f"unreachable: no punctuation offset for {ch!r} (U+{ord(ch):04X})") from None


def regular_offset(width: int, height: int, h_side_bearing: float, v_side_bearing: float) -> Tuple[int, int]:
    """
    Offset for an ideograph from its pixel size and (unrounded) side bearings.

    Horizontal: a glyph that would overflow the cell drops its bearing; one
    that is narrower than the cell and ends exactly on its edge moves one pixel
    left; anything else sits at its bearing.
    Vertical: an overflowing glyph is pushed to the bottom of the cell.
    Negative results clamp to 0.
    """
    hb = math.ceil(h_side_bearing)
    vb = math.ceil(v_side_bearing)

    if width + hb > CHAR_SIZE:
        x = 0
    elif width < CHAR_SIZE and width + hb == CHAR_SIZE:
        # 自、当、日、口、白、目
        x = hb - THIN_GLYPH_NUDGE
    else:
        x = hb

    if height + vb > CHAR_SIZE:
        y = CHAR_SIZE - height
    else:
        y = vb

    return max(x, 0), max(y, 0)


def glyph_offset(ch: str, name: str, glyph: OutlinedGlyph, resolver: GlyphResolver, is_zh_hant: bool) -> Tuple[int, int]:
    if is_punctuation(ch):
        return punctuation_offset(ch, is_zh_hant)
    return regular_offset(
        glyph.width,
        glyph.height,
        resolver.h_side_bearing(name),
        resolver.v_side_bearing(name),
    )
