# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import FrozenSet, List, Tuple

# -----------------------------
# Character set
# -----------------------------
# https://zh.wikipedia.org/wiki/%E6%A0%87%E7%82%B9%E7%AC%A6%E5%8F%B7
CHINESE_PUNCTUATION_MARKS: Tuple[str, ...] = (
    "·", "—", "‘", "’", "“", "”", "…", "、", "。", "〈", "〉", "《", "》", "「", "」", "『", "』",
    "【", "】", "〔", "〕", "︰", "！", "（", "）", "，", "．", "：", "；", "？", "［", "］",
)
PUNCTUATION_SET: FrozenSet[str] = frozenset(CHINESE_PUNCTUATION_MARKS)

# Han ideograph blocks (inclusive code point ranges)
HAN_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0x3400, 0x4DBF),  # Extension A
    (0x20000, 0x2A6DF),  # Extension B
    (0x2A700, 0x2B73F),  # Extension C
    (0x2B740, 0x2B81F),  # Extension D
    (0x2B820, 0x2CEAF),  # Extension E
    (0x2CEB0, 0x2EBEF),  # Extension F
    (0x30000, 0x3134F),  # Extension G
    (0xF900, 0xFAFF),  # Compatibility Ideographs
    (0x2F800, 0x2FA1F),  # Compatibility Ideographs Supplement
)


def is_punctuation(ch: str) -> bool:
    return ch in PUNCTUATION_SET


def is_chinese(ch: str) -> bool:
    cp = ord(ch)
    return any(lo <= cp <= hi for lo, hi in HAN_RANGES)


def is_in_scope(ch: str) -> bool:
    return not ch.isspace() and (is_punctuation(ch) or is_chinese(ch))


def get_unique_chinese_chars(text: str) -> List[str]:
    """
    Collect every in-scope character of `text` once, sorted by code point.

    The position in the returned list is the cell index in the sheet.
    Raises ValueError when nothing is left after filtering.
    """
    chars = sorted({ch for ch in text if is_in_scope(ch)}, key=ord)
    if not chars:
        raise ValueError("No chinese characters found in game script!")
    return chars
