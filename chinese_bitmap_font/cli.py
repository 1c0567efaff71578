#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from fontTools.ttLib import TTLibError

from chinese_bitmap_font import __version__
from chinese_bitmap_font.charset import get_unique_chinese_chars
from chinese_bitmap_font.config import default_config_path, load_config
from chinese_bitmap_font.glyphs import GlyphResolver
from chinese_bitmap_font.placement import FONT_SCALE
from chinese_bitmap_font.render import SUPPORTED_SIZES
from chinese_bitmap_font.sheet import render_sheet, write_png


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="chinese-bitmap-font",
        description="Generate a bitmap font sheet (PNG) from the Chinese characters used in a game script.",
    )
    ap.add_argument("-t", "--text", required=True, metavar="FILE", help="Game script/text file to collect characters from")
    ap.add_argument("-f", "--font", required=True, metavar="FILE", help="Font file used to draw the characters")
    ap.add_argument("-s", "--size", type=int, default=10, help="Font size in px, 10 or 11 (default: 10)")
    ap.add_argument(
        "-i",
        "--is-zh-hant",
        action="store_true",
        help="The font is zh-hant (traditional); changes punctuation mark offsets (default: zh-hans)",
    )
    ap.add_argument("-o", "--output", required=True, metavar="FILE", help="Output bitmap font image (PNG only)")
    ap.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        default=None,
        help="Config file (default: config.toml next to the program)",
    )
    ap.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    text_path = Path(args.text)
    font_path = Path(args.font)
    out_path = Path(args.output)

    if not text_path.exists():
        raise SystemExit("[Error] Game script file not found!")
    game_script = text_path.read_text(encoding="utf-8")

    if not font_path.exists():
        raise SystemExit("[Error] Font file not found!")

    if args.size not in SUPPORTED_SIZES:
        raise SystemExit("[Error] Only support 10px or 11px!")

    config_path = Path(args.config) if args.config else default_config_path()
    config = load_config(config_path)

    try:
        chars = get_unique_chinese_chars(game_script)
    except ValueError as e:
        raise SystemExit(f"[Error] {e}") from e

    try:
        resolver = GlyphResolver(font_path, FONT_SCALE)
    except (TTLibError, ValueError) as e:
        raise SystemExit(f"[Error] Could not read font file: {e}") from e

    with resolver:
        img = render_sheet(chars, resolver, args.size, config, is_zh_hant=args.is_zh_hant)
    write_png(out_path, img)
    print(f"✓ Wrote {out_path.as_posix()} ({img.width}×{img.height}), glyphs: {len(chars)}")


if __name__ == "__main__":
    main()
