# -*- coding: utf-8 -*-
"""
chinese_bitmap_font

Turn the Chinese characters used by a game script into a 9px/10px bitmap
font sheet with a drop shadow.
"""

__version__ = "0.1.0"
