# -*- coding: utf-8 -*-

from chinese_bitmap_font.cli import main

if __name__ == "__main__":
    main()
