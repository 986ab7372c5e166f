#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Image file reading and writing tools.

modules:
  eapak.image.bmplayout - bitmap header structs, constants, and stride helpers.
  eapak.image.palette   - 256-entry RGB palette and the raw `.PAL` format.
  eapak.image.bmpreader - reading 8-bit palette-indexed `.bmp` files.
  eapak.image.bmpwriter - writing 8-bit palette-indexed `.bmp` files.
  eapak.image.pakimage  - raw `.PAK` image + `.PAL` palette pairs.

"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

#######################################################################################

from .palette import RGB, Palette
from .bmpreader import BmpInfo, BmpImage, read_bmp_header, read_bmp, decode_bmp
from .bmpwriter import write_bmp, encode_bmp
from .pakimage import PakImage
