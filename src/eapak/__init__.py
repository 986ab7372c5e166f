#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Electronic Arts PAK image Python library package

modules:
  eapak.errors  - exception types raised by conversions, with command-line exit codes.

submodules:
  eapak.image   - reading and writing `.bmp` files and raw `.PAK` + `.PAL` pairs.
  eapak.util    - helper functions used throughout the package.

"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

#######################################################################################

from . import errors
from .errors import BitmapError
from .image import BmpImage, Palette, PakImage, RGB, decode_bmp, encode_bmp, read_bmp, write_bmp
