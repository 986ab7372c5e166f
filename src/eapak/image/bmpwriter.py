#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Bitmap writer for 8-bit, uncompressed, palette-indexed `.bmp` files

output is always stored bottom-to-top with a positive height and a full 256-color table.
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['build_headers', 'write_bmp', 'encode_bmp']

#######################################################################################

import io, os
from typing import Tuple, Union

from .bmplayout import HEADER_SIZE, INFOHEADER_SIZE, BITS_PER_PIXEL, PALETTE_ENTRIES, PALETTE_SIZE, RESOLUTION_96DPI, MAX_DIMENSION, Compression, BITMAPFILEHEADER, BITMAPINFOHEADER, calc_stride, calc_bitmap_size
from .palette import Palette
from ..errors import InvalidArgumentError, ShortWriteError


#region ## VALIDATION ##

def _check_args(pixels:bytes, palette:Palette, width:int, height:int):
    if pixels is None or len(pixels) == 0:
        raise InvalidArgumentError('pixels cannot be empty')
    if palette is None:
        raise InvalidArgumentError('palette cannot be None')
    if len(palette) != PALETTE_ENTRIES:
        raise InvalidArgumentError(f'palette must have {PALETTE_ENTRIES} entries, not {len(palette)}')
    for name,v in (('width', width), ('height', height)):
        if not isinstance(v, int) or not (0 < v <= MAX_DIMENSION):
            raise InvalidArgumentError(f'{name} must be an int between 1 and {MAX_DIMENSION}, not {v!r}')
    if len(pixels) != width * height:
        raise InvalidArgumentError(f'pixels must be {width}x{height} = {width*height} bytes, not {len(pixels)}')

#endregion

#region ## WRITING ##

def build_headers(width:int, height:int) -> Tuple[BITMAPFILEHEADER, BITMAPINFOHEADER]:
    """Return the file and info headers for a bottom-to-top 8-bit image with a 256-color table
    """
    bitmap_size = calc_bitmap_size(width, height)
    data_offset = HEADER_SIZE + PALETTE_SIZE
    fileheader = BITMAPFILEHEADER(fileSize=data_offset + bitmap_size, reserved=0, pixelOffset=data_offset)
    infoheader = BITMAPINFOHEADER(
        size=INFOHEADER_SIZE,
        width=width,   height=height,
        planes=1,      bitCount=BITS_PER_PIXEL,
        compression=Compression.BI_RGB, sizeImage=bitmap_size,
        xPelsPerMeter=RESOLUTION_96DPI, yPelsPerMeter=RESOLUTION_96DPI,
        clrUsed=PALETTE_ENTRIES, clrImportant=0,
        )
    return fileheader, infoheader

def _write(writer:io.BufferedWriter, data:bytes, what:str) -> int:
    written = writer.write(data)
    if written is None or written != len(data):
        raise ShortWriteError(what, len(data), 0 if written is None else written)
    return written

def write_bmp(writer:Union[io.BufferedWriter, str], pixels:bytes, palette:Palette, width:int, height:int) -> int:
    """write_bmp(file or filename, pixels, palette, width, height) -> bytes written

    pixels are one palette index per byte, top row first, unpadded.
    """
    _check_args(pixels, palette, width, height)
    if isinstance(writer, str):
        with open(writer, 'wb+') as file:
            try:
                return write_bmp(file, pixels, palette, width, height)
            except OSError:
                file.close()
                os.remove(writer)  # never leave a partial bitmap behind
                raise
    if writer is None:
        raise InvalidArgumentError('write_bmp() argument writer cannot be None')
    if not isinstance(palette, Palette):
        palette = Palette(palette)

    fileheader, infoheader = build_headers(width, height)
    total = _write(writer, fileheader.pack() + infoheader.pack(), 'bitmap header')
    total += _write(writer, b''.join(q.pack() for q in palette.to_rgbquads()), 'color table')

    stride = calc_stride(width)
    for y in range(height - 1, -1, -1):
        line = bytearray(stride)  # padding is always zero
        line[:width] = pixels[y*width:(y+1)*width]
        total += _write(writer, bytes(line), f'pixel row {y}')

    writer.flush()
    return total

def encode_bmp(pixels:bytes, palette:Palette, width:int, height:int) -> bytes:
    """encode_bmp(pixels, palette, width, height) -> bytes
    """
    with io.BytesIO() as writer:
        write_bmp(writer, pixels, palette, width, height)
        return writer.getvalue()

#endregion
