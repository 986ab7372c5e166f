#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Bitmap reader for 8-bit, uncompressed, palette-indexed `.bmp` files
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['BmpInfo', 'BmpImage', 'read_bmp_header', 'read_palette', 'read_pixels', 'read_bmp', 'decode_bmp']

#######################################################################################

import io
from typing import List, Tuple, Union

from .bmplayout import BMP_SIGNATURE, FILEHEADER_SIZE, INFOHEADER_SIZE, BITS_PER_PIXEL, PALETTE_ENTRIES, RGBQUAD_SIZE, MAX_DIMENSION, Compression, BITMAPFILEHEADER, BITMAPINFOHEADER, RGBQUAD, calc_stride, disk_row_to_image_row
from .palette import Palette
from ..errors import InvalidArgumentError, TruncatedError, FormatMismatchError, ResourceLimitError, MalformedHeaderError, UnsupportedEncodingError


#region ## RESULT TYPES ##

class BmpInfo:
    """BmpInfo(fileheader:BITMAPFILEHEADER, infoheader:BITMAPINFOHEADER)

    validated header of a supported bitmap.
    """
    __slots__ = ('fileheader', 'infoheader')
    def __init__(self, fileheader:BITMAPFILEHEADER, infoheader:BITMAPINFOHEADER):
        self.fileheader = fileheader
        self.infoheader = infoheader

    @property
    def width(self) -> int: return self.infoheader.width
    @property
    def height(self) -> int: return abs(self.infoheader.height)
    @property
    def topdown(self) -> bool: return self.infoheader.height < 0
    @property
    def stride(self) -> int: return calc_stride(self.width)
    @property
    def num_colors(self) -> int:
        """number of color table entries stored in the file, unlisted entries are black
        """
        return self.infoheader.clrUsed

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.fileheader!r}, {self.infoheader!r})'


class BmpImage:
    """BmpImage(width:int, height:int, pixels:bytes, palette:Palette, topdown:bool=False)

    decoded image. pixels are one palette index per byte, top row first, unpadded.
    `topdown` records the row order the source file used.
    """
    __slots__ = ('width', 'height', 'pixels', 'palette', 'topdown')
    def __init__(self, width:int, height:int, pixels:bytes, palette:Palette, topdown:bool=False):
        self.width = width
        self.height = height
        self.pixels = pixels
        self.palette = palette
        self.topdown = topdown

    @property
    def size(self) -> Tuple[int, int]: return (self.width, self.height)

    def row(self, y:int) -> bytes:
        return self.pixels[y*self.width:(y+1)*self.width]

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(width={self.width!r}, height={self.height!r}, topdown={self.topdown!r})'

#endregion

#region ## READING ##

def _read_exact(reader:io.BufferedReader, size:int, what:str) -> bytes:
    data = reader.read(size)
    if data is None or len(data) != size:
        raise TruncatedError(what, size, 0 if data is None else len(data))
    return data

def read_bmp_header(reader:io.BufferedReader) -> BmpInfo:
    """Read and validate the signature and headers, leaving the stream positioned at the color table
    """
    signature = reader.read(len(BMP_SIGNATURE))
    if signature != BMP_SIGNATURE:
        raise FormatMismatchError(f'not a bitmap file, bad signature: {signature!r}')

    data = _read_exact(reader, FILEHEADER_SIZE - len(BMP_SIGNATURE) + INFOHEADER_SIZE, 'bitmap header')
    fileheader = BITMAPFILEHEADER.unpack(signature + data[:FILEHEADER_SIZE - len(BMP_SIGNATURE)])
    infoheader = BITMAPINFOHEADER.unpack_from(data, FILEHEADER_SIZE - len(BMP_SIGNATURE))

    if infoheader.planes != 1:
        raise MalformedHeaderError(f'plane count must be 1, not {infoheader.planes}')
    if infoheader.size != INFOHEADER_SIZE:
        raise MalformedHeaderError(f'info header size must be {INFOHEADER_SIZE}, not {infoheader.size}')
    if fileheader.reserved != 0:
        raise MalformedHeaderError(f'reserved field must be 0, not 0x{fileheader.reserved:08x}')

    if infoheader.bitCount != BITS_PER_PIXEL:
        raise UnsupportedEncodingError(f'only {BITS_PER_PIXEL}-bit images are supported, not {infoheader.bitCount}-bit')
    if infoheader.compression != Compression.BI_RGB:
        raise UnsupportedEncodingError(f'only uncompressed images are supported, not {Compression.name_of(infoheader.compression)}')

    if infoheader.clrUsed > PALETTE_ENTRIES:
        raise MalformedHeaderError(f'color table cannot exceed {PALETTE_ENTRIES} entries, got {infoheader.clrUsed}')
    if infoheader.width <= 0:
        raise MalformedHeaderError(f'width must be positive, not {infoheader.width}')
    if infoheader.height == 0:
        raise MalformedHeaderError('height cannot be 0')
    if infoheader.width > MAX_DIMENSION or abs(infoheader.height) > MAX_DIMENSION:
        raise ResourceLimitError(f'image dimensions {infoheader.width}x{abs(infoheader.height)} exceed {MAX_DIMENSION}x{MAX_DIMENSION}')

    return BmpInfo(fileheader, infoheader)

def read_palette(reader:io.BufferedReader, info:BmpInfo) -> Palette:
    """Read the color table following the header, unlisted entries are black
    """
    data = _read_exact(reader, info.num_colors * RGBQUAD_SIZE, 'color table')
    return Palette.from_rgbquads(RGBQUAD.iter_unpack(data))

def read_pixels(reader:io.BufferedReader, info:BmpInfo) -> bytes:
    """Read padded rows from the current position (the pixelOffset field is not trusted)
    and return unpadded pixels, top row first
    """
    width, height, stride = info.width, info.height, info.stride
    rows:List[bytes] = [None] * height
    for disk_row in range(height):
        line = _read_exact(reader, stride, f'pixel row {disk_row}')
        rows[disk_row_to_image_row(disk_row, height, info.topdown)] = line[:width]
    return b''.join(rows)

def read_bmp(reader:Union[io.BufferedReader, str]) -> BmpImage:
    """read_bmp(file or filename) -> BmpImage

    raises a BitmapError subclass for any unsupported or malformed input.
    """
    if isinstance(reader, str):
        with open(reader, 'rb') as file:
            return read_bmp(file)
    if reader is None:
        raise InvalidArgumentError('read_bmp() argument reader cannot be None')

    info = read_bmp_header(reader)
    palette = read_palette(reader, info)
    pixels = read_pixels(reader, info)
    return BmpImage(info.width, info.height, pixels, palette, info.topdown)

def decode_bmp(data:bytes) -> BmpImage:
    """decode_bmp(bytes) -> BmpImage
    """
    if not data:
        raise InvalidArgumentError('decode_bmp() argument data cannot be empty')
    return read_bmp(io.BytesIO(data))

#endregion
