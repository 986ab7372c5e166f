#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Windows bitmap on-disk layout: header structs, constants, and row stride math

only the subset used by 8-bit palette-indexed images is described here.
all multi-byte fields are little-endian.

layout of a file written by this package:
  offset  size  field
  ------  ----  -----------------------------
       0     2  signature        b'BM'
       2     4  fileSize
       6     4  reserved         (must be 0)
      10     4  pixelOffset
      14    40  BITMAPINFOHEADER
      54  1024  RGBQUAD[256]     (blue, green, red, 0)
    1078   ...  pixel rows, bottom-to-top, each padded to stride
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['BMP_SIGNATURE', 'FILEHEADER_SIZE', 'INFOHEADER_SIZE', 'HEADER_SIZE', 'BITS_PER_PIXEL', 'PALETTE_ENTRIES', 'RGBQUAD_SIZE', 'PALETTE_SIZE', 'RESOLUTION_96DPI', 'MAX_DIMENSION', 'Compression', 'BITMAPFILEHEADER', 'BITMAPINFOHEADER', 'RGBQUAD', 'calc_stride', 'calc_padding', 'calc_bitmap_size', 'disk_row_to_image_row']

#######################################################################################

import enum
from collections import namedtuple
from struct import Struct
from typing import Iterator


#region ## CONSTANTS ##

BMP_SIGNATURE:bytes = b'BM'

FILEHEADER_SIZE:int = 14
INFOHEADER_SIZE:int = 40  # BITMAPINFOHEADER, the only supported info block
HEADER_SIZE:int = FILEHEADER_SIZE + INFOHEADER_SIZE  # 54

BITS_PER_PIXEL:int = 8
PALETTE_ENTRIES:int = 256
RGBQUAD_SIZE:int = 4
PALETTE_SIZE:int = PALETTE_ENTRIES * RGBQUAD_SIZE  # 1024

# pixels per meter
RESOLUTION_96DPI:int = 3780

# width and height magnitudes are unsigned 16-bit
MAX_DIMENSION:int = 0xffff

#endregion

#region ## ENUMS ##

class Compression(enum.IntEnum):
    """source: <https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-wmf/4e588f70-bd92-4a6f-b77f-35d0feaf7a57>
    """
    BI_RGB = 0x0000
    BI_RLE8 = 0x0001
    BI_RLE4 = 0x0002
    BI_BITFIELDS = 0x0003
    BI_JPEG = 0x0004
    BI_PNG = 0x0005
    BI_CMYK = 0x000B
    BI_CMYKRLE8 = 0x000C
    BI_CMYKRLE4 = 0x000D

    @classmethod
    def name_of(cls, value:int) -> str:
        try:
            return cls(value).name
        except ValueError:
            return f'0x{value:x}'

#endregion

#region ## STRUCTS ##

class BITMAPFILEHEADER:
    """BITMAPFILEHEADER(signature=b'BM', fileSize=0, reserved=0, pixelOffset=0)

    the two 16-bit reserved words are treated as a single 32-bit field.
    """
    __slots__ = ('signature', 'fileSize', 'reserved', 'pixelOffset')
    _struct_ = Struct('<2s I I I')
    def __init__(self, signature:bytes=BMP_SIGNATURE, fileSize:int=0, reserved:int=0, pixelOffset:int=0):
        for k,v in zip(self.__slots__, (signature, fileSize, reserved, pixelOffset)):
            setattr(self, k, v)
    #
    def __iter__(self) -> Iterator:
        return iter((getattr(self, s) for s in self.__slots__))
    def __eq__(self, other) -> bool:
        return isinstance(other, BITMAPFILEHEADER) and tuple(self) == tuple(other)
    def __repr__(self) -> str:
        return '{}({})'.format(self.__class__.__name__, ', '.join(f'{s}={getattr(self, s)!r}' for s in self.__slots__))
    def pack(self) -> bytes: return self._struct_.pack(*self)
    @classmethod
    def unpack(cls, buffer:bytes) -> 'BITMAPFILEHEADER': return cls(*cls._struct_.unpack(buffer))
    @classmethod
    def unpack_from(cls, buffer:bytes, offset:int=0) -> 'BITMAPFILEHEADER': return cls(*cls._struct_.unpack_from(buffer, offset))
    @classmethod
    def calcsize(cls) -> int: return cls._struct_.size

class BITMAPINFOHEADER:
    """BITMAPINFOHEADER(size=40, width=0, height=0, planes=1, bitCount=0, compression=0, sizeImage=0, xPelsPerMeter=3780, yPelsPerMeter=3780, clrUsed=0, clrImportant=0)

    a negative height means rows are stored top-to-bottom.
    """
    __slots__ = ('size', 'width', 'height', 'planes', 'bitCount', 'compression', 'sizeImage', 'xPelsPerMeter', 'yPelsPerMeter', 'clrUsed', 'clrImportant')
    _struct_ = Struct('<I ii HH I I ii II')
    def __init__(self, size:int=INFOHEADER_SIZE, width:int=0, height:int=0, planes:int=1, bitCount:int=0, compression:int=0, sizeImage:int=0, xPelsPerMeter:int=RESOLUTION_96DPI, yPelsPerMeter:int=RESOLUTION_96DPI, clrUsed:int=0, clrImportant:int=0):
        for k,v in zip(self.__slots__, (size, width, height, planes, bitCount, compression, sizeImage, xPelsPerMeter, yPelsPerMeter, clrUsed, clrImportant)):
            setattr(self, k, v)
    #
    def __iter__(self) -> Iterator:
        return iter((getattr(self, s) for s in self.__slots__))
    def __eq__(self, other) -> bool:
        return isinstance(other, BITMAPINFOHEADER) and tuple(self) == tuple(other)
    def __repr__(self) -> str:
        return '{}({})'.format(self.__class__.__name__, ', '.join(f'{s}={getattr(self, s)!r}' for s in self.__slots__))
    def pack(self) -> bytes: return self._struct_.pack(*(int(v) for v in self))
    @classmethod
    def unpack(cls, buffer:bytes) -> 'BITMAPINFOHEADER': return cls(*cls._struct_.unpack(buffer))
    @classmethod
    def unpack_from(cls, buffer:bytes, offset:int=0) -> 'BITMAPINFOHEADER': return cls(*cls._struct_.unpack_from(buffer, offset))
    @classmethod
    def calcsize(cls) -> int: return cls._struct_.size

class RGBQUAD(namedtuple('_RGBQUAD', ('blue', 'green', 'red', 'reserved'))):
    """on-disk palette entry, stored in blue, green, red, reserved order
    """
    _struct_ = Struct('<BBBB')
    def __new__(cls, blue:int=0, green:int=0, red:int=0, reserved:int=0):
        return super().__new__(cls, blue, green, red, reserved)
    @classmethod
    def unpack(cls, buffer:bytes) -> 'RGBQUAD': return cls(*cls._struct_.unpack(buffer))
    @classmethod
    def unpack_from(cls, buffer:bytes, offset:int=0) -> 'RGBQUAD': return cls(*cls._struct_.unpack_from(buffer, offset))
    @classmethod
    def iter_unpack(cls, buffer:bytes) -> Iterator['RGBQUAD']: return iter((cls(*v) for v in cls._struct_.iter_unpack(buffer)))
    def pack(self) -> bytes: return self._struct_.pack(*self)
    @classmethod
    def calcsize(cls) -> int: return cls._struct_.size

assert(BITMAPFILEHEADER.calcsize() == FILEHEADER_SIZE)
assert(BITMAPINFOHEADER.calcsize() == INFOHEADER_SIZE)
assert(RGBQUAD.calcsize() == RGBQUAD_SIZE)

#endregion

#region ## STRIDE / ROW ORDER ##

def calc_stride(width:int) -> int:
    """Return the on-disk length of one 8-bit pixel row, padded up to a multiple of 4
    """
    return (width + 3) & ~0x3

def calc_padding(width:int) -> int:
    """Return the number of zero bytes trailing each on-disk row (0-3)
    """
    return calc_stride(width) - width

def calc_bitmap_size(width:int, height:int) -> int:
    """Return the size of the padded pixel data for an image of the given dimensions
    """
    return calc_stride(width) * abs(height)

def disk_row_to_image_row(disk_row:int, height:int, topdown:bool) -> int:
    """Return the image row (0 = top) for the nth row stored on disk

    bottom-to-top storage is the default, so the first row on disk is the last image row.
    """
    if not (0 <= disk_row < height):
        raise IndexError(f'disk row {disk_row} out of range for height {height}')
    return disk_row if topdown else (height - 1 - disk_row)

#endregion
