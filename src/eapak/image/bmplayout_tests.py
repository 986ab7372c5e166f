#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Tests for bitmap header structs and stride/row-order helpers
"""

#######################################################################################

import pytest

from .bmplayout import *


#region ## STRIDE ##

@pytest.mark.parametrize('width', list(range(1, 70)) + [319, 320, 321, 0xfffe, 0xffff])
def test_stride_invariant(width):
    stride = calc_stride(width)
    assert(stride >= width)
    assert(stride % 4 == 0)
    assert(stride - width < 4)
    assert(calc_padding(width) == stride - width)

def test_stride_values():
    assert(calc_stride(1) == 4)
    assert(calc_stride(2) == 4)
    assert(calc_stride(4) == 4)
    assert(calc_stride(5) == 8)
    assert(calc_stride(320) == 320)

def test_bitmap_size_uses_height_magnitude():
    assert(calc_bitmap_size(3, 2) == 8)
    assert(calc_bitmap_size(3, -2) == 8)
    assert(calc_bitmap_size(320, 200) == 64000)

#endregion

#region ## ROW ORDER ##

def test_bottom_up_row_order():
    assert([disk_row_to_image_row(r, 3, False) for r in range(3)] == [2, 1, 0])

def test_top_down_row_order():
    assert([disk_row_to_image_row(r, 3, True) for r in range(3)] == [0, 1, 2])

def test_row_out_of_range():
    with pytest.raises(IndexError):
        disk_row_to_image_row(3, 3, False)

#endregion

#region ## STRUCTS ##

def test_header_sizes():
    assert(BITMAPFILEHEADER.calcsize() == FILEHEADER_SIZE == 14)
    assert(BITMAPINFOHEADER.calcsize() == INFOHEADER_SIZE == 40)
    assert(HEADER_SIZE == 54)
    assert(PALETTE_SIZE == 1024)

def test_fileheader_layout():
    data = BITMAPFILEHEADER(fileSize=0x11223344, pixelOffset=1078).pack()
    assert(data == b'BM' + b'\x44\x33\x22\x11' + b'\x00\x00\x00\x00' + b'\x36\x04\x00\x00')
    assert(BITMAPFILEHEADER.unpack(data) == BITMAPFILEHEADER(b'BM', 0x11223344, 0, 1078))

def test_infoheader_negative_height():
    header = BITMAPINFOHEADER(width=2, height=-2, bitCount=8)
    data = header.pack()
    assert(data[8:12] == b'\xfe\xff\xff\xff')
    assert(BITMAPINFOHEADER.unpack(data).height == -2)

def test_infoheader_field_offsets():
    data = BITMAPINFOHEADER(width=320, height=200, bitCount=8, clrUsed=256).pack()
    # offsets within the info block
    assert(data[0:4] == (40).to_bytes(4, 'little'))
    assert(data[4:8] == (320).to_bytes(4, 'little'))
    assert(data[12:14] == b'\x01\x00')
    assert(data[14:16] == b'\x08\x00')
    assert(data[24:28] == (RESOLUTION_96DPI).to_bytes(4, 'little'))
    assert(data[32:36] == (256).to_bytes(4, 'little'))

def test_rgbquad_order():
    quad = RGBQUAD.unpack(b'\x01\x02\x03\x04')
    assert((quad.blue, quad.green, quad.red, quad.reserved) == (1, 2, 3, 4))
    assert(list(RGBQUAD.iter_unpack(b'\x01\x02\x03\x00' * 2)) == [RGBQUAD(1, 2, 3, 0)] * 2)

def test_compression_names():
    assert(Compression.name_of(0) == 'BI_RGB')
    assert(Compression.name_of(1) == 'BI_RLE8')
    assert(Compression.name_of(0x99) == '0x99')

#endregion
