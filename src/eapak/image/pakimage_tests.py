#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Tests for raw .PAK + .PAL pairs
"""

#######################################################################################

import io

import pytest

from .bmpreader import decode_bmp
from .bmpwriter import encode_bmp
from .pakimage import PAK_WIDTH, PAK_HEIGHT, PAK_SIZE, PakImage, filesize
from .palette import RGB, Palette, PAL_FILE_SIZE
from ..errors import InvalidArgumentError, RawSizeError


def legacy_pair():
    pixels = bytes((x + y) & 0xff for y in range(PAK_HEIGHT) for x in range(PAK_WIDTH))
    paldata = bytes(i % 256 for i in range(PAL_FILE_SIZE))
    return pixels, paldata


def test_filesize_preserves_position():
    stream = io.BytesIO(bytes(100))
    stream.seek(17)
    assert(filesize(stream) == 100)
    assert(stream.tell() == 17)

def test_load_streams():
    pixels, paldata = legacy_pair()
    image = PakImage.load(io.BytesIO(pixels), io.BytesIO(paldata))
    assert(image.size == (320, 200))
    assert(image.pixels == pixels)
    assert(image.palette == Palette.from_bytes(paldata))
    assert(image.is_legacy_size)

@pytest.mark.parametrize('pak_size,pal_size', [
    (PAK_SIZE - 1, PAL_FILE_SIZE),
    (PAK_SIZE + 1, PAL_FILE_SIZE),
    (0, PAL_FILE_SIZE),
    (PAK_SIZE, PAL_FILE_SIZE - 1),
    (PAK_SIZE, PAL_FILE_SIZE + 3),
])
def test_load_fixed_size_guard(pak_size, pal_size):
    pakfile, palfile = io.BytesIO(bytes(pak_size)), io.BytesIO(bytes(pal_size))
    with pytest.raises(RawSizeError) as info:
        PakImage.load(pakfile, palfile)
    assert(info.value.exitcode == 8)
    # rejected before anything was read
    assert(pakfile.tell() == 0)
    assert(palfile.tell() == 0)

def test_save_and_load_files(tmp_path):
    pixels, paldata = legacy_pair()
    pakpath, palpath = str(tmp_path / 'IMAGE.PAK'), str(tmp_path / 'IMAGE.PAL')
    PakImage(pixels=pixels, palette=Palette.from_bytes(paldata)).save(pakpath, palpath)
    assert((tmp_path / 'IMAGE.PAK').read_bytes() == pixels)
    assert((tmp_path / 'IMAGE.PAL').read_bytes() == paldata)
    assert(PakImage.load(pakpath, palpath).pixels == pixels)

def test_bitmap_round_trip():
    pixels, paldata = legacy_pair()
    image = PakImage(pixels=pixels, palette=Palette.from_bytes(paldata))
    stream = io.BytesIO()
    image.save_bmp(stream)
    stream.seek(0)
    again = PakImage.from_bmp(stream)
    assert(again.size == image.size)
    assert(again.pixels == image.pixels)
    assert(again.palette == image.palette)

def test_from_bmp_any_size():
    data = encode_bmp(bytes(range(6)), Palette([(9, 9, 9)]), 3, 2)
    image = PakImage.from_bmp(io.BytesIO(data))
    assert(image.size == (3, 2))
    assert(not image.is_legacy_size)
    assert(image.palette[0] == RGB(9, 9, 9))
    assert(decode_bmp(data).pixels == image.pixels)

def test_default_image_is_blank():
    image = PakImage()
    assert(image.pixels == bytes(PAK_SIZE))
    assert(image.palette == Palette())

def test_pixel_count_mismatch():
    with pytest.raises(InvalidArgumentError):
        PakImage(2, 2, b'\x00')
