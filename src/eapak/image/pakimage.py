#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Raw `.PAK` image and `.PAL` palette file pair

the `.PAK` file is exactly 320x200 palette indices (one byte per pixel, top row first),
and the sibling `.PAL` file is 256 R,G,B triplets. neither file has a header.
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['PAK_WIDTH', 'PAK_HEIGHT', 'PAK_SIZE', 'PakImage', 'filesize']

#######################################################################################

import io
from typing import Tuple, Union

from .bmpreader import read_bmp
from .bmpwriter import write_bmp
from .palette import Palette, PAL_FILE_SIZE
from ..errors import InvalidArgumentError, RawSizeError, ShortWriteError, TruncatedError


PAK_WIDTH:int = 320
PAK_HEIGHT:int = 200
PAK_SIZE:int = PAK_WIDTH * PAK_HEIGHT  # 64000


def filesize(stream:io.IOBase) -> int:
    """Return the length of an open stream, the current position is preserved
    """
    position = stream.tell()
    stream.seek(0, 2)
    length = stream.tell()
    stream.seek(position, 0)
    return length


class PakImage:
    """PakImage(width:int=320, height:int=200, pixels:bytes=None, palette:Palette=None)
    """
    def __init__(self, width:int=PAK_WIDTH, height:int=PAK_HEIGHT, pixels:bytes=None, palette:Palette=None):
        self.width = width
        self.height = height
        self.pixels = bytes(width * height) if pixels is None else bytes(pixels)
        self.palette = Palette() if palette is None else palette
        if len(self.pixels) != width * height:
            raise InvalidArgumentError(f'pixels must be {width}x{height} = {width*height} bytes, not {len(self.pixels)}')

    #region ## PROPERTIES ##

    @property
    def size(self) -> Tuple[int, int]: return (self.width, self.height)

    @property
    def is_legacy_size(self) -> bool:
        """image can be saved as a raw `.PAK` file
        """
        return self.size == (PAK_WIDTH, PAK_HEIGHT)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(width={self.width!r}, height={self.height!r})'

    #endregion

    #region ## RAW PAIR READING ##

    @classmethod
    def load(cls, pakfile:Union[io.BufferedReader, str], palfile:Union[io.BufferedReader, str]) -> 'PakImage':
        """PakImage.load(pak file or filename, pal file or filename) -> PakImage

        both sizes are checked before either file is read.
        """
        if isinstance(pakfile, str):
            with open(pakfile, 'rb') as file:
                return cls.load(file, palfile)
        if isinstance(palfile, str):
            with open(palfile, 'rb') as file:
                return cls.load(pakfile, file)

        pak_size = filesize(pakfile) - pakfile.tell()
        if pak_size != PAK_SIZE:
            raise RawSizeError(f'image must be {PAK_WIDTH}x{PAK_HEIGHT} = {PAK_SIZE} bytes, not {pak_size}')
        pal_size = filesize(palfile) - palfile.tell()
        if pal_size != PAL_FILE_SIZE:
            raise RawSizeError(f'palette must be {PAL_FILE_SIZE} bytes, not {pal_size}')

        pixels = pakfile.read(PAK_SIZE)
        if len(pixels) != PAK_SIZE:
            raise TruncatedError('image', PAK_SIZE, len(pixels))
        paldata = palfile.read(PAL_FILE_SIZE)
        if len(paldata) != PAL_FILE_SIZE:
            raise TruncatedError('palette', PAL_FILE_SIZE, len(paldata))

        return cls(PAK_WIDTH, PAK_HEIGHT, pixels, Palette.from_bytes(paldata))

    #endregion

    #region ## RAW PAIR WRITING ##

    def save(self, pakfile:Union[io.BufferedWriter, str], palfile:Union[io.BufferedWriter, str]):
        """write raw pixels and the 768-byte palette
        """
        if isinstance(pakfile, str):
            with open(pakfile, 'wb+') as file:
                return self.save(file, palfile)
        if isinstance(palfile, str):
            with open(palfile, 'wb+') as file:
                return self.save(pakfile, file)

        for stream,data,what in ((pakfile, self.pixels, 'image'), (palfile, self.palette.to_bytes(), 'palette')):
            written = stream.write(data)
            if written != len(data):
                raise ShortWriteError(what, len(data), written or 0)
        pakfile.flush()
        palfile.flush()

    #endregion

    #region ## BITMAP CONVERSION ##

    @classmethod
    def from_bmp(cls, reader:Union[io.BufferedReader, str]) -> 'PakImage':
        """any bitmap dimensions are accepted, see `is_legacy_size`
        """
        image = read_bmp(reader)
        return cls(image.width, image.height, image.pixels, image.palette)

    def save_bmp(self, writer:Union[io.BufferedWriter, str]) -> int:
        return write_bmp(writer, self.pixels, self.palette, self.width, self.height)

    #endregion
