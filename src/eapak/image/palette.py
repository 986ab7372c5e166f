#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""256-entry RGB palette shared by raw `.PAL` files and bitmap color tables
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['RGB', 'Palette', 'PAL_ENTRY_SIZE', 'PAL_FILE_SIZE']

#######################################################################################

from collections import namedtuple
from typing import Iterable, Iterator, Tuple, Union

from .bmplayout import PALETTE_ENTRIES, RGBQUAD
from ..errors import InvalidArgumentError


PAL_ENTRY_SIZE:int = 3
PAL_FILE_SIZE:int = PALETTE_ENTRIES * PAL_ENTRY_SIZE  # 768


class RGB(namedtuple('_RGB', ('red', 'green', 'blue'))):
    """RGB(red:int=0, green:int=0, blue:int=0)
    """
    def __new__(cls, red:int=0, green:int=0, blue:int=0):
        for name,v in zip(cls._fields, (red, green, blue)):
            if not isinstance(v, int) or not (0 <= v <= 0xff):
                raise InvalidArgumentError(f'{cls.__name__} {name} channel must be an int between 0 and 255, not {v!r}')
        return super().__new__(cls, red, green, blue)

    def to_rgbquad(self) -> RGBQUAD:
        return RGBQUAD(self.blue, self.green, self.red, 0)
    @classmethod
    def from_rgbquad(cls, quad:RGBQUAD) -> 'RGB':
        return cls(quad.red, quad.green, quad.blue)

    def __str__(self) -> str:
        return f'#{self.red:02x}{self.green:02x}{self.blue:02x}'


class Palette:
    """Palette(entries:Iterable[RGB|tuple]=())

    an immutable table of exactly 256 colors. missing trailing entries are black.
    """
    __slots__ = ('_entries',)
    def __init__(self, entries:Iterable[Union[RGB, Tuple[int, int, int]]]=()):
        entries = [e if isinstance(e, RGB) else RGB(*e) for e in entries]
        if len(entries) > PALETTE_ENTRIES:
            raise InvalidArgumentError(f'{self.__class__.__name__}() accepts at most {PALETTE_ENTRIES} entries, not {len(entries)}')
        entries.extend(RGB() for _ in range(PALETTE_ENTRIES - len(entries)))
        object.__setattr__(self, '_entries', tuple(entries))

    #region ## IMMUTABLE ##

    def __setattr__(self, name, value):
        raise AttributeError(f'{name!r} attribute is readonly')

    #endregion

    #region ## SEQUENCE ##

    def __len__(self) -> int: return len(self._entries)
    def __iter__(self) -> Iterator[RGB]: return iter(self._entries)
    def __getitem__(self, index:int) -> RGB: return self._entries[index]
    def __eq__(self, other) -> bool:
        if isinstance(other, Palette):
            return self._entries == other._entries
        return NotImplemented
    def __hash__(self) -> int: return hash(self._entries)
    def __repr__(self) -> str:
        used = len(self._entries)
        while used and self._entries[used-1] == (0, 0, 0):
            used -= 1
        return f'{self.__class__.__name__}(<{used} entries>)' if used else f'{self.__class__.__name__}()'

    #endregion

    #region ## RAW .PAL FORMAT ##

    @classmethod
    def from_bytes(cls, data:bytes) -> 'Palette':
        """Palette.from_bytes(768 bytes of R,G,B triplets) -> Palette
        """
        if len(data) != PAL_FILE_SIZE:
            raise InvalidArgumentError(f'palette data must be {PAL_FILE_SIZE} bytes, not {len(data)}')
        return cls(tuple(data[i:i+PAL_ENTRY_SIZE]) for i in range(0, PAL_FILE_SIZE, PAL_ENTRY_SIZE))

    def to_bytes(self) -> bytes:
        return bytes(c for entry in self._entries for c in entry)

    #endregion

    #region ## ENTRY LISTS ##

    @classmethod
    def from_entries(cls, entries:Iterable[Union[RGB, Tuple[int, int, int]]]) -> 'Palette':
        """Palette.from_entries([(r,g,b), ...]) -> Palette

        fewer than 256 entries are padded with black, more than 256 are rejected.
        """
        return cls(entries)

    #endregion

    #region ## BITMAP COLOR TABLE ##

    @classmethod
    def from_rgbquads(cls, quads:Iterable[RGBQUAD]) -> 'Palette':
        """reserved bytes are ignored
        """
        return cls(RGB.from_rgbquad(q) for q in quads)

    def to_rgbquads(self) -> Tuple[RGBQUAD, ...]:
        return tuple(e.to_rgbquad() for e in self._entries)

    #endregion
