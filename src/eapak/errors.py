#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Exception types raised while converting between bitmaps and raw image pairs

every exception carries an `exitcode` used by the command-line tools.
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['BitmapError', 'InvalidArgumentError', 'BitmapIOError', 'TruncatedError', 'ShortWriteError', 'FormatMismatchError', 'ResourceLimitError', 'MalformedHeaderError', 'UnsupportedEncodingError', 'RawSizeError']

#######################################################################################


class BitmapError(Exception):
    """Base class for all conversion errors
    """
    exitcode:int = 1

class InvalidArgumentError(BitmapError, ValueError):
    """missing or empty required input (pixels, palette, dimensions)
    """
    exitcode:int = 1

class BitmapIOError(BitmapError, IOError):
    """the expected number of bytes could not be read or written
    """
    exitcode:int = 3

class TruncatedError(BitmapIOError):
    """stream ended before the expected number of bytes were read
    """
    def __init__(self, what:str, expected:int, actual:int):
        super().__init__(f'unexpected end of stream reading {what}: expected {expected} bytes, got {actual}')
        self.what = what
        self.expected = expected
        self.actual = actual

class ShortWriteError(BitmapIOError):
    """stream accepted fewer bytes than were written
    """
    def __init__(self, what:str, expected:int, actual:int):
        super().__init__(f'incomplete write of {what}: expected {expected} bytes, wrote {actual}')
        self.what = what
        self.expected = expected
        self.actual = actual

class FormatMismatchError(BitmapError, ValueError):
    """signature is absent or not a bitmap signature
    """
    exitcode:int = 4

class ResourceLimitError(BitmapError, MemoryError):
    """declared dimensions are too large to allocate
    """
    exitcode:int = 5

class MalformedHeaderError(BitmapError, ValueError):
    """required header fields hold impossible values
    """
    exitcode:int = 6

class UnsupportedEncodingError(BitmapError, ValueError):
    """header is valid, but the encoding is not 8-bit uncompressed
    """
    exitcode:int = 7

class RawSizeError(BitmapError, ValueError):
    """raw image or palette file is not the fixed legacy size
    """
    exitcode:int = 8
