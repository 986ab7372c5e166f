#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Sibling file path helpers for paired image files

designed to function similarly to the os.path module functions.
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['drop_extension', 'swap_extension']

#######################################################################################

import os


def drop_extension(path:str) -> str:
    """drop_extension('dir/IMAGE.PAK') -> 'dir/IMAGE'

    only the last extension is removed, directories are left untouched.
    """
    return os.path.splitext(path)[0]

def swap_extension(path:str, ext:str) -> str:
    """swap_extension('dir/IMAGE.PAK', '.BMP') -> 'dir/IMAGE.BMP'
    """
    if ext and not ext.startswith('.'):
        ext = '.' + ext
    return drop_extension(path) + ext

