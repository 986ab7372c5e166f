#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Terminal ANSI color printing helpers

dictionaries for easier **foreground** color formatting:
>>> from eapak.util.color import Colors
>>> '{DIM}{GREEN}{!s}{RESET_ALL}'.format('hello world', **Colors)

alt usage with fstrings:
>>> from eapak.util.color import Fore as F, Style as S
>>> f'{S.DIM}{F.GREEN}{"hello world"}{S.RESET_ALL}'
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

__all__ = ['Fore', 'Style', 'DummyFore', 'DummyStyle', 'Colors', 'DummyColors', 'ansi_support', 'enable_colorama', 'colorama_enabled', 'get_colors']

#######################################################################################

import os, sys
from types import SimpleNamespace
from typing import Dict, Optional, TextIO

import colorama
from colorama import Fore, Style


#region ## COLOR NAMESPACES ##

# dummy color namespaces for disabled color
DummyFore = SimpleNamespace(RESET='', BLACK='', BLUE='', CYAN='', GREEN='', MAGENTA='', RED='', WHITE='', YELLOW='', LIGHTBLACK_EX='', LIGHTBLUE_EX='', LIGHTCYAN_EX='', LIGHTGREEN_EX='', LIGHTMAGENTA_EX='', LIGHTRED_EX='', LIGHTWHITE_EX='', LIGHTYELLOW_EX='')
DummyStyle = SimpleNamespace(RESET_ALL='', BRIGHT='', DIM='', NORMAL='')

# dictionaries for easier **foreground** color formatting
# >>> '{DIM}{GREEN}{!s}{RESET_ALL}'.format('hello world', **Colors)
DummyColors:Dict[str,str] = dict(**DummyFore.__dict__, **DummyStyle.__dict__)
Colors:Dict[str,str] = dict(**{k:v for k,v in vars(Fore).items() if k.isupper()}, **{k:v for k,v in vars(Style).items() if k.isupper()})

#endregion

#region ## ANSI SUPPORT ##

_COLORAMA_INIT:Optional[bool] = None

def colorama_enabled() -> Optional[bool]:
    return _COLORAMA_INIT

def enable_colorama() -> bool:
    """wrap stdout/stderr once so escapes work on legacy Windows consoles
    """
    global _COLORAMA_INIT
    if not _COLORAMA_INIT:
        colorama.just_fix_windows_console()
        _COLORAMA_INIT = True
    return _COLORAMA_INIT

def ansi_support(handle:TextIO=None) -> bool:
    """ansi_support(sys.stdout) -> bool

    True when the stream is a terminal (or TERM=ANSI), and NO_COLOR is not set.
    """
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('TERM') == 'ANSI':
        return True
    handle = sys.stdout if handle is None else handle
    return bool(getattr(handle, 'isatty', bool)())  # get isatty() func, or dummy return False func()

def get_colors(color:bool=True, handle:TextIO=None) -> Dict[str,str]:
    """Return the color format dictionary to use for a stream, enabling colorama if needed
    """
    if color and ansi_support(handle):
        enable_colorama()
        return Colors
    return DummyColors

#endregion
