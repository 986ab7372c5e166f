#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Tests for path and color helpers
"""

#######################################################################################

import io

from .color import Colors, DummyColors, get_colors
from .paths import drop_extension, swap_extension


def test_swap_extension_keeps_directory():
    assert(swap_extension('games/ea/TITLE.PAK', '.BMP') == 'games/ea/TITLE.BMP')
    assert(swap_extension('games/ea.v1/TITLE', '.PAL') == 'games/ea.v1/TITLE.PAL')

def test_drop_only_last_extension():
    assert(drop_extension('TITLE.OLD.PAK') == 'TITLE.OLD')

def test_colors_disabled():
    assert(get_colors(False) is DummyColors)
    assert('{BRIGHT}{RED}x{RESET_ALL}'.format(**DummyColors) == 'x')

def test_colors_not_a_terminal(monkeypatch):
    monkeypatch.delenv('TERM', raising=False)
    assert(get_colors(True, io.StringIO()) is DummyColors)

def test_colors_forced_ansi(monkeypatch):
    monkeypatch.delenv('NO_COLOR', raising=False)
    monkeypatch.setenv('TERM', 'ANSI')
    colors = get_colors(True, io.StringIO())
    assert(colors is Colors)
    assert(colors['RESET_ALL'] == '\x1b[0m')

def test_no_color_env(monkeypatch):
    monkeypatch.setenv('TERM', 'ANSI')
    monkeypatch.setenv('NO_COLOR', '1')
    assert(get_colors(True, io.StringIO()) is DummyColors)
