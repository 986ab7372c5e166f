#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Various utilities and helper functions submodule.

modules:
  eapak.util.color - terminal ansi color helpers and escapes.
  eapak.util.paths - sibling file name derivation by swapping extensions.
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

#######################################################################################

