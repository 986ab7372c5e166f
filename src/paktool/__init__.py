#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Electronic Arts PAK <-> BMP conversion tools

usage:
  python -m paktool pak2bmp IMAGE.PAK
  python -m paktool bmp2pak IMAGE.BMP
  python -m paktool info IMAGE.BMP
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

#######################################################################################
