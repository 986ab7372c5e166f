#!/usr/bin/env python3
#-*- coding: utf-8 -*-
"""Electronic Arts PAK image converter tool
"""

__version__ = '0.1.0'
__date__    = '2026-10-19'

#######################################################################################

import os, sys
from typing import Dict, List, Optional

from eapak.errors import BitmapError
from eapak.image.bmplayout import Compression
from eapak.image.bmpreader import BmpInfo, read_bmp_header
from eapak.image.pakimage import PakImage, filesize
from eapak.util.color import DummyColors, get_colors
from eapak.util.paths import swap_extension


## FILE EXTENSIONS ##

PAK_EXT:str = '.PAK'
PAL_EXT:str = '.PAL'
BMP_EXT:str = '.BMP'

# exit code for files that cannot be opened
EXIT_OPEN_FAILED:int = 2


## CONVERSIONS ##

def pak2bmp(infile:str, palfile:str=None, outfile:str=None, *, colors:Dict[str,str]=DummyColors):
    """Convert a raw .PAK image and its .PAL palette to a .BMP file
    """
    palfile = palfile or swap_extension(infile, PAL_EXT)
    outfile = outfile or swap_extension(infile, BMP_EXT)

    with open(infile, 'rb') as pakreader, open(palfile, 'rb') as palreader:
        print('{BRIGHT}{CYAN}Opening PAK File:{RESET_ALL} {!r}'.format(infile, **colors),
              '{DIM}{WHITE}File Size: {}{RESET_ALL}'.format(filesize(pakreader), **colors), sep='\t')
        print('{BRIGHT}{CYAN}Opening PAL File:{RESET_ALL} {!r}'.format(palfile, **colors),
              '{DIM}{WHITE}File Size: {}{RESET_ALL}'.format(filesize(palreader), **colors), sep='\t')
        image = PakImage.load(pakreader, palreader)

    print('{BRIGHT}{CYAN}Saving BMP File:{RESET_ALL} {!r}'.format(outfile, **colors))
    image.save_bmp(outfile)

def bmp2pak(infile:str, palfile:str=None, outfile:str=None, *, colors:Dict[str,str]=DummyColors):
    """Convert a .BMP file to a raw .PAK image and a .PAL palette
    """
    palfile = palfile or swap_extension(infile, PAL_EXT)
    outfile = outfile or swap_extension(infile, PAK_EXT)

    print('{BRIGHT}{CYAN}Loading BMP File:{RESET_ALL} {!r}'.format(infile, **colors))
    image = PakImage.from_bmp(infile)
    if not image.is_legacy_size:
        print('{BRIGHT}{YELLOW}Warning:{RESET_ALL} image is {}x{}, not the legacy 320x200'.format(*image.size, **colors))

    print('{BRIGHT}{CYAN}Saving PAK File:{RESET_ALL} {!r}'.format(outfile, **colors))
    print('{BRIGHT}{CYAN}Saving PAL File:{RESET_ALL} {!r}'.format(palfile, **colors))
    image.save(outfile, palfile)

def print_info(infile:str, *, colors:Dict[str,str]=DummyColors):
    """Print the validated header fields of a .BMP file
    """
    with open(infile, 'rb') as reader:
        info:BmpInfo = read_bmp_header(reader)
    fh, ih = info.fileheader, info.infoheader
    fields = (
        ('file size',   fh.fileSize),
        ('data offset', fh.pixelOffset),
        ('width',       info.width),
        ('height',      info.height),
        ('row order',   'top-to-bottom' if info.topdown else 'bottom-to-top'),
        ('stride',      info.stride),
        ('bits/pixel',  ih.bitCount),
        ('compression', Compression.name_of(ih.compression)),
        ('image size',  ih.sizeImage),
        ('resolution',  f'{ih.xPelsPerMeter}x{ih.yPelsPerMeter} px/m'),
        ('colors',      info.num_colors),
        ('important',   ih.clrImportant),
    )
    print('{BRIGHT}{WHITE}/// {}{RESET_ALL}'.format(os.path.basename(infile), **colors))
    for name,value in fields:
        print('{DIM}{CYAN}{}:{RESET_ALL}'.format(name.ljust(12), **colors), '{BRIGHT}{GREEN}{!s}{RESET_ALL}'.format(value, **colors))


## RUNNER ##

def _run(func, infile:str, *args, color:bool=True, done:bool=True) -> int:
    colors = get_colors(color, sys.stdout)
    errcolors = get_colors(color, sys.stderr)
    try:
        func(infile, *args, colors=colors)
    except BitmapError as ex:
        print('{BRIGHT}{RED}Error:{RESET_ALL} {!s}'.format(ex, **errcolors), file=sys.stderr)
        return ex.exitcode
    except OSError as ex:
        print('{BRIGHT}{RED}Error:{RESET_ALL} {!s}: {!r}'.format(ex.strerror or ex, ex.filename, **errcolors), file=sys.stderr)
        return EXIT_OPEN_FAILED
    if done:
        print('{BRIGHT}{GREEN}Done{RESET_ALL}'.format(**colors))
    return 0


## MAIN FUNCTION ##

def main(argv:Optional[List[str]]=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog='python -m paktool',
        description='Electronic Arts PAK image <-> BMP converter',
        add_help=True,
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="""Paths:
the palette and output paths default to the input path with its
extension replaced by .PAL, .BMP, or .PAK.
""")
    parser.add_argument('-C', '--no-color', dest='color', action='store_false', default=True,
        required=False, help='disable color printing')
    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND', required=True)

    p = subparsers.add_parser('pak2bmp', help='convert a 320x200 .PAK image and .PAL palette to .BMP')
    p.add_argument('input', metavar='PAK', help='raw .PAK image file')
    p.add_argument('-p', '--palette', metavar='PAL', default=None, help='raw .PAL palette file to read')
    p.add_argument('-o', '--output', metavar='BMP', default=None, help='.BMP file to write')

    p = subparsers.add_parser('bmp2pak', help='convert an 8-bit .BMP to a .PAK image and .PAL palette')
    p.add_argument('input', metavar='BMP', help='8-bit uncompressed .BMP file')
    p.add_argument('-p', '--palette', metavar='PAL', default=None, help='raw .PAL palette file to write')
    p.add_argument('-o', '--output', metavar='PAK', default=None, help='raw .PAK image file to write')

    p = subparsers.add_parser('info', help='print the header of an 8-bit .BMP file')
    p.add_argument('input', metavar='BMP', help='8-bit uncompressed .BMP file')

    args = parser.parse_args(argv)

    if args.command == 'info':
        return _run(print_info, args.input, color=args.color, done=False)

    func = pak2bmp if args.command == 'pak2bmp' else bmp2pak
    return _run(func, args.input, args.palette, args.output, color=args.color)


## SINGLE-FILE ENTRY POINTS ##

def _single_main(func, prog:str, banner:str, inext:str, outext:str, argv:Optional[List[str]]) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog=prog, description=banner,
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=f"""the program expects an accompanying palette file of the
same name as 'infile' except with a {PAL_EXT} extension.
output file will have the same name as 'infile', with {outext} extension.
""")
    parser.add_argument('infile', help=f'the name of the input {inext} file to convert')
    parser.add_argument('-C', '--no-color', dest='color', action='store_false', default=True,
        required=False, help='disable color printing')
    args = parser.parse_args(argv)

    print(banner)
    return _run(func, args.infile, color=args.color)

def pak2bmp_main(argv:Optional[List[str]]=None) -> int:
    return _single_main(pak2bmp, 'pak2bmp', 'Electronic Arts PAK file format to BMP converter', PAK_EXT, BMP_EXT, argv)

def bmp2pak_main(argv:Optional[List[str]]=None) -> int:
    return _single_main(bmp2pak, 'bmp2pak', 'BMP to Electronic Arts PAK file format converter', BMP_EXT, PAK_EXT, argv)


## MAIN CONDITION ##

if __name__ == '__main__':
    sys.exit(main())
