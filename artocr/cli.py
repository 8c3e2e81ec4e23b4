"""artocr CLI: decode letter grids from text files, stdin or images."""

import argparse
import sys
from pathlib import Path

from artocr.logging import audit, get_logger, setup_logging

log = get_logger("cli")


def _catalogue_from_args(args):
    """Packaged catalogue unless --font6/--font10 replace a sheet."""
    from artocr.catalogue import FONT6_PATH, FONT10_PATH, Catalogue, default_catalogue

    if args.font6 is None and args.font10 is None:
        return default_catalogue()
    return Catalogue.from_files(args.font6 or FONT6_PATH, args.font10 or FONT10_PATH)


def cmd_decode(args):
    """Decode a grid and print the letters."""
    from artocr.decoder import Decoder

    if args.image:
        from artocr.imaging import grid_from_image

        grid = grid_from_image(args.image, cell_size=args.cell_size, threshold=args.threshold)
    elif args.file == "-":
        grid = sys.stdin.read()
    else:
        grid = Path(args.file).read_text(encoding="utf-8")

    decoder = Decoder(_catalogue_from_args(args), sentinel=args.sentinel)
    text = decoder.decode(grid)
    if text is None:
        print("error: input is not a grid (no line break found)", file=sys.stderr)
        sys.exit(1)
    print(text)


def cmd_catalogue(args):
    """List catalogue glyphs, drawn from their identifiers."""
    from artocr.grid import BLANK, FILL
    from artocr.segment import column_bits

    catalogue = _catalogue_from_args(args)
    heights = [args.height] if args.height else catalogue.heights
    for height in heights:
        entries = list(catalogue.entries(height))
        print(f"Height {height}: {len(entries)} glyphs")
        for _, glyph_id, letter in entries:
            print(f"  {letter}  id=0x{glyph_id:x}")
            if args.draw:
                columns = column_bits(glyph_id, height)
                for y in range(height):
                    print("     " + "".join(FILL if col[y] else BLANK for col in columns))


def main(argv=None):
    parser = argparse.ArgumentParser(prog="artocr", description="Read ASCII-art capital letters as text")

    # Global logging flags
    parser.add_argument("-V", "--verbose", action="store_true", help="Enable DEBUG-level logging")
    parser.add_argument("--log-file", default=None, help="Write JSON logs to file")
    parser.add_argument("--font6", default=None, help="Replacement 6-row reference sheet")
    parser.add_argument("--font10", default=None, help="Replacement 10-row reference sheet")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- decode ---
    p_dec = subparsers.add_parser("decode", help="Decode a letter grid")
    p_dec.add_argument("file", nargs="?", default="-", help="Text grid file ('-' for stdin)")
    p_dec.add_argument("--image", default=None, help="Decode a bitmap image instead of text")
    p_dec.add_argument("--cell-size", type=int, default=1, help="Image pixels per grid cell")
    p_dec.add_argument("--threshold", type=int, default=128, help="Brightness at or below which a pixel is on")
    p_dec.add_argument("--sentinel", default="?", help="Character for unrecognized glyphs")

    # --- catalogue ---
    p_cat = subparsers.add_parser("catalogue", help="List known glyphs")
    p_cat.add_argument("--height", type=int, default=None, choices=[6, 10], help="Only this glyph height")
    p_cat.add_argument("--draw", action="store_true", help="Draw each glyph")

    args = parser.parse_args(argv)

    # Setup logging before any command runs
    level = "DEBUG" if args.verbose else "WARNING"
    setup_logging(level=level, log_file=args.log_file)
    audit("cli.start", logger=log, command=args.command, verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    commands = {
        "decode": cmd_decode,
        "catalogue": cmd_catalogue,
    }
    commands[args.command](args)
    audit("cli.done", logger=log, command=args.command)


if __name__ == "__main__":
    main()
