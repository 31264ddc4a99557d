import sys
import argparse

import pdf
from config import *
from errors import ConfigError


class ArgumentParser(argparse.ArgumentParser):
    # diagnostics go to standard output like every other error
    def error(self, message):
        self.print_usage(sys.stdout)
        print(f"Error: {message}")
        sys.exit(2)


def make_parser(cfg: GlobalConfig):
    parser = ArgumentParser(
        prog="tarot-print-prep",
        description="Lay out a 78 card tarot deck on printable pages.",
        add_help=False,
    )
    parser.add_argument(
        "--dir", default=cfg.OutputDir, help="output directory (default: current directory)"
    )
    parser.add_argument("-f", "--file", help="output filename")
    parser.add_argument(
        "-p",
        "--page-size",
        default=cfg.DefaultPageSize,
        help="page size, either a standard size (eg. A4) or <width>x<height> in mm or in "
        f"(eg. 9inx12in) (default {cfg.DefaultPageSize})",
    )
    parser.add_argument(
        "-o",
        "--orientation",
        default=cfg.DefaultOrientation,
        help="portrait or landscape, not valid with custom widthxheight page size "
        f"(default {cfg.DefaultOrientation})",
    )
    parser.add_argument(
        "-t", "--tarot", help="the directory name of the collection of tarot card images (required)"
    )
    parser.add_argument(
        "--deck-root",
        default=cfg.DeckRoot,
        help="directory holding <tarot>_images (default: current directory)",
    )
    parser.add_argument(
        "-d", "--dups", type=int, default=1, help="number of duplicates of each card (default 1)"
    )

    grid = parser.add_argument_group(
        "grid", "Exactly one of cols/rows/width/height must be specified"
    )
    grid.add_argument("-c", "--cols", type=int, help="number of columns of cards")
    grid.add_argument("-r", "--rows", type=int, help="number of rows of cards")
    grid.add_argument("-W", "--width", help="card width in mm or in (eg. 70mm)")
    grid.add_argument("-H", "--height", help="card height in mm or in (eg. 4.75in)")

    margins = parser.add_argument_group(
        "margins",
        f"Borders and gaps each come in pairs, give both or neither (default border {cfg.DefaultBorder})",
    )
    margins.add_argument("--left-border", help="left border in mm or in")
    margins.add_argument("--bottom-border", help="bottom border in mm or in")
    margins.add_argument("--h-gap", help="horizontal gap between cards in mm or in")
    margins.add_argument("--v-gap", help="vertical gap between cards in mm or in")

    other = parser.add_argument_group("other options")
    other.add_argument(
        "-v", "--verbose", action="store_true", help="show informational output"
    )
    other.add_argument(
        "--version", action="version", version=version, help="print the version number"
    )
    other.add_argument("-?", "--help", action="help", help="print options")
    return parser


def parse_args(argv=None, cfg=None) -> PrintConfig:
    cfg = cfg if cfg is not None else load_config()
    args = make_parser(cfg).parse_args(argv)

    return PrintConfig(
        deck=args.tarot,
        dir=args.dir,
        file=args.file,
        deck_root=args.deck_root,
        page_size=args.page_size,
        orientation=args.orientation,
        dups=args.dups,
        rows=args.rows,
        cols=args.cols,
        width=args.width,
        height=args.height,
        left_border=args.left_border,
        bottom_border=args.bottom_border,
        h_gap=args.h_gap,
        v_gap=args.v_gap,
        default_border=cfg.DefaultBorder,
        verbose=args.verbose,
    )


def main(argv=None, cfg=None):
    config = parse_args(argv, cfg)

    print_fn = print if config.verbose else lambda *args: args
    print_fn(config)

    try:
        pdf_path, _ = pdf.generate(config, print_fn)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    print(f"PDF successfully written at {pdf_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
