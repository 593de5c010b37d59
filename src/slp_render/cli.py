"""Command-line entry point for rendering SLP sprites to PNG frames."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError as SettingsError

from slpframes.core.errors import SlpRenderError
from slpframes.core.sequence_driver import SequenceDriver
from slpframes.core.settings import RenderSettings

logger = logging.getLogger(__name__)

EPILOG = """\
examples:
  slp-render graphics.drs/2.slp archer/ --player=3
  slp-render interfac.drs/50100.slp loading-background/ --palette=interfac.drs/50532.bin
  slp-render graphics.drs/2.slp --inspect
"""


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slp-render",
        description="Render every frame of an SLP sprite to a PNG centred on the frame hotspot.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", type=Path, nargs="?", help="Path to the SLP file")
    parser.add_argument("output", type=Path, nargs="?", help="Directory to write <index>.png frames into")
    parser.add_argument(
        "--inspect",
        action="store_true",
        help="Show metadata about the file, like the size and the amount of frames",
    )
    parser.add_argument(
        "--palette",
        type=Path,
        help="JASC-PAL palette file to get colours from (default: the unit palette 50500)",
    )
    parser.add_argument(
        "-p",
        "--player",
        type=int,
        default=1,
        help="Player colour to use for rendering units (default: 1)",
    )
    parser.add_argument(
        "--draw-outline",
        action="store_true",
        help="Draw the outline around the unit instead of the unit itself",
    )
    parser.add_argument("--decoder", help="SLP decoder factory as package.module:callable")
    parser.add_argument("--palette-parser", help="Palette parser as package.module:callable")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def build_settings(args: argparse.Namespace) -> RenderSettings:
    overrides = {
        "palette_path": args.palette,
        "player": args.player,
        "draw_outline": args.draw_outline,
        "decoder": args.decoder,
        "palette_parser": args.palette_parser,
    }
    return RenderSettings(**{key: value for key, value in overrides.items() if value is not None})


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.input is None or (not args.inspect and args.output is None):
        parser.print_help()
        return 1

    configure_logging(args.verbose)
    try:
        driver = SequenceDriver(build_settings(args))
        if args.inspect:
            print(driver.run_inspect(args.input))
        else:
            driver.run(args.input, args.output)
    except SettingsError as exc:
        logger.error("Invalid settings: %s", exc)
        return 2
    except SlpRenderError as exc:
        logger.error("%s", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
