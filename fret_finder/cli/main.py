"""Main entry point for the Fret Finder CLI."""

import argparse
import re
import sys
from typing import List, Optional

from ..config import get_config
from ..diagram import FretDiagram, Size
from ..errors import ArgumentError, FretFinderError, ParseError
from ..guitar import Guitar
from ..logger import get_logger
from ..logging_config import setup_logging
from ..pitch import Pitch

logger = get_logger(__name__)

NO_OCCURRENCES = "No occurences."

FRET_COUNT_PATTERN = re.compile(r"[0-9]+")


class FretFinderArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises ArgumentError instead of exiting."""

    def error(self, message):
        raise ArgumentError(message, prog=self.prog, usage=self.format_usage())


def note_type(text: str) -> Pitch:
    """Parse a note argument such as 'E2' or 'Db3'."""
    try:
        return Pitch.parse(text)
    except ParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def non_negative_int(text: str) -> int:
    """Parse a fret count."""
    if text.startswith("-") and FRET_COUNT_PATTERN.fullmatch(text[1:]):
        raise argparse.ArgumentTypeError(f"fret count must be non-negative, got {text}")
    if not FRET_COUNT_PATTERN.fullmatch(text):
        raise argparse.ArgumentTypeError(f"invalid fret count '{text}'")
    return int(text)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the 'find' command."""
    guitar_config = get_config("guitar")
    diagram_config = get_config("diagram")

    parser = FretFinderArgumentParser(
        prog="fret-finder",
        description="Fret Finder - find notes on a guitar fretboard",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging."
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    find_parser = subparsers.add_parser(
        "find", help="Finds the occurences of the given note on a guitar."
    )
    find_parser.add_argument(
        "note", metavar="NOTE", type=note_type, help="The note to find (e.g. E2, Db3)."
    )
    find_parser.add_argument(
        "-f",
        "--frets",
        type=non_negative_int,
        default=guitar_config["num_frets"],
        help=f"The number of frets on the guitar (default: {guitar_config['num_frets']}).",
    )
    find_parser.add_argument(
        "-t",
        "--tuning",
        nargs="*",
        type=note_type,
        default=guitar_config["tuning"],
        metavar="NOTE",
        help="The tuning of the guitar, lowest string first (default: E2 A2 D3 G3 B3 E4).",
    )
    find_parser.add_argument(
        "-s",
        "--size",
        choices=[size.name.lower() for size in Size],
        default=diagram_config["size"],
        help=f"Diagram size (default: {diagram_config['size']}).",
    )
    find_parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="Also list every location as text, including open strings.",
    )
    return parser


def run_find(args: argparse.Namespace) -> int:
    """Print the fret diagram for the requested note.

    Args:
        args: Parsed 'find' arguments

    Returns:
        Exit code (always 0; finding nothing is not an error)
    """
    guitar = Guitar(args.frets, args.tuning)
    locations = guitar.locate(args.note)

    if not locations:
        print(NO_OCCURRENCES)
        return 0

    print(FretDiagram(locations, Size.from_name(args.size)))
    if args.list:
        for location in locations:
            print(location)
    return 0


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        args: Command line arguments, or None to use sys.argv

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()

    try:
        parsed_args = parser.parse_args(args)
    except ArgumentError as e:
        sys.stderr.write(e.usage or parser.format_usage())
        print(f"{e.prog or parser.prog}: error: {e}", file=sys.stderr)
        return 2

    setup_logging(level="DEBUG" if parsed_args.debug else None)

    if parsed_args.command == "find":
        try:
            return run_find(parsed_args)
        except FretFinderError as e:
            logger.error(f"find failed: {e}")
            print(f"{parser.prog}: error: {e}", file=sys.stderr)
            return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
