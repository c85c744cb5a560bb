"""chinwag CLI - Length-exact filler text generator.

Usage:
    python -m chinwag.main --type letters --min 1500 --max 1500
    python -m chinwag.main --type paragraphs --min 2 --max 4 --dict latin
    python -m chinwag.main --type words --min 50 --max 80 --file words.txt
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from . import config as cfg
from .dictionary import Dictionary
from .errors import ChinwagError, DictionaryLoadError, fatal
from .generator import Generator
from .ingest.embedded import open_embedded
from .ingest.plain_text import open_with_tokens
from .schema import OutputType

logger = logging.getLogger("chinwag")


def build_parser() -> argparse.ArgumentParser:
    defaults = cfg.load().get("defaults", cfg.FALLBACK_DEFAULTS)

    parser = argparse.ArgumentParser(
        prog="chinwag",
        description="chinwag - Length-exact filler text generator",
    )
    parser.add_argument(
        "--type",
        "-t",
        type=str,
        default=defaults.get("output_type", "letters"),
        choices=[t.value for t in OutputType],
        help=f"Output granularity (default: {defaults.get('output_type', 'letters')})",
    )
    parser.add_argument(
        "--min",
        type=int,
        default=defaults.get("min_output", 1),
        help=f"Minimum output amount (default: {defaults.get('min_output', 1)})",
    )
    parser.add_argument(
        "--max",
        type=int,
        default=defaults.get("max_output", 160),
        help=f"Maximum output amount (default: {defaults.get('max_output', 160)})",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--dict",
        "-d",
        type=str,
        default=defaults.get("dictionary", "Seussian"),
        help="Embedded dictionary name (default: "
             f"{defaults.get('dictionary', 'Seussian')})",
    )
    source.add_argument(
        "--file",
        "-f",
        type=Path,
        help="Text file to build the dictionary from",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible output",
    )
    parser.add_argument(
        "--show-dict",
        action="store_true",
        help="Print the dictionary instead of generating text",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=defaults.get("verbose", False),
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def load_dictionary(args: argparse.Namespace) -> Dictionary:
    """Open the dictionary selected on the command line."""
    if args.file is not None:
        return open_with_tokens(args.file)
    return open_embedded(args.dict)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        dictionary = load_dictionary(args)
    except DictionaryLoadError as e:
        logger.error("%s", e)
        return 1

    if args.show_dict:
        print(dictionary)
        return 0

    generator = Generator(seed=args.seed)
    try:
        text = generator.generate(dictionary, args.type, args.min, args.max)
    except ChinwagError as e:
        fatal(dictionary, e)
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
