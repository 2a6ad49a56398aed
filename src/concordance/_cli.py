"""Command-line entry point: ``concordance FILE``."""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape

from . import __version__
from ._concordance import generate

log = logging.getLogger(__name__)

err_console = Console(stderr=True)

USAGE_MESSAGE = "Please pass file path as argument."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="concordance",
        description=(
            "Print an alphabetical concordance of an English text: every "
            "word with its frequency and the sentence numbers it occurs in."
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"concordance {__version__}"
    )
    parser.add_argument(
        "file", nargs="?", default=None, help="Path of the text document."
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Document encoding (default: platform preferred encoding).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr."
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    # Arguments after FILE are ignored.
    args, _ = build_parser().parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.file is None:
        print(USAGE_MESSAGE)
        return 0

    try:
        generate(args.file, sys.stdout, encoding=args.encoding)
    except Exception as exc:
        # Reported, not propagated: the exit status stays 0.
        err_console.print(
            f"[red]Error during execution - {escape(str(exc))}[/red]",
            soft_wrap=True,
            highlight=False,
            emoji=False,
        )
        log.debug("Concordance generation failed", exc_info=True)
    return 0
