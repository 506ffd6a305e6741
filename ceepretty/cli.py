"""Command-line entry point: argparse, logging setup, main loop."""

import io
import logging
import os
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from ceepretty import colors
from ceepretty.config import Config
from ceepretty.prettifier import prettify_stream


class DiagnosticFormatter(logging.Formatter):
    """Plain message, red when color output is enabled."""

    def __init__(self, color: bool = False):
        super().__init__("%(message)s")
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        return colors.colorize(colors.RED, super().format(record), self.color)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="cee-pretty",
        description="Prettify log lines according to our output.\n"
                    "Reads from stdin and writes to stdout.",
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--extra",
        action="store_true",
        help="Show all JSON fields in log after message",
    )
    return parser


def setup_logging(config: Config, stream=None) -> None:
    """Route diagnostics to stderr with no prefix, red on a terminal."""
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(DiagnosticFormatter(color=config.color))
    logging.basicConfig(level=logging.WARNING, handlers=[handler], force=True)


def _use_utf8(stream) -> None:
    # surrogateescape keeps non-UTF-8 pass-through bytes intact
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(encoding="utf-8", errors="surrogateescape")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = Config.from_args(args, sys.stdout)
    setup_logging(config)

    _use_utf8(sys.stdin)
    _use_utf8(sys.stdout)

    prettify_stream(sys.stdin, sys.stdout, config)
    return 0


def run() -> None:
    """Console-script wrapper: exit quietly on Ctrl+C or a closed pipe."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        # silence the flush-on-exit error once the reader is gone
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(0)
