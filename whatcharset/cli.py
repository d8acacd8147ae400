"""Command-line interface for WhatCharacterSet.

Usage:
  $ whatcharset -b 61646D696E
  $ whatcharset -s "Ríkarðsdóttir" -f "RÃ­karÃ°sdÃ³ttir"
  $ whatcharset -s test -c UTF-8
"""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import NoReturn

from rich.console import Console
from rich.logging import RichHandler

from .constants import PROG_NAME
from .errors import ArgumentParseError, WhatCharsetError
from .models import ScanOptions
from .scanner import run as run_scan

EPILOG = """\
Get the bytes with "SELECT HEX(col) ..." in MySQL and pass them with -b to
see what every character set makes of them. Use -f with the text your
application shows to narrow the list down to the character sets that
produce it.

examples:
  %(prog)s -b 61646D696E
  %(prog)s -s Ríkarðsdóttir -f "RÃ­karÃ°sdÃ³ttir"
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Raise on malformed input instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentParseError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = _ArgumentParser(
        prog=PROG_NAME,
        description="Find out what character set a string is being interpreted as.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-b", "--bytes", dest="hex_bytes", metavar="HEX", help="bytes to decode")
    parser.add_argument("-s", "--string", dest="text", metavar="TEXT", help="string to reinterpret")
    parser.add_argument("-c", "--character-set", dest="charset", metavar="NAME", help="character set to decode as")
    parser.add_argument("-f", "--find", dest="find", metavar="TEXT", help="decoded string to find")
    parser.add_argument("--strict", action="store_true", help="fail on a malformed byte string")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def parse_options(argv: Sequence[str] | None = None) -> ScanOptions:
    """Parse the command line.

    Raises:
        ArgumentParseError: on malformed options
        SystemExit: after printing help for ``-h``
    """
    namespace = build_parser().parse_args(argv)
    return ScanOptions(**vars(namespace))


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main(
    argv: Sequence[str] | None = None,
    emit: Callable[[str], None] = print,
    setup_logging: bool = False,
) -> int:
    """Run the tool and return its exit code.

    Logging is only configured when ``setup_logging`` is set, so embedding
    callers keep control of the root logger.
    """
    try:
        options = parse_options(argv)
        if setup_logging:
            configure_logging(options.verbose)
        return run_scan(options, emit)
    except WhatCharsetError as e:
        emit(str(e))
        return e.exit_code


def run() -> None:
    """Console script entry point."""
    # Decoded text may hold characters stdout cannot encode
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="backslashreplace")
    sys.exit(main(setup_logging=True))


if __name__ == "__main__":
    run()
