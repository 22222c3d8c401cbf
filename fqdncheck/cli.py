"""
Command-line driver for fqdncheck.

Usage: fqdncheck [-v] <string-to-validate>

Exits 0 when the string is a valid FQDN or IP literal, 1 otherwise.
"""

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from .config import CheckConfig, VERBOSE_FLAG
from .output import VerbosePrinter
from .validator import InputValidator

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1


class UsageError(Exception):
    """Raised for malformed command lines."""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors to the caller instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog,
        description='Validate a fully-qualified domain name or IP literal',
        add_help=False,
    )
    parser.add_argument(VERBOSE_FLAG, dest='verbose', action='store_true',
                        help='Print why the string is or is not valid')
    parser.add_argument('target', metavar='string-to-validate',
                        help='Domain name, IPv4 or IPv6 address to validate')
    return parser


def format_usage(prog: str) -> str:
    return f"Usage: {prog} [{VERBOSE_FLAG}] <string-to-validate>"


def parse_arguments(argv: List[str], parser: argparse.ArgumentParser):
    """
    Parse the command line into a configuration and the string to check.

    Args:
        argv: Arguments after the program name
        parser: Parser built by ``build_parser``

    Returns:
        Tuple of (CheckConfig, target string)

    Raises:
        UsageError: On wrong argument count or an unrecognized flag
    """
    if len(argv) not in (1, 2):
        raise UsageError("Wrong number of arguments")

    flag = argv[0] if len(argv) == 2 else None
    try:
        config = CheckConfig.from_flag(flag)
    except ValueError as e:
        raise UsageError(str(e)) from e

    # '--' keeps a target such as '-abc.com' from being read as an option.
    options = [flag] if flag is not None else []
    args = parser.parse_args(options + ['--', argv[-1]])
    return config, args.target


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()

    try:
        config, target = parse_arguments(argv, parser)
    except UsageError as e:
        print(f"Error: {e}")
        print(format_usage(parser.prog))
        return EXIT_INVALID

    verdict = InputValidator().validate(target)
    logger.debug("Verdict for %r: %s", target, verdict)

    VerbosePrinter(config).report_verdict(verdict)
    return EXIT_VALID if verdict.valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
