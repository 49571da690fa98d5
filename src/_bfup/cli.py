"""
The bfup command line program, reads a file (or stdin), preprocesses it
and writes the result to a file (or stdout).
"""

import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from colorama import Fore, Style

from _bfup import config as bfconfig
from _bfup.errors import BfupError
from _bfup.reading import tokenize
from _bfup.writing import write, write_string
from bfup.version import version as bfup_version

logger = logging.getLogger(__name__)

DEFAULT_LINE_WIDTH = 32

SYMBOL_OPTIONS = (
    "operators",
    "group_start_delimiter",
    "group_end_delimiter",
    "number_prefix",
    "macro_prefix",
    "escape_prefix",
)

LICENSE = """\
This is free software. You may redistribute copies of it under the terms of
the GNU General Public License <https://www.gnu.org/licenses/gpl.html>.
There is NO WARRANTY, to the extent permitted by law."""


class CLIError(Exception):
    """
    An error to be reported to the user, with the error that caused
    it as __cause__.
    """

    pass


@dataclass(frozen=True)
class CLIArguments:
    """Arguments from argument parser for one run of bfup."""

    input_filepath: Optional[Path]
    output_filepath: Optional[Path]
    config_filepath: Optional[Path]

    symbols: dict

    line_width: Optional[int]
    no_newline: bool

    license: bool
    verbose: bool


def single_character(value):
    if len(value) != 1:
        raise ArgumentTypeError(f"expected a single character, got {value!r}")
    return value


def positive_integer(value):
    try:
        number = int(value)
    except ValueError as err:
        raise ArgumentTypeError(f"invalid integer {value!r}") from err
    if number < 1:
        raise ArgumentTypeError(f"line width must be positive, got {number}")
    return number


def parse_cli_arguments(argv=None, prog="bfup"):
    """Parse CLI arguments from argparse into CLIArguments."""
    parser = _construct_argument_parser(prog)
    args = parser.parse_args(argv)

    symbols = {
        name: getattr(args, name)
        for name in SYMBOL_OPTIONS
        if getattr(args, name) is not None
    }
    if args.config_file is not None and symbols:
        given = ", ".join("--" + name.replace("_", "-") for name in symbols)
        parser.error(f"argument -C/--config-file: not allowed with {given}")

    if args.no_align:
        line_width = None
    elif args.line_width is None:
        line_width = DEFAULT_LINE_WIDTH
    else:
        line_width = args.line_width

    return CLIArguments(
        input_filepath=Path(args.input) if args.input else None,
        output_filepath=Path(args.output) if args.output else None,
        config_filepath=Path(args.config_file) if args.config_file else None,
        symbols=symbols,
        line_width=line_width,
        no_newline=bool(args.no_newline),
        license=bool(args.license),
        verbose=bool(args.verbose),
    )


def _construct_argument_parser(prog):
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        prog=prog,
        description="Preprocessor for brainfuck-like languages.",
    )

    parser.add_argument(
        "input",
        nargs="?",
        metavar="FILE",
        help="File to preprocess [default: stdin]",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Specify output filename [default: stdout]",
    )
    parser.add_argument(
        "-C",
        "--config-file",
        metavar="FILE",
        help="Read preprocessor config from a json file",
    )

    parser.add_argument(
        "-+",
        "--operators",
        help=f"Specify recognized operators [default: {bfconfig.DEFAULT_OPERATORS}]",
    )
    parser.add_argument(
        "-#",
        "--number-prefix",
        type=single_character,
        metavar="CHAR",
        help=f"Specify number prefix [default: {bfconfig.DEFAULT_NUMBER_PREFIX}]",
    )
    parser.add_argument(
        "-m",
        "--macro-prefix",
        type=single_character,
        metavar="CHAR",
        help=f"Specify macro prefix [default: {bfconfig.DEFAULT_MACRO_PREFIX}]",
    )
    parser.add_argument(
        "-e",
        "--escape-prefix",
        type=single_character,
        metavar="CHAR",
        help=f"Specify escape prefix [default: {bfconfig.DEFAULT_ESCAPE_PREFIX}]",
    )
    parser.add_argument(
        "--group-start-delimiter",
        type=single_character,
        metavar="CHAR",
        help="Specify group start delimiter "
        f"[default: {bfconfig.DEFAULT_GROUP_START_DELIMITER}]",
    )
    parser.add_argument(
        "--group-end-delimiter",
        type=single_character,
        metavar="CHAR",
        help="Specify group end delimiter "
        f"[default: {bfconfig.DEFAULT_GROUP_END_DELIMITER}]",
    )

    alignment = parser.add_mutually_exclusive_group()
    alignment.add_argument(
        "-n",
        "--no-align",
        action="store_true",
        help="Do not align output in a rectangle",
    )
    alignment.add_argument(
        "-l",
        "--line-width",
        type=positive_integer,
        metavar="WIDTH",
        help=f"Specify max line width [default: {DEFAULT_LINE_WIDTH}]",
    )

    parser.add_argument(
        "-b",
        "--no-newline",
        action="store_true",
        help="Do not append a newline character at the end",
    )
    parser.add_argument(
        "-L",
        "--license",
        action="store_true",
        help="Print license",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {bfup_version}",
    )

    return parser


class _LevelPrefixFormatter(logging.Formatter):
    """
    Prefixes messages with their lowercase level name, the error
    prefix in bold red when colour is enabled.
    """

    def __init__(self, fmt=None, colour=False):
        super().__init__(fmt)
        self.colour = colour

    def format(self, record):
        prefix = f"{record.levelname.lower()}:"
        if self.colour and record.levelno >= logging.ERROR:
            prefix = f"{Style.BRIGHT}{Fore.RED}{prefix}{Style.RESET_ALL}"
        return f"{prefix} {super().format(record)}"


def setup_logging(verbose):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        _LevelPrefixFormatter("%(message)s", colour=sys.stderr.isatty())
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        handlers=[handler],
        force=True,
    )


def print_license():
    print(f"bfup {bfup_version}\nŁukasz Dragon <lukasz.b.dragon@gmail.com>")
    print()
    print(LICENSE)


def load_config(args):
    if args.config_filepath is not None:
        try:
            return bfconfig.read_config(args.config_filepath)
        except (OSError, ValueError) as err:
            raise CLIError(
                f"failed to parse config '{args.config_filepath}'"
            ) from err
    try:
        return bfconfig.Config(**args.symbols)
    except bfconfig.ConfigError as err:
        raise CLIError("invalid configuration") from err


def read_tokens(args, config):
    try:
        if args.input_filepath is None:
            return tokenize(sys.stdin, config)
        return tokenize(args.input_filepath, config)
    except OSError as err:
        raise CLIError(f"failed to open '{args.input_filepath}'") from err
    except BfupError as err:
        raise CLIError("failure while preprocessing") from err


def write_output(args, tokens, sink):
    try:
        write(sink, tokens, args.line_width)
        if not args.no_newline:
            write_string(sink, "\n")
    except BfupError as err:
        raise CLIError("failure while preprocessing") from err


def run(args):
    """
    Preprocess according to args. The input is read completely before
    the output file is opened, so it is left untouched on errors.
    """
    config = load_config(args)
    logger.debug("using %r", config)

    tokens = read_tokens(args, config)

    if args.output_filepath is None:
        write_output(args, tokens, sys.stdout)
        sys.stdout.flush()
        return

    try:
        sink = open(args.output_filepath, "w", encoding="utf-8")
    except OSError as err:
        raise CLIError(f"failed to open '{args.output_filepath}'") from err
    with sink:
        write_output(args, tokens, sink)


def main(argv=None):
    """
    Entry point of the bfup program.

    :returns: The exit code, 0 on success and 1 on errors.
    """
    args = parse_cli_arguments(argv)
    setup_logging(args.verbose)

    if args.license:
        print_license()
        return 0

    try:
        run(args)
    except CLIError as err:
        if err.__cause__ is not None:
            logger.error("%s\n\n%s", err, err.__cause__)
        else:
            logger.error("%s", err)
        return 1
    return 0
