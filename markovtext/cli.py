#!/usr/bin/env python3
"""
markovtext CLI
==============
Command-line interface for Markov chain text generation.

Usage:
    markovtext -f book.txt --lines 5
    markovtext -f a.txt -f b.txt --order 4 --length 200 --seed 42
    cat notes.txt | markovtext --stdin --ascii --split '[.!?]'
    markovtext -f book.txt --min-line 20 --dump-input
"""

import argparse
import logging
import sys
from functools import partial

from markovtext import __version__
from markovtext.config import GenerationConfig
from markovtext.errors import InvalidSplitPatternError, MarkovTextError
from markovtext.formatter import compile_split_pattern
from markovtext.markov_chain import SEED_MAX, SEED_MIN
from markovtext.pipeline import TextGenerator, read_source, read_stdin
from markovtext.settings import get_setting

logger = logging.getLogger(__name__)


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Generated text to stdout, errors to stderr."""

    def __init__(self, stream=None, err_stream=None):
        self.stream = stream or sys.stdout
        self.err_stream = err_stream or sys.stderr

    def write(self, text: str):
        self.stream.write(text)

    def error(self, msg: str):
        print(f"Error: {msg}", file=self.err_stream)


def configure_logging(verbose: bool = False, quiet: bool = False):
    """Send diagnostics to stderr; generated text owns stdout."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, str(get_setting("logging.level", "WARNING")).upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format=get_setting("logging.format", "%(levelname)s: %(message)s"),
        stream=sys.stderr,
        force=True,
    )


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def positive_int(value: str) -> int:
    number = non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def seed_value(value: str) -> int:
    """A signed or unsigned 64-bit integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if not SEED_MIN <= number <= SEED_MAX:
        raise argparse.ArgumentTypeError(f"must fit in 64 bits: {number}")
    return number


def split_pattern(value: str):
    try:
        return compile_split_pattern(value)
    except InvalidSplitPatternError as e:
        raise argparse.ArgumentTypeError(e.reason)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='markovtext',
        description='Generate text in the style of the input using a character-level Markov chain',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  markovtext -f book.txt --lines 5
  markovtext -f a.txt -f b.txt --order 4 --length 200 --seed 42
  cat notes.txt | markovtext --stdin --split '[.!?]'
        """
    )
    parser.add_argument('--version', '-V', action='version', version=f'markovtext {__version__}')

    # Input
    parser.add_argument('-f', '--file', dest='files', action='append', default=[], metavar='PATH',
                        help='The input file (repeatable)')
    parser.add_argument('--stdin', action='store_true', help='Read input from stdin instead')

    # Generation
    parser.add_argument('--length', type=non_negative_int, help='The maximum length of the output')
    parser.add_argument('--lines', type=non_negative_int, help='How many lines to generate')
    parser.add_argument('--order', type=positive_int, help='The order of the ngrams')
    parser.add_argument('--seed', type=seed_value, help='The seed for the random number generator')
    parser.add_argument('--min-line', type=non_negative_int, help='Ignore lines that are shorter than this')
    parser.add_argument('--split', type=split_pattern, metavar='REGEX', help='Split output by regex')
    parser.add_argument('--ascii', action='store_true', help='Strip non-ascii characters')

    # Output
    parser.add_argument('--dump-input', action='store_true',
                        help='Print the processed text instead of generating output')
    parser.add_argument('--print-seed', action='store_true',
                        help='Print the seed used for the random number generator')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log diagnostics')
    parser.add_argument('--quiet', '-q', action='store_true', help='Only log errors')

    return parser


def config_from_args(args) -> GenerationConfig:
    return GenerationConfig(
        order=args.order,
        length=args.length,
        lines=args.lines,
        min_line=args.min_line,
        seed=args.seed,
        ascii_only=args.ascii,
        split=args.split,
        dump_input=args.dump_input,
        print_seed=args.print_seed,
    )


# =============================================================================
# Main
# =============================================================================

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, quiet=args.quiet)
    out = Output()

    if not args.stdin and not args.files:
        parser.print_help(sys.stderr)
        return 1

    try:
        generator = TextGenerator(config_from_args(args))
    except MarkovTextError as e:
        out.error(str(e))
        return 1

    if args.stdin:
        sources = [read_stdin]
    else:
        sources = [partial(read_source, path) for path in args.files]

    failed = 0
    try:
        for load in sources:
            try:
                generator.process(load(), out)
            except (MarkovTextError, OSError) as e:
                failed += 1
                out.error(str(e))
                logger.debug("Input failed", exc_info=True)
    except KeyboardInterrupt:
        return 130

    if failed:
        logger.warning("%d input(s) produced no output", failed)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
