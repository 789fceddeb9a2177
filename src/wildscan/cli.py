"""wildscan CLI entry point.

Usage:
    wildscan plain [--input FILE] [--debug] [--dump]
    wildscan wildcard [--input FILE] [--debug] [--dump]

Both commands read a job from stdin (or FILE) and write matches to
stdout. See wildscan.formats for the job layouts.
"""
import argparse
import logging
import sys
from typing import TextIO

from wildscan.automaton.dump import format_automaton
from wildscan.automaton.multi_pattern import MultiPatternSearch
from wildscan.formats import (
    JobFormatError,
    format_plain_matches,
    format_wildcard_matches,
    read_plain_job,
    read_wildcard_job,
)
from wildscan.wildcard.pattern import MalformedPatternError, format_pattern
from wildscan.wildcard.search import WildcardSearch

log = logging.getLogger(__name__)


def _add_common_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--input", type=argparse.FileType("r"), default=None,
        help="Read the job from FILE instead of stdin.",
    )
    p.add_argument(
        "--debug", action="store_true",
        help="Trace automaton construction and matching to stderr.",
    )
    p.add_argument(
        "--dump", action="store_true",
        help="Write the state machine (and pattern structure) to stderr.",
    )


def _add_plain_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "plain",
        help="Find every occurrence of a list of literal patterns.",
    )
    _add_common_arguments(p)


def _add_wildcard_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "wildcard",
        help="Find every alignment of one wildcard/complement pattern.",
    )
    _add_common_arguments(p)


def _run_plain(args: argparse.Namespace, stream: TextIO) -> None:
    text, patterns = read_plain_job(stream)
    search = MultiPatternSearch(patterns)
    search.build()
    log.debug("Built automaton for %d patterns", search.pattern_count)
    if args.dump:
        print("State machine:", file=sys.stderr)
        print(format_automaton(search.matcher.automaton), file=sys.stderr)
    sys.stdout.write(format_plain_matches(search.search(text)))


def _run_wildcard(args: argparse.Namespace, stream: TextIO) -> None:
    text, pattern, wildcard, complement = read_wildcard_job(stream)
    search = WildcardSearch(pattern, wildcard, complement)
    if args.dump:
        print("Pattern:", file=sys.stderr)
        print(format_pattern(search.pattern), file=sys.stderr)
        print("State machine:", file=sys.stderr)
        print(format_automaton(search.matcher.automaton), file=sys.stderr)
    sys.stdout.write(format_wildcard_matches(search.search(text)))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="wildscan",
        description="Multi-pattern and wildcard string search in one pass.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_plain_parser(subparsers)
    _add_wildcard_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    stream = args.input if args.input is not None else sys.stdin
    try:
        if args.command == "plain":
            _run_plain(args, stream)
        elif args.command == "wildcard":
            _run_wildcard(args, stream)
    except (JobFormatError, MalformedPatternError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)
    finally:
        if args.input is not None:
            args.input.close()
