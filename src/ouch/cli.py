"""CLI entry and command dispatch."""

from __future__ import annotations

import argparse
import difflib
import logging
import sys
from collections.abc import Sequence

from .colors import palette_for_stream
from .compress_service import compress
from .constants import (
    COMPRESS_COMMAND,
    COMPRESS_TYPO_RATIO,
    DECOMPRESS_COMMAND,
    PROGRAM_NAME,
    VERSION,
)
from .conversions import from_argument_error
from .decompress_service import decompress
from .errors import (
    CompressionTypoError,
    InternalError,
    MissingCompressionArgumentsError,
    OuchError,
)
from .logging_setup import setup_logging
from .presenters import render_compress_result, render_decompress_result, render_error

logger = logging.getLogger(__name__)

# Global options that consume the following token as their value.
_VALUE_OPTIONS = {"--log-file"}


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise argparse.ArgumentError(None, message)


def main(argv: Sequence[str] | None = None) -> int:
    argv_list = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()

    try:
        args = _parse_args(parser, argv_list)
        setup_logging(args.log_file, verbose=args.verbose)
        return _dispatch(args)
    except OuchError as exc:
        logger.info("command failed with %s", type(exc).__name__)
        print(render_error(exc, palette_for_stream(sys.stdout)))
        return 1


def _parse_args(
    parser: argparse.ArgumentParser, argv: list[str]
) -> argparse.Namespace:
    try:
        return parser.parse_args(argv)
    except argparse.ArgumentError as exc:
        if _looks_like_compress_typo(argv):
            raise CompressionTypoError() from exc
        raise from_argument_error(exc) from exc


def _dispatch(args: argparse.Namespace) -> int:
    if args.command == COMPRESS_COMMAND:
        if len(args.paths) < 2:
            raise MissingCompressionArgumentsError()
        compress_result = compress(
            input_args=args.paths[:-1],
            output_arg=args.paths[-1],
            overwrite=args.yes,
        )
        print(render_compress_result(compress_result))
        return 0

    if args.command == DECOMPRESS_COMMAND:
        decompress_result = decompress(
            archive_arg=args.archive,
            output_dir_arg=args.output,
            member_names=args.member or (),
        )
        print(render_decompress_result(decompress_result))
        return 0

    raise InternalError()


def _looks_like_compress_typo(argv: list[str]) -> bool:
    first_word = _first_positional(argv)
    if first_word is None or first_word in (COMPRESS_COMMAND, DECOMPRESS_COMMAND):
        return False
    compress_ratio = difflib.SequenceMatcher(None, first_word, COMPRESS_COMMAND).ratio()
    decompress_ratio = difflib.SequenceMatcher(None, first_word, DECOMPRESS_COMMAND).ratio()
    # A misspelled "decompress" also scores high against "compress".
    return compress_ratio >= COMPRESS_TYPO_RATIO and compress_ratio > decompress_ratio


def _first_positional(argv: list[str]) -> str | None:
    skip_next = False
    for token in argv:
        if skip_next:
            skip_next = False
            continue
        if token in _VALUE_OPTIONS:
            skip_next = True
            continue
        if token.startswith("-"):
            continue
        return token
    return None


def _build_parser() -> argparse.ArgumentParser:
    parser = _RaisingArgumentParser(
        prog=PROGRAM_NAME,
        description="Compress and decompress files and directories.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug details (to stderr unless --log-file is given).",
    )
    parser.add_argument(
        "--log-file",
        required=False,
        help="Optional path of a log file.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    compress_parser = subparsers.add_parser(
        COMPRESS_COMMAND,
        help="Compress files and directories into an archive.",
    )
    compress_parser.add_argument(
        "paths",
        nargs="*",
        help="Input files or directories followed by the output archive path.",
    )
    compress_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Overwrite the output archive if it already exists.",
    )

    decompress_parser = subparsers.add_parser(
        DECOMPRESS_COMMAND,
        help="Decompress an archive.",
    )
    decompress_parser.add_argument("archive", help="Archive to decompress.")
    decompress_parser.add_argument(
        "-o",
        "--output",
        required=False,
        help="Directory to decompress into (defaults to the current directory).",
    )
    decompress_parser.add_argument(
        "-m",
        "--member",
        action="append",
        help="Only extract this archive entry. Can be repeated.",
    )
    return parser
