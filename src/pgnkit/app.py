"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pgnkit.notation import (
    DEFAULT_MAX_PLIES,
    ReaderOptions,
    pgn_result_token,
    read_games,
    write_game,
)

_LOGGER = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgnkit", description="Read and rewrite PGN game files"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log parser diagnostics"
    )
    parser.add_argument(
        "--max-plies",
        type=_positive_int,
        default=DEFAULT_MAX_PLIES,
        help="Stop reading a game after this many plies",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="Summarise the games in a file")
    list_cmd.add_argument("source", type=Path)

    normalize = commands.add_parser(
        "normalize", help="Append every valid game of SOURCE to DEST"
    )
    normalize.add_argument("source", type=Path)
    normalize.add_argument("dest", type=Path)
    return parser


def _list_games(source: Path, options: ReaderOptions) -> int:
    with source.open(encoding="utf-8", errors="replace") as pgn_file:
        for index, record in enumerate(read_games(pgn_file, options=options), 1):
            print(
                f"{index}. {record.white_player or '?'} - "
                f"{record.black_player or '?'} "
                f"{pgn_result_token(record.result)} ({record.ply_count} plies)"
            )
    return 0


def _normalize(source: Path, dest: Path, options: ReaderOptions) -> int:
    written = failed = 0
    with source.open(encoding="utf-8", errors="replace") as pgn_file:
        for record in read_games(pgn_file, options=options):
            if write_game(record, dest):
                written += 1
            else:
                failed += 1
    _LOGGER.info("Wrote %d game(s) to %s, %d failed", written, dest, failed)
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    """Run the pgnkit command line."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = ReaderOptions(max_plies=args.max_plies)

    try:
        if args.command == "list":
            return _list_games(args.source, options)
        return _normalize(args.source, args.dest, options)
    except OSError as exc:
        _LOGGER.error("Cannot read %s: %s", args.source, exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
