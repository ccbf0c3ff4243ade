"""Notation package: PGN reading and writing."""

from pgnkit.notation.models import (
    DEFAULT_MAX_PLIES,
    GameRecord,
    PgnItem,
    ReaderOptions,
    WriterOptions,
)
from pgnkit.notation.reader import PgnReader, read_game, read_games
from pgnkit.notation.results import (
    TERMINATION_MARKERS,
    game_result_from_pgn,
    pgn_result_token,
)
from pgnkit.notation.stream import PgnStream
from pgnkit.notation.writer import format_game, write_game

__all__ = [
    "DEFAULT_MAX_PLIES",
    "TERMINATION_MARKERS",
    "GameRecord",
    "PgnItem",
    "PgnReader",
    "PgnStream",
    "ReaderOptions",
    "WriterOptions",
    "format_game",
    "game_result_from_pgn",
    "pgn_result_token",
    "read_game",
    "read_games",
    "write_game",
]
