"""Portable Game Notation reader and writer."""

from pgnkit.core import (
    STANDARD_FEN,
    GameResult,
    IBoard,
    NotationStyle,
    PgnErrorReason,
    PgnItemKind,
    PythonChessBoard,
    Variant,
)
from pgnkit.notation import (
    GameRecord,
    PgnItem,
    PgnReader,
    ReaderOptions,
    WriterOptions,
    format_game,
    read_game,
    read_games,
    write_game,
)

__all__ = [
    "STANDARD_FEN",
    "GameRecord",
    "GameResult",
    "IBoard",
    "NotationStyle",
    "PgnErrorReason",
    "PgnItem",
    "PgnItemKind",
    "PgnReader",
    "PythonChessBoard",
    "ReaderOptions",
    "Variant",
    "WriterOptions",
    "format_game",
    "read_game",
    "read_games",
    "write_game",
]
