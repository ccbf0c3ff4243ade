"""Core layer: enums and the board collaborator.

Quick start::

    from pgnkit.core import PythonChessBoard, NotationStyle

    board = PythonChessBoard()
    move = board.move_from_string("e4")
    print(board.move_string(move, NotationStyle.STANDARD_ALGEBRAIC))
"""

from pgnkit.core.board import (
    CAPABLANCA_FEN,
    GOTHIC_FEN,
    STANDARD_FEN,
    IBoard,
    Move,
    UnsupportedVariantError,
    default_fen,
)
from pgnkit.core.enums import (
    GameResult,
    NotationStyle,
    PgnErrorReason,
    PgnItemKind,
    Variant,
)
from pgnkit.core.python_chess import PythonChessBoard, create_board

__all__ = [
    # Enums
    "GameResult",
    "NotationStyle",
    "PgnErrorReason",
    "PgnItemKind",
    "Variant",
    # Board collaborator
    "IBoard",
    "Move",
    "PythonChessBoard",
    "UnsupportedVariantError",
    "create_board",
    "default_fen",
    # Known positions
    "STANDARD_FEN",
    "CAPABLANCA_FEN",
    "GOTHIC_FEN",
]
