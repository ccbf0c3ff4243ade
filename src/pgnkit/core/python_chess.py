"""IBoard implementation backed by the python-chess library."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import chess

from pgnkit.core.board import STANDARD_FEN, IBoard, UnsupportedVariantError
from pgnkit.core.enums import NotationStyle, Variant

_LOGGER = logging.getLogger(__name__)
_SUFFIX_ANNOTATIONS = "!?"


class PythonChessBoard(IBoard):
    """Standard chess and Chess960 on top of :class:`chess.Board`."""

    __slots__ = ("_board",)

    def __init__(self, fen: str = STANDARD_FEN, *, chess960: bool = False) -> None:
        self._board = chess.Board(fen, chess960=chess960)

    @property
    def board(self) -> chess.Board:
        """The underlying python-chess board."""
        return self._board

    def set_board(self, fen: str) -> bool:
        previous = self._board.copy()
        try:
            self._board.set_fen(fen)
        except ValueError as exc:
            _LOGGER.debug("Rejected FEN %r: %s", fen, exc)
            self._board = previous
            return False
        if not self._board.is_valid():
            _LOGGER.debug("Rejected FEN %r: %s", fen, self._board.status())
            self._board = previous
            return False
        return True

    def move_from_string(self, text: str) -> chess.Move | None:
        token = text.rstrip(_SUFFIX_ANNOTATIONS)
        if not token:
            return None
        try:
            return self._board.parse_san(token)
        except ValueError:
            pass
        # Coordinate notation resolves without a legality check.
        try:
            return chess.Move.from_uci(token)
        except ValueError:
            return None

    def is_legal_move(self, move: chess.Move) -> bool:
        return self._board.is_legal(move)

    def make_move(self, move: chess.Move) -> None:
        self._board.push(move)

    def move_string(self, move: chess.Move, style: NotationStyle) -> str:
        if style == NotationStyle.LONG_ALGEBRAIC:
            return self._board.lan(move)
        if style == NotationStyle.COORDINATE:
            return self._board.uci(move)
        return self._board.san(move)

    def fen_string(self) -> str:
        return self._board.fen()

    @property
    def starting_fen(self) -> str:
        return self._board.root().fen()

    def variant(self) -> Variant:
        return Variant.STANDARD

    def is_random_variant(self) -> bool:
        return self._board.chess960

    def move_history(self) -> Sequence[chess.Move]:
        return list(self._board.move_stack)


def create_board(
    variant: Variant = Variant.STANDARD, random: bool = False
) -> PythonChessBoard:
    """Default board factory used by the reader and writer."""
    if variant != Variant.STANDARD:
        raise UnsupportedVariantError(
            f"python-chess cannot play the {variant.name.lower()} variant"
        )
    return PythonChessBoard(chess960=random)
