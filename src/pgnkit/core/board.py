"""Board collaborator interface consumed by the PGN reader and writer.

The PGN layer never looks inside a move or a position; every rules
question goes through :class:`IBoard`, so any engine (or a test stub)
can stand behind it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, TypeAlias

from pgnkit.core.enums import NotationStyle, Variant

Move: TypeAlias = Any
"""Opaque move value owned by the board implementation."""

STANDARD_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
CAPABLANCA_FEN = (
    "rnabqkbcnr/pppppppppp/10/10/10/10/PPPPPPPPPP/RNABQKBCNR w KQkq - 0 1"
)
GOTHIC_FEN = (
    "rnbqckabnr/pppppppppp/10/10/10/10/PPPPPPPPPP/RNBQCKABNR w KQkq - 0 1"
)


def default_fen(variant: Variant) -> str:
    """Standard initial position of *variant*."""
    if variant == Variant.CAPABLANCA:
        return CAPABLANCA_FEN
    return STANDARD_FEN


class UnsupportedVariantError(ValueError):
    """Raised when no board implementation can play the requested variant."""


class IBoard(ABC):
    """Working position used while reading or replaying a game."""

    @abstractmethod
    def set_board(self, fen: str) -> bool:
        """Set the position from *fen*. Returns False if it is malformed."""

    @abstractmethod
    def move_from_string(self, text: str) -> Move | None:
        """Resolve *text* to a move in the current position.

        Returns None when the text cannot be resolved at all; a resolved
        move may still be illegal (see :meth:`is_legal_move`).
        """

    @abstractmethod
    def is_legal_move(self, move: Move) -> bool: ...

    @abstractmethod
    def make_move(self, move: Move) -> None: ...

    @abstractmethod
    def move_string(self, move: Move, style: NotationStyle) -> str:
        """Render *move* (legal in the current position) as text."""

    @abstractmethod
    def fen_string(self) -> str: ...

    @property
    @abstractmethod
    def starting_fen(self) -> str:
        """FEN of the position the move history starts from."""

    @abstractmethod
    def variant(self) -> Variant: ...

    @abstractmethod
    def is_random_variant(self) -> bool: ...

    @abstractmethod
    def move_history(self) -> Sequence[Move]: ...
