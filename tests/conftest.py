"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from pgnkit.core.board import STANDARD_FEN, IBoard
from pgnkit.core.enums import NotationStyle, Variant


class StubBoard(IBoard):
    """Rules-free board: every move token is legal except ``"??"`` ones.

    Moves are the token strings themselves, which makes movetext layout
    easy to assert on.
    """

    def __init__(self, variant: Variant = Variant.STANDARD, random: bool = False) -> None:
        self._variant = variant
        self._random = random
        self._start = STANDARD_FEN
        self._history: list[str] = []
        self.fens_set: list[str] = []

    def set_board(self, fen: str) -> bool:
        if "/" not in fen:
            return False
        self.fens_set.append(fen)
        self._start = fen
        self._history.clear()
        return True

    def move_from_string(self, text: str) -> str | None:
        return None if text.startswith("!") else text

    def is_legal_move(self, move: str) -> bool:
        return not move.endswith("??")

    def make_move(self, move: str) -> None:
        self._history.append(move)

    def move_string(self, move: str, style: NotationStyle) -> str:
        return move

    def fen_string(self) -> str:
        return self._start if not self._history else f"{self._start} +{len(self._history)}"

    @property
    def starting_fen(self) -> str:
        return self._start

    def variant(self) -> Variant:
        return self._variant

    def is_random_variant(self) -> bool:
        return self._random

    def move_history(self) -> Sequence[str]:
        return list(self._history)


@pytest.fixture
def stub_board() -> StubBoard:
    return StubBoard()


@pytest.fixture
def stub_factory() -> Callable[[Variant, bool], StubBoard]:
    """Board factory for readers that should not depend on python-chess."""
    return StubBoard
