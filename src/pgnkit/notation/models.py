"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pgnkit.core.board import STANDARD_FEN, Move
from pgnkit.core.enums import (
    GameResult,
    NotationStyle,
    PgnErrorReason,
    PgnItemKind,
    Variant,
)

if TYPE_CHECKING:
    from pgnkit.core.board import IBoard

DEFAULT_MAX_PLIES = 1000


@dataclass(slots=True)
class GameRecord:
    """A game read from, or about to be written to, PGN text.

    ``is_empty`` stays True until the first tag is read; a record that
    never sees a tag holds no game.
    """

    white_player: str = ""
    black_player: str = ""
    moves: list[Move] = field(default_factory=list)
    starting_fen: str = STANDARD_FEN
    variant: Variant = Variant.STANDARD
    is_random_variant: bool = False
    result: GameResult = GameResult.NO_RESULT
    round: int = 0
    is_empty: bool = True

    @classmethod
    def from_board(
        cls,
        board: IBoard,
        *,
        white_player: str,
        black_player: str,
        result: GameResult = GameResult.NO_RESULT,
        round: int = 0,
    ) -> GameRecord:
        """Snapshot a finished (or running) game played on *board*."""
        return cls(
            white_player=white_player,
            black_player=black_player,
            moves=list(board.move_history()),
            starting_fen=board.starting_fen,
            variant=board.variant(),
            is_random_variant=board.is_random_variant(),
            result=result,
            round=round,
            is_empty=False,
        )

    @property
    def ply_count(self) -> int:
        return len(self.moves)


@dataclass(slots=True, frozen=True)
class PgnItem:
    """One classified item read from a PGN stream."""

    kind: PgnItemKind
    text: str = ""
    nag: int | None = None
    error: PgnErrorReason | None = None

    @classmethod
    def failure(cls, reason: PgnErrorReason, text: str = "") -> PgnItem:
        return cls(PgnItemKind.ERROR, text, error=reason)

    @property
    def is_error(self) -> bool:
        return self.kind == PgnItemKind.ERROR

    @property
    def starts_next_game(self) -> bool:
        """True for the tag-after-moves error: the stream was rewound so the
        next read starts at the following game's first tag."""
        return self.error == PgnErrorReason.NEXT_GAME


@dataclass(slots=True, frozen=True)
class ReaderOptions:
    """Limits applied while reading games."""

    max_plies: int = DEFAULT_MAX_PLIES

    def __post_init__(self) -> None:
        if self.max_plies <= 0:
            raise ValueError(f"max_plies must be positive, got {self.max_plies}")


@dataclass(slots=True, frozen=True)
class WriterOptions:
    """Layout of serialised movetext."""

    plies_per_line: int = 8
    notation: NotationStyle = NotationStyle.STANDARD_ALGEBRAIC

    def __post_init__(self) -> None:
        if self.plies_per_line <= 0:
            raise ValueError(
                f"plies_per_line must be positive, got {self.plies_per_line}"
            )
