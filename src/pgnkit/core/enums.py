"""Core enumerations for the PGN layer."""

from __future__ import annotations

from enum import IntEnum, StrEnum, auto


class GameResult(IntEnum):
    """Outcome of a game, including the reason where it is known."""

    NO_RESULT = 0
    WHITE_MATES = auto()
    BLACK_RESIGNS = auto()
    BLACK_MATES = auto()
    WHITE_RESIGNS = auto()
    STALEMATE = auto()
    DRAW_BY_MATERIAL = auto()
    DRAW_BY_REPETITION = auto()
    DRAW_BY_FIFTY_MOVES = auto()
    DRAW_BY_AGREEMENT = auto()
    RESULT_ERROR = auto()

    @property
    def is_white_win(self) -> bool:
        return self in (GameResult.WHITE_MATES, GameResult.BLACK_RESIGNS)

    @property
    def is_black_win(self) -> bool:
        return self in (GameResult.BLACK_MATES, GameResult.WHITE_RESIGNS)

    @property
    def is_draw(self) -> bool:
        return self in _DRAWS


_DRAWS = frozenset(
    {
        GameResult.STALEMATE,
        GameResult.DRAW_BY_MATERIAL,
        GameResult.DRAW_BY_REPETITION,
        GameResult.DRAW_BY_FIFTY_MOVES,
        GameResult.DRAW_BY_AGREEMENT,
    }
)


class Variant(IntEnum):
    """Rule set / board layout family."""

    STANDARD = 0
    CAPABLANCA = 1  # 10x8 board with archbishop and chancellor


class NotationStyle(IntEnum):
    """Move text styles a board can render."""

    STANDARD_ALGEBRAIC = 0
    LONG_ALGEBRAIC = 1
    COORDINATE = 2


class PgnItemKind(StrEnum):
    """Classification of a single item read from PGN text."""

    TAG = "tag"
    MOVE = "move"
    MOVE_NUMBER = "move_number"
    COMMENT = "comment"
    NAG = "nag"
    RESULT = "result"
    ERROR = "error"


class PgnErrorReason(StrEnum):
    """Why an item was classified as an error."""

    EMPTY_TOKEN = "empty token"
    NEXT_GAME = "tag after moves; next game begins"
    NO_TAGS = "move before any tag"
    INVALID_FEN = "invalid FEN"
    UNRESOLVED_MOVE = "unresolved move"
    ILLEGAL_MOVE = "illegal move"
    INVALID_NAG = "invalid NAG"
    UNTERMINATED = "unterminated bracket"
