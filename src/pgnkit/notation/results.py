"""Mapping between termination markers and :class:`GameResult`."""

from __future__ import annotations

from pgnkit.core.enums import GameResult

TERMINATION_MARKERS = frozenset({"*", "1-0", "0-1", "1/2-1/2"})


def pgn_result_token(result: GameResult) -> str:
    """Convert :class:`GameResult` to a PGN termination marker."""
    if result.is_white_win:
        return "1-0"
    if result.is_black_win:
        return "0-1"
    if result.is_draw:
        return "1/2-1/2"
    return "*"


def game_result_from_pgn(token: str) -> GameResult:
    """Convert a PGN termination marker to :class:`GameResult`.

    Anything that is not a marker maps to ``RESULT_ERROR``.
    """
    if token == "*":
        return GameResult.NO_RESULT
    if token == "1-0":
        return GameResult.WHITE_MATES
    if token == "0-1":
        return GameResult.BLACK_MATES
    if token == "1/2-1/2":
        return GameResult.DRAW_BY_AGREEMENT
    return GameResult.RESULT_ERROR
