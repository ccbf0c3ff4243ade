"""Tests for the termination-marker mapping."""

import pytest

from pgnkit.core.enums import GameResult
from pgnkit.notation import game_result_from_pgn, pgn_result_token


class TestResultMapping:
    @pytest.mark.parametrize(
        ("result", "token"),
        [
            (GameResult.WHITE_MATES, "1-0"),
            (GameResult.BLACK_RESIGNS, "1-0"),
            (GameResult.BLACK_MATES, "0-1"),
            (GameResult.WHITE_RESIGNS, "0-1"),
            (GameResult.STALEMATE, "1/2-1/2"),
            (GameResult.DRAW_BY_MATERIAL, "1/2-1/2"),
            (GameResult.DRAW_BY_REPETITION, "1/2-1/2"),
            (GameResult.DRAW_BY_FIFTY_MOVES, "1/2-1/2"),
            (GameResult.DRAW_BY_AGREEMENT, "1/2-1/2"),
            (GameResult.NO_RESULT, "*"),
            (GameResult.RESULT_ERROR, "*"),
        ],
    )
    def test_result_to_token(self, result: GameResult, token: str) -> None:
        assert pgn_result_token(result) == token

    def test_token_to_result(self) -> None:
        assert game_result_from_pgn("1-0") == GameResult.WHITE_MATES
        assert game_result_from_pgn("0-1") == GameResult.BLACK_MATES
        assert game_result_from_pgn("1/2-1/2") == GameResult.DRAW_BY_AGREEMENT
        assert game_result_from_pgn("*") == GameResult.NO_RESULT

    @pytest.mark.parametrize("token", ["", "2-0", "1/2", "draw"])
    def test_unknown_token(self, token: str) -> None:
        assert game_result_from_pgn(token) == GameResult.RESULT_ERROR

    def test_result_groups(self) -> None:
        assert GameResult.BLACK_RESIGNS.is_white_win
        assert GameResult.WHITE_RESIGNS.is_black_win
        assert GameResult.DRAW_BY_REPETITION.is_draw
        assert not GameResult.NO_RESULT.is_draw
        assert not GameResult.RESULT_ERROR.is_white_win
