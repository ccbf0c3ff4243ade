"""Tests for the pgnkit command line."""

from pathlib import Path

import pytest

from pgnkit.app import main
from pgnkit.notation import read_games

_GAMES = (
    '[White "Anna"]\n[Black "Ben"]\n1. e4 e5 2. Nf3 1-0\n\n'
    '[White "Cleo"]\n1. d4 Kd5 *\n\n'
    '[White "Dan"]\n[Black "Eve"]\n1. c4 1/2-1/2\n'
)


@pytest.fixture
def source(tmp_path: Path) -> Path:
    path = tmp_path / "in.pgn"
    path.write_text(_GAMES, encoding="utf-8")
    return path


class TestList:
    def test_lists_valid_games(
        self, source: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["list", str(source)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "1. Anna - Ben 1-0 (3 plies)",
            "2. Dan - Eve 1/2-1/2 (1 plies)",
        ]

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main(["list", str(tmp_path / "nope.pgn")]) == 2

    def test_rejects_non_positive_ply_cap(self, source: Path) -> None:
        with pytest.raises(SystemExit):
            main(["--max-plies", "0", "list", str(source)])


class TestNormalize:
    def test_rewrites_valid_games(self, source: Path, tmp_path: Path) -> None:
        dest = tmp_path / "out.pgn"
        assert main(["normalize", str(source), str(dest)]) == 0
        games = list(read_games(dest.read_text(encoding="utf-8")))
        assert [(g.white_player, g.ply_count) for g in games] == [
            ("Anna", 3),
            ("Dan", 1),
        ]

    def test_ply_cap(self, source: Path, tmp_path: Path) -> None:
        dest = tmp_path / "out.pgn"
        assert main(["--max-plies", "2", "normalize", str(source), str(dest)]) == 0
        games = list(read_games(dest.read_text(encoding="utf-8")))
        assert [g.ply_count for g in games] == [2, 1]

    def test_unwritable_destination(self, source: Path, tmp_path: Path) -> None:
        assert main(["normalize", str(source), str(tmp_path)]) == 1
