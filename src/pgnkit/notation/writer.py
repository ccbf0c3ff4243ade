"""PGN serialization and append-only storage."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from pgnkit.core.board import CAPABLANCA_FEN, GOTHIC_FEN, STANDARD_FEN, IBoard
from pgnkit.core.enums import Variant
from pgnkit.core.python_chess import create_board
from pgnkit.notation.models import GameRecord, WriterOptions
from pgnkit.notation.results import pgn_result_token

_LOGGER = logging.getLogger(__name__)


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _variant_headers(record: GameRecord) -> tuple[str, bool]:
    """Return the Variant tag value ("" for none) and whether a FEN tag is needed."""
    variant_name = ""
    use_fen = False
    if record.variant == Variant.STANDARD:
        if record.starting_fen != STANDARD_FEN:
            use_fen = True
        if record.is_random_variant:
            variant_name = "Fischerandom"
    elif record.variant == Variant.CAPABLANCA:
        if record.starting_fen == CAPABLANCA_FEN:
            variant_name = "Capablanca"
        elif record.starting_fen == GOTHIC_FEN:
            variant_name = "Gothic"
        else:
            use_fen = True
        if record.is_random_variant:
            variant_name = "Capablancarandom"
    return variant_name, use_fen


def format_game(
    record: GameRecord,
    *,
    board: IBoard | None = None,
    options: WriterOptions | None = None,
    today: date | None = None,
) -> str:
    """Serialise *record* to PGN text.

    Moves are replayed on *board* (a fresh one for the record's variant
    by default) to render them. An empty record yields ``""``.
    """
    if record.is_empty:
        return ""
    opts = options or WriterOptions()
    result_token = pgn_result_token(record.result)
    variant_name, use_fen = _variant_headers(record)
    day = today or date.today()

    headers: dict[str, str] = {
        "Date": day.strftime("%Y.%m.%d"),
        "White": record.white_player,
        "Black": record.black_player,
        "Result": result_token,
    }
    if variant_name:
        headers["Variant"] = variant_name
    if use_fen:
        headers["FEN"] = record.starting_fen

    parts = [f'[{key} "{_escape(value)}"]\n' for key, value in headers.items()]

    if board is None:
        board = create_board(record.variant, record.is_random_variant)
    if not board.set_board(record.starting_fen):
        raise ValueError(f"Cannot replay game from FEN: {record.starting_fen!r}")
    for ply, move in enumerate(record.moves):
        if ply % opts.plies_per_line == 0:
            parts.append("\n")
        if ply % 2 == 0:
            parts.append(f"{ply // 2 + 1}. ")
        parts.append(board.move_string(move, opts.notation))
        parts.append(" ")
        board.make_move(move)

    parts.append(f"{result_token}\n\n")
    return "".join(parts)


def write_game(
    record: GameRecord,
    path: str | Path,
    *,
    board: IBoard | None = None,
    options: WriterOptions | None = None,
    today: date | None = None,
) -> bool:
    """Append *record* to the PGN file at *path*.

    Returns False if the file could not be written; storage errors are
    logged, never raised. Writing an empty record is a successful no-op.
    """
    if record.is_empty:
        return True
    text = format_game(record, board=board, options=options, today=today)
    try:
        with open(path, "a", encoding="utf-8") as out:
            out.write(text)
    except OSError as exc:
        _LOGGER.warning("Cannot append game to %s: %s", path, exc)
        return False
    return True
