"""PGN reading: a character-level item classifier and the game driver.

PGN items share leading characters (``1`` may start a move number or
``1-0``; ``$`` a NAG; ``.`` is move-number punctuation), so items are
classified by a stateful scan rather than by splitting lines. The order
of the checks in :meth:`PgnReader.read_item` decides ambiguous prefixes
and must not be rearranged.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from typing import TextIO

from pgnkit.core.board import STANDARD_FEN, IBoard
from pgnkit.core.enums import GameResult, PgnErrorReason, PgnItemKind, Variant
from pgnkit.core.python_chess import create_board
from pgnkit.notation.models import GameRecord, PgnItem, ReaderOptions
from pgnkit.notation.results import (
    TERMINATION_MARKERS,
    game_result_from_pgn,
    pgn_result_token,
)
from pgnkit.notation.stream import PgnStream

_LOGGER = logging.getLogger(__name__)

BoardFactory = Callable[[Variant, bool], IBoard]

_BRACKETS = {"[": "]", "(": ")", "{": "}"}
_ESCAPE_RE = re.compile(r'\\(["\\])')
_MAX_NAG = 255


class PgnReader:
    """Reads game records from PGN text.

    Args:
        source: PGN text, a text file object, or an existing stream.
        options: Reading limits.
        board_factory: Builds the working position for each game.
    """

    __slots__ = ("_stream", "_options", "_board_factory", "last_item")

    def __init__(
        self,
        source: str | TextIO | PgnStream,
        *,
        options: ReaderOptions | None = None,
        board_factory: BoardFactory = create_board,
    ) -> None:
        self._stream = source if isinstance(source, PgnStream) else PgnStream(source)
        self._options = options or ReaderOptions()
        self._board_factory = board_factory
        self.last_item: PgnItem | None = None

    @property
    def stream(self) -> PgnStream:
        return self._stream

    @property
    def last_error(self) -> PgnErrorReason | None:
        """Why the last :meth:`read_game` stopped early, or None.

        Running into the next game's tags and trailing whitespace at the
        end of the input are not errors.
        """
        item = self.last_item
        if item is None or not item.is_error or item.starts_next_game:
            return None
        if item.error == PgnErrorReason.EMPTY_TOKEN and self._stream.at_end:
            return None
        return item.error

    # ── Item classifier ──────────────────────────────────────────────────

    def read_item(self, record: GameRecord, board: IBoard) -> PgnItem:
        """Consume and classify the next item, updating *record* and *board*."""
        stream = self._stream
        stream.skip_whitespace()

        kind = PgnItemKind.MOVE
        opening = closing = ""
        depth = 0
        chars: list[str] = []

        while True:
            ch = stream.read()
            if not ch:
                break
            # Everything before the first tag is noise.
            if record.is_empty and kind != PgnItemKind.TAG and ch != "[":
                continue
            if ch in "\r\n" and kind != PgnItemKind.COMMENT:
                break

            if not opening:
                if not chars:
                    if ch == ";":
                        kind = PgnItemKind.COMMENT
                        chars.append(stream.read_line())
                        break
                    if ch == "%":
                        stream.read_line()
                        continue
                    if ch == ".":
                        stream.skip_whitespace()
                        continue
                    if ch == "$":
                        kind = PgnItemKind.NAG
                        continue
                    if ch.isdigit() and kind == PgnItemKind.MOVE:
                        kind = PgnItemKind.MOVE_NUMBER

                if ch == "[":
                    if record.moves:
                        # This is the next game's first tag: hand it back.
                        stream.unread()
                        _LOGGER.debug("No termination marker before next game")
                        return PgnItem.failure(PgnErrorReason.NEXT_GAME)
                    kind = PgnItemKind.TAG
                elif ch in _BRACKETS:
                    kind = PgnItemKind.COMMENT
                if ch in _BRACKETS:
                    opening, closing = ch, _BRACKETS[ch]

            if ch == opening:
                depth += 1
            elif ch == closing:
                depth -= 1
                if depth == 0:
                    break
            elif ch.isspace() and kind in (
                PgnItemKind.MOVE,
                PgnItemKind.MOVE_NUMBER,
                PgnItemKind.NAG,
            ):
                break
            elif ch == "." and kind == PgnItemKind.MOVE_NUMBER:
                break
            else:
                chars.append(ch)

        text = "".join(chars).strip()
        if depth:
            _LOGGER.warning("Unterminated %r in: %s", opening, text)
            return PgnItem.failure(PgnErrorReason.UNTERMINATED, text)
        if not text:
            return PgnItem.failure(PgnErrorReason.EMPTY_TOKEN)

        if (
            kind in (PgnItemKind.MOVE, PgnItemKind.MOVE_NUMBER)
            and text in TERMINATION_MARKERS
        ):
            return self._read_termination(record, text)
        if kind == PgnItemKind.TAG:
            return self._read_tag(record, board, text)
        if kind == PgnItemKind.MOVE:
            return self._read_move(record, board, text)
        if kind == PgnItemKind.NAG:
            return self._read_nag(text)
        return PgnItem(kind, text)

    def _read_termination(self, record: GameRecord, text: str) -> PgnItem:
        result = game_result_from_pgn(text)
        if record.result != GameResult.NO_RESULT and result != record.result:
            _LOGGER.warning(
                "Termination marker %s differs from the result tag %s",
                text,
                pgn_result_token(record.result),
            )
        record.result = result
        return PgnItem(PgnItemKind.RESULT, text)

    def _read_tag(self, record: GameRecord, board: IBoard, text: str) -> PgnItem:
        name, _, param = text.partition(" ")
        value = _unquote(param)

        if name == "White":
            record.white_player = value
        elif name == "Black":
            record.black_player = value
        elif name == "Result":
            record.result = game_result_from_pgn(value)
            if record.result == GameResult.RESULT_ERROR:
                _LOGGER.warning("Invalid result: %s", value)
        elif name == "FEN":
            record.starting_fen = value
            if not board.set_board(value):
                _LOGGER.warning("Invalid FEN: %s", value)
                return PgnItem.failure(PgnErrorReason.INVALID_FEN, text)
        return PgnItem(PgnItemKind.TAG, text)

    def _read_move(self, record: GameRecord, board: IBoard, text: str) -> PgnItem:
        if record.is_empty:
            _LOGGER.warning("No tags found before move %s", text)
            return PgnItem.failure(PgnErrorReason.NO_TAGS, text)

        move = board.move_from_string(text)
        if move is None:
            _LOGGER.warning("Unresolved move: %s", text)
            return PgnItem.failure(PgnErrorReason.UNRESOLVED_MOVE, text)
        if not board.is_legal_move(move):
            _LOGGER.warning("Illegal move: %s", text)
            return PgnItem.failure(PgnErrorReason.ILLEGAL_MOVE, text)

        record.moves.append(move)
        board.make_move(move)
        return PgnItem(PgnItemKind.MOVE, text)

    def _read_nag(self, text: str) -> PgnItem:
        nag = int(text) if text.isdecimal() else -1
        if not 0 <= nag <= _MAX_NAG:
            _LOGGER.warning("Invalid NAG: %s", text)
            return PgnItem.failure(PgnErrorReason.INVALID_NAG, text)
        return PgnItem(PgnItemKind.NAG, text, nag=nag)

    # ── Game driver ──────────────────────────────────────────────────────

    def read_game(self, max_plies: int | None = None) -> GameRecord:
        """Read items into a new record until a result, an error, the ply
        cap or the end of input.

        A record that stopped on an error keeps whatever it had reached;
        check :attr:`last_error` to decide whether to keep it.
        """
        limit = self._options.max_plies if max_plies is None else max_plies
        board = self._board_factory(Variant.STANDARD, False)
        board.set_board(STANDARD_FEN)
        record = GameRecord(starting_fen=board.fen_string())
        self.last_item = None

        while not self._stream.at_end and len(record.moves) < limit:
            item = self.read_item(record, board)
            self.last_item = item
            if item.kind == PgnItemKind.ERROR:
                break
            if item.kind == PgnItemKind.TAG:
                record.is_empty = False
            elif item.kind == PgnItemKind.RESULT:
                break
        return record

    def iter_games(self, *, include_invalid: bool = False) -> Iterator[GameRecord]:
        """Yield every game in the input, in order.

        Games that stopped on a parse error are skipped unless
        *include_invalid* is set.
        """
        index = 0
        while not self._stream.at_end:
            record = self.read_game()
            if record.is_empty:
                continue
            index += 1
            reason = self.last_error
            if reason is not None and not include_invalid:
                _LOGGER.info("Skipping game %d: %s", index, reason)
                continue
            yield record


def _unquote(param: str) -> str:
    value = param.strip()
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return _ESCAPE_RE.sub(r"\1", value[1:-1])
    return value.replace('"', "")


def read_game(
    source: str | TextIO,
    *,
    options: ReaderOptions | None = None,
    board_factory: BoardFactory = create_board,
) -> GameRecord:
    """Read the first game from *source*."""
    return PgnReader(source, options=options, board_factory=board_factory).read_game()


def read_games(
    source: str | TextIO,
    *,
    options: ReaderOptions | None = None,
    board_factory: BoardFactory = create_board,
    include_invalid: bool = False,
) -> Iterator[GameRecord]:
    """Yield every game from *source*."""
    reader = PgnReader(source, options=options, board_factory=board_factory)
    yield from reader.iter_games(include_invalid=include_invalid)
