"""Game session: current snapshot plus move history with undo."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal

from chessmentor.core.enums import Color, GameStatus, MoveRejection
from chessmentor.core.errors import NotationError, SerializationError
from chessmentor.core.move import Move
from chessmentor.core.notation import parse_move
from chessmentor.core.piece import Piece
from chessmentor.core.rules import Rules
from chessmentor.core.serialization import state_from_dict, state_to_dict
from chessmentor.core.state import GameState, MoveResult, initialize, try_move
from chessmentor.core.types import Square, square_name

_LOGGER = logging.getLogger(__name__)

MoveSource = Literal["human", "advisor"]


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    state_before: GameState
    state_after: GameState
    captured: Piece | None = None
    source: MoveSource = "human"

    def describe(self, number: int) -> str:
        """Move-list line, e.g. ``1. ♟ e2 to e4``."""
        return (
            f"{number}. {self.piece.symbol} "
            f"{square_name(self.move.from_sq)} to {square_name(self.move.to_sq)}"
        )


class GameSession:
    """Holds the current :class:`GameState` and the moves that led to it.

    Human clicks and advisor suggestions go through the same validation path;
    a rejected move leaves the session untouched.
    """

    __slots__ = ("_start", "_state", "_history")

    def __init__(self, start: GameState | None = None) -> None:
        self._start = start if start is not None else initialize()
        self._state = self._start
        self._history: list[MoveRecord] = []

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def start_state(self) -> GameState:
        return self._start

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def current_player(self) -> Color:
        return self._state.current_player

    @property
    def is_over(self) -> bool:
        return self._state.is_over

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self._history)

    # ── Moves ────────────────────────────────────────────────────────────

    def submit_move(
        self, from_sq: Square, to_sq: Square, source: MoveSource = "human"
    ) -> MoveResult:
        """Validate and apply a move. Returns the tagged outcome."""
        before = self._state
        if before.is_over:
            return MoveResult(before, Move(from_sq, to_sq), MoveRejection.GAME_OVER)

        result = try_move(before, from_sq, to_sq)
        if not result.ok:
            _LOGGER.info("%s move rejected: %s", source, result.rejection)
            return result

        piece = before.board[from_sq]
        assert piece is not None
        self._history.append(
            MoveRecord(
                move=result.move,
                piece=piece,
                state_before=before,
                state_after=result.state,
                captured=result.captured,
                source=source,
            )
        )
        self._state = result.state
        if self._state.is_over:
            _LOGGER.info("Game over: %s", self._state.status)
        return result

    def submit_notation(self, text: str, source: MoveSource = "advisor") -> MoveResult:
        """Parse coordinate notation and submit it like any other move.

        Raises :class:`NotationError` before any legality check.
        """
        move = parse_move(text)
        return self.submit_move(move.from_sq, move.to_sq, source)

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        """Squares the piece on *from_sq* may move to."""
        if self._state.is_over:
            return []
        return Rules.legal_destinations(self._state, from_sq)

    def undo(self) -> MoveRecord | None:
        """Undo the last move. Returns the undone record, or None if empty."""
        if not self._history:
            return None
        record = self._history.pop()
        self._state = record.state_before
        return record

    def restart(self) -> None:
        self._state = self._start
        self._history.clear()

    def move_list(self) -> list[str]:
        return [record.describe(i + 1) for i, record in enumerate(self._history)]

    # ── Persistence ──────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": state_to_dict(self._start),
            "moves": [
                {"move": str(record.move), "source": record.source}
                for record in self._history
            ],
            "state": state_to_dict(self._state),
        }

    @classmethod
    def from_dict(cls, data: Any) -> GameSession:
        """Rebuild a session by replaying its move list from the start state."""
        if not isinstance(data, dict):
            raise SerializationError("Session document must be an object")
        try:
            start = state_from_dict(data["start"])
            moves = data["moves"]
            expected = state_from_dict(data["state"])
        except KeyError as exc:
            raise SerializationError(f"Missing field {exc.args[0]!r}") from None
        if not isinstance(moves, list):
            raise SerializationError("Session moves must be a list")

        session = cls(start)
        for entry in moves:
            if not isinstance(entry, dict) or "move" not in entry:
                raise SerializationError(f"Invalid move entry: {entry!r}")
            source = entry.get("source", "human")
            if source not in ("human", "advisor"):
                raise SerializationError(f"Invalid move source: {source!r}")
            try:
                result = session.submit_notation(entry["move"], source)
            except NotationError as exc:
                raise SerializationError(str(exc)) from None
            if not result.ok:
                raise SerializationError(
                    f"Stored move {entry['move']!r} is illegal: {result.rejection}"
                )
        if session.state != expected:
            raise SerializationError("Replayed moves do not reproduce the stored state")
        return session
